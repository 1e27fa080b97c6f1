"""Shared pytest fixtures and configuration for the display-manager test suite.

Guidelines
----------
* No test touches the real display subsystem; the provider is faked.
* No test reads or writes the user's home directory; layout files live
  under ``tmp_path``.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from display_manager.core.models import DisplayDescriptor
from display_manager.exceptions import ConfigurationBeginError, ConfigurationCommitError
from display_manager.settings import CONFIG_ENV_VAR, MAX_DISPLAYS_ENV_VAR


# ---------------------------------------------------------------------------
# Fake display backend
# ---------------------------------------------------------------------------

class FakeTransaction:
    """Records origin requests instead of moving displays."""

    def __init__(self, *, commit_fails: bool = False) -> None:
        self.requests: list[tuple[int, int, int]] = []
        self.committed = False
        self.cancelled = False
        self._commit_fails = commit_fails

    def set_origin(self, display_id: int, x: int, y: int) -> None:
        self.requests.append((display_id, x, y))

    def commit(self) -> None:
        if self._commit_fails:
            raise ConfigurationCommitError("commit rejected")
        self.committed = True

    def cancel(self) -> None:
        self.cancelled = True


class FakeDisplayProvider:
    """In-memory :class:`DisplayProvider` with scriptable failures."""

    def __init__(
        self,
        displays: Sequence[DisplayDescriptor] = (),
        *,
        begin_fails: bool = False,
        commit_fails: bool = False,
    ) -> None:
        self.displays = list(displays)
        self.begin_fails = begin_fails
        self.commit_fails = commit_fails
        self.transactions: list[FakeTransaction] = []
        self.max_requested: list[int] = []

    def list_displays(self, max_displays: int) -> list[DisplayDescriptor]:
        self.max_requested.append(max_displays)
        return list(self.displays[:max_displays])

    def begin_configuration(self) -> FakeTransaction:
        if self.begin_fails:
            raise ConfigurationBeginError("begin rejected")
        transaction = FakeTransaction(commit_fails=self.commit_fails)
        self.transactions.append(transaction)
        return transaction

    @property
    def last_transaction(self) -> FakeTransaction:
        return self.transactions[-1]


def display(id: int, width: int, height: int, x: int = 0, y: int = 0) -> DisplayDescriptor:
    """Shorthand for building a :class:`DisplayDescriptor`."""
    return DisplayDescriptor(id=id, width=width, height=height, x=x, y=y)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_display() -> Callable[..., DisplayDescriptor]:
    return display


@pytest.fixture
def make_provider() -> type[FakeDisplayProvider]:
    return FakeDisplayProvider


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "layouts.json"


@pytest.fixture
def cli_env(
    monkeypatch: pytest.MonkeyPatch,
    config_path: Path,
) -> Callable[..., FakeDisplayProvider]:
    """Point the CLI at a temporary layout file and a fake provider.

    Returns a function that installs a provider for the displays given
    and returns it, so a test can swap the "live" set between commands.
    """
    from display_manager.cli import app as app_module

    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))
    monkeypatch.delenv(MAX_DISPLAYS_ENV_VAR, raising=False)

    def install(*displays: DisplayDescriptor, **options: bool) -> FakeDisplayProvider:
        provider = FakeDisplayProvider(displays, **options)
        monkeypatch.setattr(app_module, "_build_provider", lambda: provider)
        return provider

    install()
    return install
