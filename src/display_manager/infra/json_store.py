"""Infrastructure: JSON-file persistence for named layouts.

The whole store lives in one pretty-printed JSON document::

    {"layouts": {"<name>": [{"id": 1, "width": 1920, "height": 1080, "x": 0, "y": 0}]}}

Rules
-----
* Every operation is a full load-mutate-save cycle; nothing is cached.
* Failures are soft: an unreadable file loads as an empty store and a
  failed write returns ``False``.  Both are logged, neither raises.
* Writes go to a temporary sibling file that is then renamed over the
  target, so a crash never leaves a half-written store.
* No locking; concurrent writers race and the last one wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from display_manager.core.models import (
    DisplayDescriptor,
    Layout,
    LayoutConfig,
    LoadStatus,
    RemoveOutcome,
    StoreSnapshot,
)

logger = logging.getLogger(__name__)

_UINT32_MAX: int = 0xFFFFFFFF
_DESCRIPTOR_FIELDS: tuple[str, ...] = ("id", "width", "height", "x", "y")


class LayoutFormatError(ValueError):
    """Raised internally when a document does not match the file format."""


# ---------------------------------------------------------------------------
# (De)serialisation
# ---------------------------------------------------------------------------

def _require_int(entry: dict[str, Any], key: str) -> int:
    value = entry.get(key)
    # bool is an int subclass; the file format does not accept it.
    if not isinstance(value, int) or isinstance(value, bool):
        raise LayoutFormatError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _descriptor_from_dict(entry: Any) -> DisplayDescriptor:
    if not isinstance(entry, dict):
        raise LayoutFormatError(f"display entry must be an object, got {entry!r}")
    values = {key: _require_int(entry, key) for key in _DESCRIPTOR_FIELDS}
    if not 0 <= values["id"] <= _UINT32_MAX:
        raise LayoutFormatError(f"display id out of range: {values['id']}")
    return DisplayDescriptor(**values)


def config_from_document(document: Any) -> LayoutConfig:
    """Decode a parsed JSON document into a :class:`LayoutConfig`.

    Decoding is all-or-nothing: any malformed entry rejects the document.

    Raises
    ------
    LayoutFormatError
        When the document does not match the file format.
    """
    if not isinstance(document, dict):
        raise LayoutFormatError("top level must be an object")
    raw_layouts = document.get("layouts")
    if not isinstance(raw_layouts, dict):
        raise LayoutFormatError("'layouts' must be an object")

    layouts: dict[str, Layout] = {}
    for name, entries in raw_layouts.items():
        if not isinstance(entries, list):
            raise LayoutFormatError(f"layout {name!r} must be a list")
        layouts[name] = tuple(_descriptor_from_dict(entry) for entry in entries)
    return LayoutConfig(layouts=layouts)


def config_to_document(config: LayoutConfig) -> dict[str, Any]:
    """Encode *config* as a JSON-ready dict, preserving layout order."""
    return {
        "layouts": {
            name: [
                {
                    "id": display.id,
                    "width": display.width,
                    "height": display.height,
                    "x": display.x,
                    "y": display.y,
                }
                for display in displays
            ]
            for name, displays in config.layouts.items()
        }
    }


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class JsonLayoutStore:
    """Concrete :class:`~display_manager.core.protocols.LayoutRepository`.

    Usage::

        store = JsonLayoutStore(Path.home() / ".display-manager.json")
        store.set_layout("desk", displays)
        store.load().config.layouts["desk"]
    """

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def load(self) -> StoreSnapshot:
        """Read the store from disk.  Never raises."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No layout file at %s; starting empty", self.path)
            return StoreSnapshot(config=LayoutConfig(), status=LoadStatus.MISSING)
        except (OSError, UnicodeDecodeError) as exc:
            return self._unreadable(f"cannot read file: {exc}")

        try:
            config = config_from_document(json.loads(text))
        except LayoutFormatError as exc:
            return self._unreadable(str(exc))
        except (ValueError, RecursionError) as exc:
            return self._unreadable(f"invalid JSON: {exc}")

        return StoreSnapshot(config=config, status=LoadStatus.LOADED)

    def _unreadable(self, reason: str) -> StoreSnapshot:
        logger.warning("Ignoring unreadable layout file %s (%s)", self.path, reason)
        return StoreSnapshot(
            config=LayoutConfig(),
            status=LoadStatus.UNREADABLE,
            error=reason,
        )

    def save(self, config: LayoutConfig) -> bool:
        """Replace the file with *config*; return ``False`` if that failed."""
        try:
            payload = json.dumps(config_to_document(config), indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            logger.error("Cannot serialise layouts: %s", exc)
            return False

        tmp_path: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error("Cannot write layout file %s: %s", self.path, exc)
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            return False

        logger.debug("Wrote %d layout(s) to %s", len(config.layouts), self.path)
        return True

    def set_layout(self, name: str, displays: Sequence[DisplayDescriptor]) -> bool:
        config = self.load().config
        config.layouts[name] = tuple(displays)
        return self.save(config)

    def remove_layout(self, name: str) -> RemoveOutcome:
        """Remove *name* if present.  The file is untouched when it is absent."""
        config = self.load().config
        if config.layouts.pop(name, None) is None:
            return RemoveOutcome.NOT_FOUND
        if not self.save(config):
            return RemoveOutcome.WRITE_FAILED
        return RemoveOutcome.REMOVED
