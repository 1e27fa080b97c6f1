"""Allow ``python -m display_manager`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m display_manager`` behaves identically to the
``display-manager`` console script.
"""

from __future__ import annotations

from display_manager.cli.app import cli

if __name__ == "__main__":
    cli()
