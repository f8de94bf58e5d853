"""Module entry point for running treetiles as ``python -m treetiles``."""

from __future__ import annotations

import sys
import traceback
from datetime import datetime

from treetiles.cli import main as cli_main
from treetiles.config import launch_log_path


def _log_launch_exception(exc: BaseException) -> None:
    """Append the traceback of a crashed run to the launch log for debugging."""
    try:
        log_path = launch_log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"\n[{datetime.now().isoformat(timespec='seconds')}]\n")
            fh.writelines(traceback.format_exception(type(exc), exc, exc.__traceback__))
    except OSError:
        # If logging fails we do not want to mask the original exception.
        pass


def main() -> None:
    try:
        code = cli_main()
    except Exception as exc:  # pragma: no cover - we only hit this when a run crashes
        _log_launch_exception(exc)
        raise
    sys.exit(code)


if __name__ == "__main__":
    main()
