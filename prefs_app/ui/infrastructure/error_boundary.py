from __future__ import annotations

import logging
import sys
import threading
import traceback


def install_error_boundary() -> None:
    """Install global exception hooks so unhandled errors end up in the log file."""

    log = logging.getLogger(__name__)

    def _handle(exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        try:
            msg = "".join(traceback.format_exception(exc_type, exc, tb))
            log.error("Unhandled exception\n%s", msg)
        finally:
            # Keep default behavior in console
            sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _handle

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        _handle(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
