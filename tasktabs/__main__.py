"""Launcher for the two-tab task list.

Starts TaskTabsApp on a fresh in-memory store; nothing survives the
session. Pass ``--dev`` to route log records to ``textual console``
instead of the log file:

    python -m tasktabs --dev
    tasktabs --dev
"""

import sys
from typing import Optional

from tasktabs.logging_config import setup_logging, get_logger

logger = get_logger(__name__)

DEV_FLAG = "--dev"


def main(args: Optional[list[str]] = None) -> int:
    """Launch TaskTabs and block until the window closes.

    Args:
        args: Command-line arguments, sys.argv[1:] when omitted. Anything
              other than ``--dev`` is ignored.

    Returns:
        0 when the user quits (including Ctrl+C), 1 if the app crashed
    """
    if args is None:
        args = sys.argv[1:]

    dev_mode = DEV_FLAG in args
    setup_logging(use_textual_handler=dev_mode)

    # Textual import waits until handlers are installed
    from tasktabs.ui.app import TaskTabsApp

    app = TaskTabsApp()
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, closing TaskTabs")
        return 0
    except Exception:
        logger.error("TaskTabs crashed", exc_info=True)
        return 1

    logger.info(
        f"TaskTabs closed with {app.store.active_count} active and "
        f"{app.store.trashed_count} trashed task(s) discarded"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
