"""Console logging setup with timestamped, level-tagged lines."""

import logging

LOG_FORMAT = "[%(asctime)s %(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "abyssal_watcher"


def init_logger() -> logging.Handler:
    """Install the console handler on the root logger at INFO level.

    Calling it again returns the handler already installed.
    """
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    return handler