import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s (%(filename)s:%(lineno)d)"

ROOT_LOGGER_NAME = "orbitshield"

# Handlers installed by setup_logger, replaced on every call
_handlers: list[logging.Handler] = []


def setup_logger(is_debug: bool = False, file_name: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.
    :param is_debug: Log at DEBUG level instead of INFO
    :param file_name: Optional file to also write the log to
    :return: The configured package logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if is_debug else logging.INFO)
    while _handlers:
        handler = _handlers.pop()
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    _handlers.append(stream_handler)

    if file_name:
        file_handler = logging.FileHandler(file_name)
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)

    for handler in _handlers:
        root.addHandler(handler)
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package hierarchy."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
