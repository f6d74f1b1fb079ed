"""Log output for the orrery: console always, a file when one is configured."""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# requests logs every connection through urllib3 at DEBUG
NOISY_LOGGERS = ("urllib3",)


def setup_logging(level="INFO", log_file=None):
    """Attach handlers to the ``solar_system`` logger.

    `level` may be a name ("DEBUG") or a number. Calling this again replaces
    the handlers from the previous call.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    package_logger = logging.getLogger("solar_system")
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    package_logger.debug("Logging to %s", log_file or "stdout only")
    return package_logger
