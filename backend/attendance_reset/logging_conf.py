import logging
from structlog import wrap_logger

# Parent of every module logger in this package
ROOT_LOGGER = __name__.rsplit(".", 1)[0]


def get_logger(name: str = ROOT_LOGGER):
    logger = logging.getLogger(name)
    if not logger.handlers:
        logging.basicConfig(level=logging.INFO)
    return wrap_logger(logger)


def configure_logging(level: str = "INFO") -> None:
    """Set the level shared by all module loggers of this package."""
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)
    logging.getLogger(ROOT_LOGGER).setLevel(level.upper())
