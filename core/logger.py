import logging
from logging.handlers import RotatingFileHandler

from core.config import LoggingConfig

ROOT_LOGGER_NAME = "vocabpro"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 5


class PrefixAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        return f"{self.extra['prefix']} {msg}", kwargs


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Install console and (when allowed) file handlers on the app logger.

    Safe to call more than once: previously installed handlers are replaced.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(config.level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.write_files and config.log_dir is not None:
        errors = RotatingFileHandler(
            config.log_dir / "error.log",
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        errors.setLevel(logging.ERROR)
        errors.setFormatter(formatter)
        logger.addHandler(errors)

        combined = RotatingFileHandler(
            config.log_dir / "combined.log",
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        combined.setFormatter(formatter)
        logger.addHandler(combined)

    logger.debug(
        "logging configured env=%s platform=%s files=%s",
        config.environment,
        config.platform,
        config.write_files,
    )
    return logger


def get_logger(name: str | None = None, prefix: str | None = None) -> logging.Logger | PrefixAdapter:
    full_name = f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME
    logger = logging.getLogger(full_name)
    if prefix:
        return PrefixAdapter(logger, {"prefix": prefix})
    return logger
