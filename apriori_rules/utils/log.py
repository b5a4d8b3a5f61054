import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger, once."""
    logger = logging.getLogger("apriori_rules")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    # route warnings.warn (e.g. IterationCapWarning) through logging as well
    logging.captureWarnings(True)
    return logger
