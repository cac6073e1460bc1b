import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"

def get_logger(name: str = "payment-service", level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
