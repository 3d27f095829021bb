# src/cert_config.py
from pathlib import Path
import os
import logging
from dotenv import load_dotenv

LOG_FORMAT = "[%(asctime)s %(levelname)s] %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOGGERS = ("cert_common", "cert_config", "cert_decoder")

_handler = None

def load_config():
    env_path = Path.cwd() / ".env"
    load_dotenv(dotenv_path=str(env_path))
    level = os.getenv("CERT_DECODER_LOG_LEVEL", "WARNING").upper()
    return {
        "log_level": level if level in LOG_LEVELS else "WARNING",
    }

def configure_logging(level: str = "WARNING"):
    # only our own loggers; the root logger is left to the caller
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    for name in LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        if _handler not in logger.handlers:
            logger.addHandler(_handler)
    return _handler
