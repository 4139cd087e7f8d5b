import logging
import sys


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the package logger with a single stream handler."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("trade_analytics")
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Ensure propagation is disabled to avoid duplicate logs
    logger.propagate = False
    return logger
