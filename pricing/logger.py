import sys
from contextlib import suppress
from loguru import logger
from pricing.config import get_config

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

# Silent when imported as a library; entry points opt in via configure_logging().
logger.disable("pricing")

_sink_id = None

def configure_logging() -> None:
    """Install the pricing stderr sink at get_config().log_level.

    Only the CLI and the Streamlit page call this. It replaces loguru's default
    sink once; later calls swap just the sink added here, so sinks added by a
    host program are left alone.
    """
    global _sink_id
    # 0 is loguru's default stderr sink; either may already be gone
    with suppress(ValueError):
        logger.remove(0 if _sink_id is None else _sink_id)
    _sink_id = logger.add(
        sink=sys.stderr,
        level=get_config().log_level.upper(),
        format=LOG_FORMAT,
    )
    logger.enable("pricing")

def get_logger(name: str = None):
    """Get the package logger, bound to ``name`` when given.

    Args:
        name (str, optional): Name for the logger context. Defaults to None.
    Returns:
        loguru.Logger: The shared loguru logger; no sinks are touched.
    """
    if name:
        return logger.bind(name=name)
    return logger
