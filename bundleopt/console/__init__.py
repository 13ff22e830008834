"""Rich, structured console output for bundleopt.

Usage:
    from bundleopt.console import logger

    logger.info("Loading build config...")
    logger.success("Resolved")
    logger.error("Unknown split dimension")

    logger.header("Resolution", "version 0.6.0")
    logger.key_value({"uncompress_native_libraries": True})
"""
from bundleopt.console.logger import Logger, get_logger

# Module-level singleton for convenient import
logger = get_logger()

__all__ = ["Logger", "get_logger", "logger"]
