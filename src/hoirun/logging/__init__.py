from hoirun.logging.factory import DefaultLoggerFactory
from hoirun.logging.helpers import get_logger, setup_base_logger

__all__ = ["DefaultLoggerFactory", "get_logger", "setup_base_logger"]
