# config_manager is imported directly (it depends on core)
from .logger_utils import Log, setup_logging

__all__ = ["Log", "setup_logging"]
