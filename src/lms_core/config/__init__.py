"""Configuration system."""

from lms_core.config.loader import load_config
from lms_core.config.schema import LmsConfig

__all__ = ["LmsConfig", "load_config"]
