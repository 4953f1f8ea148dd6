"""
配置系统模块

推荐使用:
    from rpush.core.config import get_config, configure
"""

from .types import (
    CURRENT_ATTRS,
    CONFIG_ATTRS,
    ApnsConfiguration,
    ApnsFeedbackReceiverConfiguration,
    ConfigurationWithoutDefaults,
)
from .configuration import Configuration
from .store import get_config, set_config, reset_config, configure
from .loader import load_config_file, apply_config_file

__all__ = [
    "CURRENT_ATTRS",
    "CONFIG_ATTRS",
    "ApnsConfiguration",
    "ApnsFeedbackReceiverConfiguration",
    "ConfigurationWithoutDefaults",
    "Configuration",
    "get_config",
    "set_config",
    "reset_config",
    "configure",
    "load_config_file",
    "apply_config_file",
]
