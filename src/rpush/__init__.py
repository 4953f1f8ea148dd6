# -*- coding: utf-8 -*-
"""
Rpush 推送服务配置

    import rpush

    rpush.configure(lambda config: setattr(config, "client", "redis"))
    Apns = rpush.get_config().notification_types["Apns"]
"""

from .core.exceptions import RpushError, ConfigurationError, ClientBackendNotFoundError, ConfigFileError
from .core.config import (
    Configuration,
    ConfigurationWithoutDefaults,
    ApnsConfiguration,
    ApnsFeedbackReceiverConfiguration,
    get_config,
    set_config,
    reset_config,
    configure,
    load_config_file,
    apply_config_file,
)
from .utils.paths import get_root, set_root

__version__ = "2.5.0"

__all__ = [
    "RpushError",
    "ConfigurationError",
    "ClientBackendNotFoundError",
    "ConfigFileError",
    "Configuration",
    "ConfigurationWithoutDefaults",
    "ApnsConfiguration",
    "ApnsFeedbackReceiverConfiguration",
    "get_config",
    "set_config",
    "reset_config",
    "configure",
    "load_config_file",
    "apply_config_file",
    "get_root",
    "set_root",
]
