# -*- coding: utf-8 -*-
"""
配置类型定义
"""

from typing import Any, Optional, Tuple
from dataclasses import dataclass, field

from ..deprecation import DEPRECATED_ATTRS


CURRENT_ATTRS: Tuple[str, ...] = (
    "push_poll",
    "embedded",
    "pid_file",
    "batch_size",
    "push",
    "client",
    "logger",
    "log_file",
    "foreground",
    "log_level",
    "plugin",
    "apns",
)
CONFIG_ATTRS: Tuple[str, ...] = CURRENT_ATTRS + tuple(DEPRECATED_ATTRS)


@dataclass
class ApnsFeedbackReceiverConfiguration:
    """APNs 反馈接收配置"""
    frequency: int = 60    # 轮询间隔（秒）
    enabled: bool = True


@dataclass
class ApnsConfiguration:
    """APNs 协议配置"""
    feedback_receiver: ApnsFeedbackReceiverConfiguration = field(
        default_factory=ApnsFeedbackReceiverConfiguration
    )


@dataclass
class ConfigurationWithoutDefaults:
    """
    无默认值的配置
    只携带显式提供的选项（配置文件、命令行参数），用作 Configuration.update 的参数
    """
    push_poll: Optional[int] = None
    embedded: Optional[bool] = None
    pid_file: Optional[str] = None
    batch_size: Optional[int] = None
    push: Optional[bool] = None
    client: Optional[str] = None
    logger: Any = None
    log_file: Optional[str] = None
    foreground: Optional[bool] = None
    log_level: Optional[int] = None
    plugin: Any = None
    apns: Optional[ApnsConfiguration] = None
    
    # 废弃字段
    log_dir: Optional[str] = None
    feedback_poll: Optional[int] = None
