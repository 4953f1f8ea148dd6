# -*- coding: utf-8 -*-
"""
配置存储（进程内单例）

使用方式：
    from rpush import configure, get_config

    def setup(config):
        config.client = "redis"
        config.batch_size = 500

    configure(setup)
    cfg = get_config()
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from loguru import logger

from .configuration import Configuration


_config: Optional[Configuration] = None
_lock = threading.Lock()


def get_config() -> Configuration:
    """获取配置实例（首次访问时创建）"""
    global _config
    if _config is None:
        with _lock:
            if _config is None:
                _config = Configuration()
                logger.debug("[Config] 已创建默认配置")
    return _config


def set_config(config: Configuration) -> None:
    """替换全局配置实例"""
    global _config
    with _lock:
        _config = config


def reset_config() -> None:
    """丢弃全局配置实例，下次访问时重新创建（测试用）"""
    global _config
    with _lock:
        _config = None


def configure(block: Optional[Callable[[Configuration], None]] = None) -> None:
    """
    在回调中修改配置，然后初始化客户端

    Args:
        block: 接收配置实例的回调；为 None 时什么也不做
    """
    if block is None:
        return
    config = get_config()
    block(config)
    config.initialize_client()
