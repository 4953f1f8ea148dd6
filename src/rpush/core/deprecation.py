# -*- coding: utf-8 -*-
"""
废弃提示

废弃的配置项在 DEPRECATED_ATTRS 表中登记（属性名 -> (版本, 替代提示)），
Configuration 的通用 setter 逻辑查表后先输出警告日志，再委托给原 setter。
每次调用都会输出一条日志，除非处于 Deprecation.muted() 中。
"""

import threading
from contextlib import contextmanager
from typing import Dict, Tuple, Iterator

from loguru import logger


# 属性名 -> (开始废弃的版本, 替代提示)
DEPRECATED_ATTRS: Dict[str, Tuple[str, str]] = {
    "log_dir": ("2.3.0", "Please use log_file instead."),
    "feedback_poll": ("2.5.0", "Please use apns.feedback_receiver.frequency= instead."),
}


class Deprecation:
    """废弃警告发射器"""
    
    _muted = False
    _lock = threading.Lock()
    
    @classmethod
    def warn(cls, message: str) -> None:
        """输出一条废弃警告（静音时跳过）"""
        if cls._muted:
            return
        logger.warning(f"[DEPRECATION] {message}")
    
    @classmethod
    @contextmanager
    def muted(cls) -> Iterator[None]:
        """在上下文中屏蔽废弃警告"""
        with cls._lock:
            previous = cls._muted
            cls._muted = True
        try:
            yield
        finally:
            with cls._lock:
                cls._muted = previous
    
    @classmethod
    def is_muted(cls) -> bool:
        return cls._muted


def deprecation_message(name: str, version: str, hint: str) -> str:
    """生成废弃提示文本"""
    return f"{name}= is deprecated and will be removed from Rpush {version}. {hint}"


def warn_attribute(name: str) -> bool:
    """
    如果属性已废弃则输出警告
    
    Args:
        name: 属性名
    
    Returns:
        属性是否已废弃
    """
    entry = DEPRECATED_ATTRS.get(name)
    if entry is None:
        return False
    version, hint = entry
    Deprecation.warn(deprecation_message(name, version, hint))
    return True
