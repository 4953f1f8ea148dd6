# -*- coding: utf-8 -*-
"""Redis 客户端后端"""

import threading
from typing import Dict, Any, ClassVar

from .base import ApnsNotification, GcmNotification, WpnsNotification, AdmNotification


class RedisOptions:
    """Redis 连接选项（后端内共享）"""
    
    def __init__(self):
        self._options: Dict[str, Any] = {}
        self._lock = threading.Lock()
    
    @property
    def options(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._options)
    
    @options.setter
    def options(self, value: Dict[str, Any]) -> None:
        with self._lock:
            self._options = dict(value or {})
    
    def clear(self) -> None:
        with self._lock:
            self._options = {}


# 全局选项存储
redis_options = RedisOptions()


class Apns(ApnsNotification):
    backend: ClassVar[str] = "redis"


class Gcm(GcmNotification):
    backend: ClassVar[str] = "redis"


class Wpns(WpnsNotification):
    backend: ClassVar[str] = "redis"


class Adm(AdmNotification):
    backend: ClassVar[str] = "redis"
