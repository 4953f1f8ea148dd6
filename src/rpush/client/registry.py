# -*- coding: utf-8 -*-
"""
客户端后端注册表

后端标识 -> 工厂函数。工厂在首次加载时调用，结果按标识缓存，
每个后端在进程内只加载一次。添加新后端只需调用 register_backend。
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type, Union

from loguru import logger

from ..core.exceptions import ClientBackendNotFoundError
from .base import ApnsNotification, GcmNotification, WpnsNotification, AdmNotification


class ClientType(str, Enum):
    """内置客户端后端"""
    REDIS = "redis"
    ACTIVE_RECORD = "active_record"


@dataclass(frozen=True)
class ClientBackend:
    """已加载的客户端后端（四种消息类型 + 可选的共享选项存储）"""
    name: str
    apns: Type[ApnsNotification]
    gcm: Type[GcmNotification]
    wpns: Type[WpnsNotification]
    adm: Type[AdmNotification]
    options: Optional[Any] = None

    @property
    def notification_types(self) -> Dict[str, type]:
        """消息类型名 -> 类型"""
        return {
            "Apns": self.apns,
            "Gcm": self.gcm,
            "Wpns": self.wpns,
            "Adm": self.adm,
        }


BackendFactory = Callable[[], ClientBackend]


def client_name(client: Union[str, Enum, None]) -> Optional[str]:
    """标准化客户端标识"""
    if client is None:
        return None
    return client.value if isinstance(client, Enum) else str(client)


# ==================== 内置后端 ====================

def _load_redis() -> ClientBackend:
    from . import redis
    return ClientBackend(
        name=ClientType.REDIS.value,
        apns=redis.Apns,
        gcm=redis.Gcm,
        wpns=redis.Wpns,
        adm=redis.Adm,
        options=redis.redis_options,
    )


def _load_active_record() -> ClientBackend:
    from . import active_record
    return ClientBackend(
        name=ClientType.ACTIVE_RECORD.value,
        apns=active_record.Apns,
        gcm=active_record.Gcm,
        wpns=active_record.Wpns,
        adm=active_record.Adm,
    )


_factories: Dict[str, BackendFactory] = {
    ClientType.REDIS.value: _load_redis,
    ClientType.ACTIVE_RECORD.value: _load_active_record,
}
_loaded: Dict[str, ClientBackend] = {}
_lock = threading.RLock()


# ==================== Registry API ====================

def register_backend(name: Union[str, Enum], factory: BackendFactory) -> None:
    """
    注册客户端后端

    Args:
        name: 后端标识
        factory: 返回 ClientBackend 的工厂函数（首次加载时调用）
    """
    key = client_name(name)
    with _lock:
        if key in _factories:
            logger.warning(f"[Client] 后端 {key} 已存在，将被覆盖")
        _factories[key] = factory
    logger.debug(f"[Client] 注册后端: {key}")


def available_backends() -> List[str]:
    """列出所有已注册的后端标识"""
    return sorted(_factories)


def is_loaded(name: Union[str, Enum]) -> bool:
    """后端是否已加载"""
    return client_name(name) in _loaded


def load_backend(name: Union[str, Enum]) -> ClientBackend:
    """
    加载客户端后端（每个后端只加载一次）

    Args:
        name: 后端标识

    Returns:
        已加载的后端

    Raises:
        ClientBackendNotFoundError: 标识未注册
    """
    key = client_name(name)
    with _lock:
        backend = _loaded.get(key)
        if backend is not None:
            return backend

        factory = _factories.get(key)
        if factory is None:
            raise ClientBackendNotFoundError(key)

        # 工厂失败时异常直接向上抛出，不缓存任何结果
        backend = factory()
        _loaded[key] = backend

    logger.info(f"[Client] 已加载后端: {key}")
    return backend


def reset_loaded_backends() -> None:
    """清空已加载后端缓存（测试用）"""
    with _lock:
        _loaded.clear()
