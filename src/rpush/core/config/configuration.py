# -*- coding: utf-8 -*-
"""
Rpush 配置

所有赋值都经过 __setattr__：先查废弃表发出警告，再分派到字段专用的 setter
（路径规范化、client 初始化、redis_options 转发等），没有专用 setter 的字段直接保存。
"""

from __future__ import annotations

import threading
from dataclasses import asdict, is_dataclass
from types import SimpleNamespace
from typing import Any, Dict, Optional

from loguru import logger

from ..deprecation import warn_attribute
from ..exceptions import ConfigurationError
from ...client.registry import ClientBackend, ClientType, client_name, is_loaded, load_backend
from ...utils.paths import absolutize
from .types import CONFIG_ATTRS, CURRENT_ATTRS, ApnsConfiguration


def _default_log_level(handle: Any) -> int:
    """注入的 logger 带有数值 level 时沿用，否则使用 DEBUG"""
    level = getattr(handle, "level", None)
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    return logger.level("DEBUG").no


class Configuration:
    """Rpush 运行配置"""

    def __init__(self, logger: Any = None):
        object.__setattr__(self, "_client_lock", threading.Lock())
        object.__setattr__(self, "_client_initialized", False)
        object.__setattr__(self, "_client_backend", None)
        for name in CONFIG_ATTRS:
            object.__setattr__(self, name, None)

        self.push_poll = 2
        self.batch_size = 100
        self.logger = logger
        self.log_file = "log/rpush.log"
        self.pid_file = "tmp/rpush.pid"
        self.log_level = _default_log_level(logger)
        self.plugin = SimpleNamespace()
        self.foreground = False

        self.apns = ApnsConfiguration()

        # 内部选项
        self.embedded = False
        self.push = False

    def __setattr__(self, name: str, value: Any) -> None:
        warn_attribute(name)
        setter = self._setters.get(name)
        if setter is not None:
            setter(self, value)
        else:
            object.__setattr__(self, name, value)

    # ==================== 字段 setter ====================

    def _set_pid_file(self, path: Any) -> None:
        object.__setattr__(self, "pid_file", absolutize(path))

    def _set_log_file(self, path: Any) -> None:
        object.__setattr__(self, "log_file", absolutize(path))

    def _set_client(self, client: Any) -> None:
        object.__setattr__(self, "client", client)
        self.initialize_client()

    def _set_redis_options(self, options: Dict[str, Any]) -> None:
        if client_name(self.client) != ClientType.REDIS.value:
            logger.debug(f"[Config] client={self.client}，忽略 redis_options")
            return
        load_backend(ClientType.REDIS).options.options = options

    def _set_feedback_poll(self, frequency: int) -> None:
        self.apns.feedback_receiver.frequency = frequency

    _setters = {
        "pid_file": _set_pid_file,
        "log_file": _set_log_file,
        "client": _set_client,
        "redis_options": _set_redis_options,
        "feedback_poll": _set_feedback_poll,
    }

    # ==================== 公共接口 ====================

    @property
    def redis_options(self) -> Dict[str, Any]:
        """Redis 后端共享的连接选项（redis 后端未加载时为空）"""
        if not is_loaded(ClientType.REDIS):
            return {}
        return load_backend(ClientType.REDIS).options.options

    @property
    def client_initialized(self) -> bool:
        return self._client_initialized

    @property
    def client_backend(self) -> Optional[ClientBackend]:
        """已加载的客户端后端（未初始化时为 None）"""
        return self._client_backend

    @property
    def notification_types(self) -> Dict[str, type]:
        """
        当前后端提供的消息类型

        Raises:
            ConfigurationError: 客户端尚未初始化
        """
        if self._client_backend is None:
            raise ConfigurationError("Rpush client has not been initialized.")
        return self._client_backend.notification_types

    def update(self, other: Any) -> None:
        """
        合并另一份配置

        对每个配置项，other 中非 None 的值覆盖当前值，None 值保持不变
        """
        for attr in CONFIG_ATTRS:
            other_value = getattr(other, attr, None)
            if other_value is not None:
                setattr(self, attr, other_value)

    def initialize_client(self) -> None:
        """
        加载 client 对应的后端（只执行一次）

        Raises:
            ConfigurationError: client 未设置
            ClientBackendNotFoundError: client 无法解析
        """
        with self._client_lock:
            if self._client_initialized:
                return
            if not self.client:
                raise ConfigurationError(
                    "Rpush.config.client is not set.",
                    {"field": "client"}
                )

            backend = load_backend(self.client)
            object.__setattr__(self, "_client_backend", backend)
            object.__setattr__(self, "_client_initialized", True)

        logger.info(f"[Config] 客户端已初始化: {backend.name}")

    def to_dict(self) -> Dict[str, Any]:
        """导出为字典（不含 logger）"""
        result = {}
        for attr in CURRENT_ATTRS:
            if attr == "logger":
                continue
            value = getattr(self, attr)
            if is_dataclass(value):
                value = asdict(value)
            elif isinstance(value, SimpleNamespace):
                value = dict(vars(value))
            elif isinstance(value, ClientType):
                value = value.value
            result[attr] = value
        return result
