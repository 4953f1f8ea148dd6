"""
客户端后端

    from rpush.client import load_backend

    backend = load_backend("redis")
    notification = backend.apns(device_token="...", alert="hello")
"""

from .registry import (
    ClientBackend,
    ClientType,
    register_backend,
    available_backends,
    load_backend,
    is_loaded,
)

__all__ = [
    "ClientBackend",
    "ClientType",
    "register_backend",
    "available_backends",
    "load_backend",
    "is_loaded",
]
