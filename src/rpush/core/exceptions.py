# -*- coding: utf-8 -*-
"""
自定义异常类
配置与客户端后端加载相关的异常类型
"""

from typing import Optional, Dict, Any


class RpushError(Exception):
    """Rpush 基础异常类"""
    
    error_code: str = "RPUSH_ERROR"
    
    def __init__(
        self,
        message: str = "Rpush 内部错误",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(message)
    
    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式（用于日志和诊断输出）"""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(RpushError):
    """配置错误（例如未设置 client 就初始化客户端）"""
    error_code = "CONFIGURATION_ERROR"


class ClientBackendNotFoundError(RpushError, LookupError):
    """客户端后端标识无法解析"""
    error_code = "CLIENT_BACKEND_NOT_FOUND"
    
    def __init__(self, name: str):
        super().__init__(
            f"未知的客户端后端: {name}",
            {"client": name}
        )


class ConfigFileError(ConfigurationError):
    """配置文件无法读取或校验失败"""
    error_code = "CONFIG_FILE_ERROR"
