# -*- coding: utf-8 -*-
"""
推送消息类型 (Pydantic Models)

四种推送协议的公共消息模型，各客户端后端在此基础上派生自己的类型。
"""

from datetime import datetime
from typing import Optional, List, Dict, Any, ClassVar
from pydantic import BaseModel, Field


class Notification(BaseModel):
    """推送消息基类"""
    backend: ClassVar[str] = ""
    
    app: Optional[str] = Field(None, description="应用名称")
    data: Dict[str, Any] = Field(default_factory=dict, description="自定义负载")
    deliver_after: Optional[datetime] = Field(None, description="最早投递时间")
    delivered: bool = Field(False, description="是否已投递")
    failed: bool = Field(False, description="是否投递失败")
    retries: int = Field(0, ge=0, description="重试次数")


class ApnsNotification(Notification):
    """APNs 消息"""
    device_token: Optional[str] = Field(None, description="设备 Token")
    alert: Optional[str] = Field(None, description="提示文本")
    badge: Optional[int] = Field(None, description="角标数")
    sound: Optional[str] = Field(None, description="提示音")
    category: Optional[str] = Field(None, description="通知分类")
    expiry: int = Field(86400, description="过期时间（秒）")
    content_available: bool = Field(False, description="静默推送")


class GcmNotification(Notification):
    """GCM 消息"""
    registration_ids: List[str] = Field(default_factory=list, description="注册 ID 列表")
    collapse_key: Optional[str] = Field(None, description="折叠键")
    delay_while_idle: bool = Field(False, description="设备空闲时延迟")
    time_to_live: Optional[int] = Field(None, description="存活时间（秒）")
    notification: Optional[Dict[str, Any]] = Field(None, description="通知负载")


class WpnsNotification(Notification):
    """WPNS 消息"""
    uri: Optional[str] = Field(None, description="推送通道 URI")
    alert: Optional[str] = Field(None, description="提示文本")


class AdmNotification(Notification):
    """ADM 消息"""
    registration_ids: List[str] = Field(default_factory=list, description="注册 ID 列表")
    collapse_key: Optional[str] = Field(None, description="折叠键")
    expiry: Optional[int] = Field(None, description="过期时间（秒）")
