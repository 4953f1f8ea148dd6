# -*- coding: utf-8 -*-
"""数据库客户端后端"""

from typing import ClassVar

from .base import ApnsNotification, GcmNotification, WpnsNotification, AdmNotification


class Apns(ApnsNotification):
    backend: ClassVar[str] = "active_record"


class Gcm(GcmNotification):
    backend: ClassVar[str] = "active_record"


class Wpns(WpnsNotification):
    backend: ClassVar[str] = "active_record"


class Adm(AdmNotification):
    backend: ClassVar[str] = "active_record"
