# -*- coding: utf-8 -*-
"""
客户端后端注册表测试
"""

import unittest
import sys
from pathlib import Path

# 添加 src 到路径
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from pydantic import ValidationError

from rpush.client import registry
from rpush.client.registry import ClientBackend, ClientType, load_backend, register_backend
from rpush.core.exceptions import ClientBackendNotFoundError


class TestClientRegistry(unittest.TestCase):
    """测试后端注册表"""
    
    def setUp(self):
        registry.reset_loaded_backends()
    
    def tearDown(self):
        registry._factories.pop("flaky", None)
        registry.reset_loaded_backends()
    
    def test_builtin_backends(self):
        """测试内置后端可枚举"""
        backends = registry.available_backends()
        
        self.assertIn("redis", backends)
        self.assertIn("active_record", backends)
    
    def test_load_backend_is_cached(self):
        """同一后端只加载一次"""
        first = load_backend("redis")
        second = load_backend(ClientType.REDIS)
        
        self.assertIs(first, second)
        self.assertTrue(registry.is_loaded("redis"))
        self.assertFalse(registry.is_loaded("active_record"))
    
    def test_unknown_backend(self):
        """未知后端报错"""
        with self.assertRaises(ClientBackendNotFoundError) as ctx:
            load_backend("carrier_pigeon")
        
        self.assertIsInstance(ctx.exception, LookupError)
        self.assertEqual(ctx.exception.details, {"client": "carrier_pigeon"})
        self.assertEqual(ctx.exception.to_dict()["error_code"], "CLIENT_BACKEND_NOT_FOUND")
    
    def test_factory_error_propagates_and_is_not_cached(self):
        """工厂异常原样抛出，修复后可重新加载"""
        attempts = []
        
        def flaky():
            attempts.append(1)
            if len(attempts) == 1:
                raise ImportError("backend dependency missing")
            return load_backend("active_record")
        
        register_backend("flaky", flaky)
        
        with self.assertRaises(ImportError):
            load_backend("flaky")
        self.assertFalse(registry.is_loaded("flaky"))
        
        backend = load_backend("flaky")
        self.assertEqual(backend.name, "active_record")
        self.assertEqual(len(attempts), 2)
    
    def test_notification_types(self):
        backend = load_backend("active_record")
        
        self.assertIsInstance(backend, ClientBackend)
        self.assertEqual(list(backend.notification_types), ["Apns", "Gcm", "Wpns", "Adm"])
        self.assertIsNone(backend.options)
    
    def test_redis_backend_has_option_store(self):
        backend = load_backend("redis")
        
        from rpush.client.redis import redis_options
        self.assertIs(backend.options, redis_options)


class TestNotificationTypes(unittest.TestCase):
    """测试消息类型"""
    
    def test_apns_defaults(self):
        apns = load_backend("redis").apns(device_token="a" * 64, alert="hello")
        
        self.assertEqual(apns.backend, "redis")
        self.assertEqual(apns.expiry, 86400)
        self.assertFalse(apns.delivered)
        self.assertEqual(apns.data, {})
    
    def test_gcm_validation(self):
        gcm_cls = load_backend("active_record").gcm
        
        with self.assertRaises(ValidationError):
            gcm_cls(registration_ids=["abc"], retries=-1)
    
    def test_adm_and_wpns(self):
        backend = load_backend("active_record")
        
        adm = backend.adm(registration_ids=["r1", "r2"], collapse_key="k")
        wpns = backend.wpns(uri="https://push.example.com/channel", alert="hi")
        
        self.assertEqual(adm.registration_ids, ["r1", "r2"])
        self.assertEqual(wpns.backend, "active_record")


if __name__ == "__main__":
    unittest.main()
