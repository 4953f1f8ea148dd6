# -*- coding: utf-8 -*-
"""
配置存储（单例）单元测试
"""

import sys
from pathlib import Path

# 添加src到路径
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

import pytest

import rpush
from rpush.client import registry
from rpush.core.config import Configuration, configure, get_config, reset_config, set_config


@pytest.fixture(autouse=True)
def fresh_store(tmp_path):
    rpush.set_root(tmp_path)
    reset_config()
    registry.reset_loaded_backends()
    yield
    reset_config()
    registry.reset_loaded_backends()
    rpush.set_root(None)


class TestConfigStore:
    """配置存储测试类"""
    
    def test_singleton_pattern(self):
        """测试单例模式 - 多次获取返回同一实例"""
        config1 = get_config()
        config2 = get_config()
        
        assert config1 is config2
    
    def test_lazy_defaults(self):
        """首次访问时按默认值创建"""
        config = rpush.get_config()
        
        assert config.push_poll == 2
        assert config.batch_size == 100
        assert not config.client_initialized
    
    def test_reset_creates_new_instance(self):
        config1 = get_config()
        reset_config()
        config2 = get_config()
        
        assert config1 is not config2
    
    def test_set_config(self):
        custom = Configuration()
        custom.batch_size = 7
        set_config(custom)
        
        assert get_config() is custom
        assert get_config().batch_size == 7


class TestConfigure:
    """configure 入口测试"""
    
    def test_configure_runs_block_and_initializes_client(self):
        def setup(config):
            config.batch_size = 500
            config.push_poll = 10
        
        get_config().client = "redis"
        configure(setup)
        
        config = get_config()
        assert config.batch_size == 500
        assert config.push_poll == 10
        assert config.client_initialized
    
    def test_configure_sets_client_in_block(self):
        configure(lambda config: setattr(config, "client", "active_record"))
        
        config = get_config()
        assert config.client_backend.name == "active_record"
        assert config.notification_types["Gcm"].backend == "active_record"
    
    def test_configure_without_client_raises(self):
        with pytest.raises(rpush.ConfigurationError):
            configure(lambda config: setattr(config, "batch_size", 1))
        
        assert get_config().batch_size == 1
        assert not get_config().client_initialized
    
    def test_configure_without_block(self):
        """没有回调时什么也不做"""
        assert configure() is None
        assert not get_config().client_initialized


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
