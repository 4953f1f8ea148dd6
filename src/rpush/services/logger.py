# -*- coding: utf-8 -*-
from __future__ import annotations
import sys
from loguru import logger
from pathlib import Path


def configure_logger(config=None):
    """按配置设置日志输出：文件 + 前台运行时的标准输出

    级别取 config.log_level（loguru 数值级别，如 DEBUG=10）。
    config.logger 已设置时直接返回该 logger，不修改任何输出。
    """
    if config is None:
        from ..core.config import get_config
        config = get_config()
    
    if config.logger is not None:
        return config.logger
    
    logger.remove()
    level = config.log_level
    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_file), rotation="5 MB", retention=5, enqueue=True, encoding="utf-8", level=level)
    if config.foreground:
        logger.add(sys.stdout, level=level)
    return logger
