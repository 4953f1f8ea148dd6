# -*- coding: utf-8 -*-
"""根目录解析与路径规范化"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

_root: Optional[Path] = None


def get_root() -> Path:
    """
    获取根目录
    
    优先使用显式设置的根目录，其次使用环境变量 RPUSH_ROOT，最后使用当前目录
    """
    if _root is not None:
        return _root
    env_root = os.getenv("RPUSH_ROOT")
    if env_root:
        return Path(env_root)
    return Path.cwd()


def set_root(root: Optional[Union[str, Path]]) -> None:
    """设置根目录（None 表示恢复默认解析）"""
    global _root
    _root = Path(root) if root is not None else None


def absolutize(path: Optional[Union[str, Path]]) -> Optional[str]:
    """相对路径按根目录拼接为绝对路径；绝对路径和 None 原样返回"""
    if path is None:
        return None
    if Path(path).is_absolute():
        return str(path)
    return str(get_root() / path)
