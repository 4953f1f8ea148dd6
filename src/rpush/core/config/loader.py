# -*- coding: utf-8 -*-
"""
配置文件加载

支持 JSON 和 YAML 两种格式，字段校验通过 Pydantic 完成。
文件中只需要写出要覆盖的配置项，未写出的配置项保持原值。

示例 (rpush.yaml):
    client: redis
    batch_size: 500
    log_file: log/push.log
    apns:
      feedback_receiver:
        frequency: 120
"""

from __future__ import annotations

import json
import os
from copy import deepcopy
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ConfigFileError
from .configuration import Configuration
from .store import get_config
from .types import ApnsConfiguration, ConfigurationWithoutDefaults


CONFIG_ENV_VAR = "RPUSH_CONFIG"


class FeedbackReceiverSchema(BaseModel):
    """反馈接收配置"""
    model_config = ConfigDict(extra="forbid")

    frequency: Optional[int] = Field(None, gt=0, description="轮询间隔（秒）")
    enabled: Optional[bool] = Field(None, description="是否启用")


class ApnsSchema(BaseModel):
    """APNs 配置"""
    model_config = ConfigDict(extra="forbid")

    feedback_receiver: Optional[FeedbackReceiverSchema] = Field(None, description="反馈接收配置")


class ConfigFileSchema(BaseModel):
    """配置文件格式"""
    model_config = ConfigDict(extra="forbid")

    push_poll: Optional[int] = Field(None, gt=0, description="轮询间隔（秒）")
    batch_size: Optional[int] = Field(None, gt=0, description="批处理大小")
    client: Optional[str] = Field(None, description="客户端后端")
    log_file: Optional[str] = Field(None, description="日志文件")
    pid_file: Optional[str] = Field(None, description="PID 文件")
    log_level: Optional[int] = Field(None, ge=0, description="日志级别（数值）")
    plugin: Optional[Dict[str, Any]] = Field(None, description="插件配置")
    foreground: Optional[bool] = Field(None, description="前台运行")
    embedded: Optional[bool] = Field(None, description="嵌入模式")
    push: Optional[bool] = Field(None, description="单次推送模式")
    apns: Optional[ApnsSchema] = Field(None, description="APNs 配置")

    # 废弃字段
    log_dir: Optional[str] = Field(None, description="已废弃，请使用 log_file")
    feedback_poll: Optional[int] = Field(None, gt=0, description="已废弃，请使用 apns.feedback_receiver.frequency")


def _read_file(path: Path) -> Dict[str, Any]:
    """按扩展名读取配置文件"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                raise ConfigFileError(
                    f"不支持的配置文件格式: {path.suffix}",
                    {"path": str(path)}
                )
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigFileError(f"配置文件读取失败: {e}", {"path": str(path)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError("配置文件顶层必须是映射", {"path": str(path)})
    return data


def _merge_apns(apns: ApnsSchema, base: Optional[Configuration]) -> ApnsConfiguration:
    """在 base.apns 的副本上只写入文件中出现的字段"""
    merged = deepcopy(base.apns) if base is not None else ApnsConfiguration()
    receiver = apns.feedback_receiver
    if receiver is None:
        return merged
    for name, value in receiver.model_dump(exclude_none=True).items():
        setattr(merged.feedback_receiver, name, value)
    return merged


def load_config_file(
    path: Union[str, Path],
    base: Optional[Configuration] = None,
) -> ConfigurationWithoutDefaults:
    """
    读取配置文件

    Args:
        path: 配置文件路径（.json / .yaml / .yml）
        base: 当前配置；文件中的 apns 只覆盖写出的字段，其余字段取自 base.apns

    Returns:
        只包含文件中出现的配置项的 ConfigurationWithoutDefaults

    Raises:
        ConfigFileError: 文件不存在、格式错误或校验失败
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileError(f"配置文件不存在: {path}", {"path": str(path)})

    data = _read_file(path)
    try:
        schema = ConfigFileSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigFileError(
            f"配置文件校验失败: {path}",
            {"path": str(path), "errors": e.errors()}
        ) from e

    values = schema.model_dump(exclude={"apns", "plugin"})
    if schema.plugin is not None:
        values["plugin"] = SimpleNamespace(**schema.plugin)
    if schema.apns is not None:
        values["apns"] = _merge_apns(schema.apns, base)

    logger.info(f"[Config] 配置文件加载成功: {path}")
    return ConfigurationWithoutDefaults(**values)


def apply_config_file(
    path: Union[str, Path, None] = None,
    config: Optional[Configuration] = None,
) -> Configuration:
    """
    读取配置文件并合并到配置中

    Args:
        path: 配置文件路径；为 None 时使用环境变量 RPUSH_CONFIG
        config: 目标配置；为 None 时使用全局配置

    Returns:
        合并后的配置
    """
    config = config or get_config()
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR)
        if not path:
            logger.debug(f"[Config] 未设置 {CONFIG_ENV_VAR}，跳过配置文件")
            return config

    config.update(load_config_file(path, base=config))
    return config
