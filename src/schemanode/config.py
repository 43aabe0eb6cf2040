"""配置管理模块。

本模块负责管理 Schema 构造过程的配置，包括：
- 未知关键字的保留策略
- 结构异常子 Schema 的处理策略
- 日志级别配置
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from schemanode.constants import CONFIG_FILE_NAME, DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS
from schemanode.exceptions import ConfigurationError


class LoaderConfig(BaseModel):
    """Schema 构造配置模型。

    Attributes:
        unknown_keywords: 未识别关键字的处理方式，retain 保留到扩展字段，drop 丢弃。
        on_malformed: 结构异常时的处理方式，raise 抛出异常，
            substitute 以 ``true`` 替换出错的最小子 Schema。
        log_level: 日志级别，默认为 INFO。
    """

    unknown_keywords: Literal["retain", "drop"] = "retain"
    on_malformed: Literal["raise", "substitute"] = "raise"
    log_level: str = DEFAULT_LOG_LEVEL
    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别。

        Args:
            v: 待验证的日志级别字符串。

        Returns:
            验证通过的大写日志级别。

        Raises:
            ValueError: 日志级别无效时抛出。
        """
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {sorted(VALID_LOG_LEVELS)}")
        return v_upper

    @classmethod
    def from_yaml(cls, config_dir: Path) -> "LoaderConfig":
        """从 YAML 配置文件加载构造配置。

        Args:
            config_dir: 配置文件所在目录。

        Returns:
            加载的 LoaderConfig 实例，若配置文件不存在则返回默认配置。

        Raises:
            ConfigurationError: 配置文件无法解析或取值非法时抛出。
        """
        config_path = config_dir / CONFIG_FILE_NAME
        if not config_path.exists():
            return cls()
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e
