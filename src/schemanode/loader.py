"""Schema 构造与序列化模块。

本模块负责将已解析的 JSON 值构造为 SchemaNode 树，以及反向序列化，包括：
- 按关键字检查 JSON 值类型，错误携带 JSON Pointer 路径
- 未识别关键字的保留或丢弃
- 结构异常子 Schema 的替换策略
- 序列化为 JSON 值或 JSON 字节串
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, NoReturn

import orjson
from pydantic import ValidationError

from schemanode.config import LoaderConfig
from schemanode.constants import (
    BOOLEAN_KEYWORDS,
    COUNT_BOUND_PAIRS,
    COUNT_KEYWORDS,
    EXCLUSIVE_BOUND_KEYWORDS,
    JSON_TYPE_NAMES,
    JSON_VALUE_KEYWORDS,
    KNOWN_KEYWORDS,
    NUMBER_KEYWORDS,
    SCHEMA_SLOTS,
    SNIPPET_TEXT_FIELDS,
    STRING_KEYWORDS,
    STRING_LIST_KEYWORDS,
    SlotKind,
)
from schemanode.exceptions import (
    MalformedKeywordValueError,
    MalformedSchemaError,
    SchemaSerializationError,
)
from schemanode.logger import logger, setup_logging
from schemanode.models import SchemaNode, SchemaRef
from schemanode.utils.pointer import SchemaPath, format_pointer


def _kind(value: object) -> str:
    """返回值对应的 JSON 类型名，用于错误信息。"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _fail(path: SchemaPath, keyword: str, message: str) -> NoReturn:
    """抛出带路径的关键字取值错误。

    Raises:
        MalformedKeywordValueError: 始终抛出。
    """
    raise MalformedKeywordValueError(path, keyword, message)


def _is_number(value: object) -> bool:
    """判断值是否为 JSON 数值，布尔值与 ``inf``/``nan`` 不算。"""
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int) and not isinstance(value, bool)


def _is_json_value(value: object) -> bool:
    """判断值是否为合法的 JSON 值（递归）。"""
    if value is None or isinstance(value, bool | str) or _is_number(value):
        return True
    if isinstance(value, list):
        return all(_is_json_value(item) for item in value)
    if isinstance(value, Mapping):
        return all(isinstance(k, str) and _is_json_value(v) for k, v in value.items())
    return False


def _expect_json_value(value: object, path: SchemaPath, keyword: str) -> object:
    if not _is_json_value(value):
        _fail(path, keyword, "expected a JSON value")
    return value


def _expect_list(value: object, path: SchemaPath, keyword: str, *, non_empty: bool) -> list:
    if not isinstance(value, list):
        _fail(path, keyword, f"expected an array, got {_kind(value)}")
    if non_empty and not value:
        _fail(path, keyword, "must be a non-empty array")
    return value


def _expect_unique_strings(
    value: object, path: SchemaPath, keyword: str, *, non_empty: bool
) -> list[str]:
    items = _expect_list(value, path, keyword, non_empty=non_empty)
    seen: set[str] = set()
    for idx, item in enumerate(items):
        if not isinstance(item, str):
            _fail((*path, idx), keyword, f"expected a string, got {_kind(item)}")
        if item in seen:
            _fail((*path, idx), keyword, f"duplicate entry: {item!r}")
        seen.add(item)
    return list(items)


def _check_type(value: object, path: SchemaPath) -> str | list[str]:
    if isinstance(value, str):
        if value not in JSON_TYPE_NAMES:
            _fail(path, "type", f"unsupported schema type: {value}")
        return value
    names = _expect_unique_strings(value, path, "type", non_empty=True)
    for idx, name in enumerate(names):
        if name not in JSON_TYPE_NAMES:
            _fail((*path, idx), "type", f"unsupported schema type: {name}")
    return names


def _check_snippets(value: object, path: SchemaPath) -> list[dict[str, Any]]:
    snippets = _expect_list(value, path, "defaultSnippets", non_empty=False)
    out: list[dict[str, Any]] = []
    for idx, snippet in enumerate(snippets):
        snippet_path = (*path, idx)
        if not isinstance(snippet, Mapping):
            _fail(snippet_path, "defaultSnippets", f"expected an object, got {_kind(snippet)}")
        for field in SNIPPET_TEXT_FIELDS:
            if field in snippet and not isinstance(snippet[field], str):
                _fail((*snippet_path, field), "defaultSnippets", "expected a string")
        if "body" in snippet:
            _expect_json_value(snippet["body"], (*snippet_path, "body"), "defaultSnippets")
        out.append(dict(snippet))
    return out


class SchemaLoader:
    """Schema 构造器。

    先逐个关键字检查 JSON 值类型并按配置处理未知关键字与异常子 Schema，
    再交由 Pydantic 构造不可变的 SchemaNode 树。``$ref`` 不会被跟随，
    因此自引用的 Schema 也能在有限步内完成构造。

    Attributes:
        config: 构造配置。
    """

    def __init__(self, config: LoaderConfig | None = None):
        self.config = config or LoaderConfig()

    @classmethod
    def from_config_dir(cls, config_dir: Path) -> SchemaLoader:
        """从配置目录创建构造器，并按配置初始化日志。

        Args:
            config_dir: ``schemanode.yaml`` 所在目录，文件不存在时使用默认配置。

        Raises:
            ConfigurationError: 配置文件非法时抛出。
        """
        config = LoaderConfig.from_yaml(config_dir)
        setup_logging(config.log_level)
        return cls(config)

    def load(self, raw: object) -> SchemaRef:
        """将已解析的 JSON 值构造为 Schema。

        Args:
            raw: 布尔值或 JSON 对象。

        Returns:
            布尔值或 SchemaNode。

        Raises:
            MalformedSchemaError: 输入结构非法且配置为 raise 时抛出。
        """
        prepared = self._prepare_child(raw, (), None)
        if isinstance(prepared, bool):
            return prepared
        try:
            node = SchemaNode.model_validate(prepared)
        except ValidationError as e:
            error = e.errors()[0]
            raise MalformedSchemaError(tuple(error["loc"]), error["msg"]) from e
        logger.debug(f"Loaded schema with {len(node.model_fields_set)} top-level keywords.")
        return node

    def _prepare_child(
        self, raw: object, path: SchemaPath, keyword: str | None
    ) -> bool | dict[str, Any]:
        """检查一个子 Schema，按配置决定异常时抛出还是替换为 ``true``。"""
        try:
            return self._prepare(raw, path, keyword)
        except MalformedSchemaError as e:
            if self.config.on_malformed == "raise":
                raise
            logger.warning(
                f"Substituting `true` for malformed schema at {format_pointer(path)}: {e.reason}"
            )
            return True

    def _prepare(self, raw: object, path: SchemaPath, keyword: str | None) -> bool | dict[str, Any]:
        if isinstance(raw, bool):
            return raw
        if not isinstance(raw, Mapping):
            message = f"expected a schema object or boolean, got {_kind(raw)}"
            if keyword is None:
                raise MalformedSchemaError(path, message)
            _fail(path, keyword, message)

        out: dict[str, Any] = {}
        unknown: list[str] = []
        for key, value in raw.items():
            if not isinstance(key, str):
                raise MalformedSchemaError(path, f"keyword must be a string, got {_kind(key)}")
            if key in KNOWN_KEYWORDS:
                out[key] = self._prepare_keyword(key, value, (*path, key))
                continue
            unknown.append(key)
            if self.config.unknown_keywords == "retain":
                out[key] = _expect_json_value(value, (*path, key), key)

        if unknown:
            action = "Retained" if self.config.unknown_keywords == "retain" else "Dropped"
            logger.debug(f"{action} unknown keywords {unknown} at {format_pointer(path)}.")

        for low, high in COUNT_BOUND_PAIRS:
            if low in out and high in out and out[low] > out[high]:
                _fail((*path, low), low, f"{low} ({out[low]}) exceeds {high} ({out[high]})")

        if "enum" in out:
            for descriptions in ("enumDescriptions", "markdownEnumDescriptions"):
                if descriptions in out and len(out[descriptions]) != len(out["enum"]):
                    logger.debug(
                        f"{descriptions} length {len(out[descriptions])} does not match "
                        f"enum length {len(out['enum'])} at {format_pointer(path)}."
                    )
        return out

    def _prepare_keyword(self, key: str, value: object, path: SchemaPath) -> Any:
        """按关键字检查取值，返回用于构造模型的值。"""
        slot = SCHEMA_SLOTS.get(key)
        if slot is not None:
            return self._prepare_slot(slot, key, value, path)

        if key in STRING_KEYWORDS:
            if not isinstance(value, str):
                _fail(path, key, f"expected a string, got {_kind(value)}")
            return value
        if key in BOOLEAN_KEYWORDS:
            if not isinstance(value, bool):
                _fail(path, key, f"expected a boolean, got {_kind(value)}")
            return value
        if key in COUNT_KEYWORDS:
            integral = isinstance(value, int) or (isinstance(value, float) and value.is_integer())
            if not _is_number(value) or not integral or value < 0:
                _fail(path, key, "expected a non-negative integer")
            return value
        if key in NUMBER_KEYWORDS:
            if not _is_number(value):
                _fail(path, key, f"expected a number, got {_kind(value)}")
            return value
        if key in EXCLUSIVE_BOUND_KEYWORDS:
            if not isinstance(value, bool) and not _is_number(value):
                _fail(path, key, f"expected a boolean or a number, got {_kind(value)}")
            return value
        if key in STRING_LIST_KEYWORDS:
            items = _expect_list(value, path, key, non_empty=False)
            for idx, item in enumerate(items):
                if not isinstance(item, str):
                    _fail((*path, idx), key, f"expected a string, got {_kind(item)}")
            return list(items)
        if key in JSON_VALUE_KEYWORDS:
            return _expect_json_value(value, path, key)

        match key:
            case "type":
                return _check_type(value, path)
            case "required":
                return _expect_unique_strings(value, path, key, non_empty=True)
            case "enum":
                items = _expect_list(value, path, key, non_empty=True)
                return _expect_json_value(list(items), path, key)
            case "examples":
                items = _expect_list(value, path, key, non_empty=False)
                return _expect_json_value(list(items), path, key)
            case "multipleOf":
                if not _is_number(value) or value <= 0:
                    _fail(path, key, "expected a positive number")
                return value
            case "defaultSnippets":
                return _check_snippets(value, path)
        raise AssertionError(f"unhandled keyword: {key}")

    def _prepare_slot(self, slot: SlotKind, key: str, value: object, path: SchemaPath) -> Any:
        """检查子 Schema 槽位，递归处理其中的每个子 Schema。"""
        if slot is SlotKind.SCHEMA:
            return self._prepare_child(value, path, key)

        if slot is SlotKind.SCHEMA_LIST or (slot is SlotKind.ITEMS and isinstance(value, list)):
            items = _expect_list(value, path, key, non_empty=True)
            return [self._prepare_child(item, (*path, idx), key) for idx, item in enumerate(items)]

        if slot is SlotKind.ITEMS:
            return self._prepare_child(value, path, key)

        if not isinstance(value, Mapping):
            _fail(path, key, f"expected an object, got {_kind(value)}")

        if slot is SlotKind.SCHEMA_MAP:
            return {name: self._prepare_child(sub, (*path, name), key) for name, sub in value.items()}

        out: dict[str, Any] = {}
        for name, dependency in value.items():
            if isinstance(dependency, list):
                out[name] = _expect_unique_strings(dependency, (*path, name), key, non_empty=False)
            else:
                out[name] = self._prepare_child(dependency, (*path, name), key)
        return out


def load_schema(raw: object, config: LoaderConfig | None = None) -> SchemaRef:
    """将已解析的 JSON 值构造为 Schema。

    Args:
        raw: 布尔值或 JSON 对象。
        config: 构造配置，默认保留未知关键字并在结构错误时抛出异常。

    Returns:
        布尔值或 SchemaNode。

    Raises:
        MalformedSchemaError: 输入结构非法时抛出。
    """
    return SchemaLoader(config).load(raw)


def dump_schema(schema: SchemaRef) -> Any:
    """将 Schema 序列化为 JSON 值。

    仅输出构造时出现过的关键字（显式的 ``null`` 会保留），
    包含扩展字段，键名使用 JSON 关键字。

    Args:
        schema: 布尔值或 SchemaNode。

    Returns:
        布尔值或字典。
    """
    if isinstance(schema, bool):
        return schema
    return schema.model_dump(by_alias=True, exclude_unset=True)


def dumps_schema(schema: SchemaRef, *, indent: bool = False) -> bytes:
    """将 Schema 序列化为 UTF-8 编码的 JSON 字节串。

    Args:
        schema: 布尔值或 SchemaNode。
        indent: 是否以两个空格缩进输出。

    Returns:
        JSON 字节串。

    Raises:
        SchemaSerializationError: 值无法编码时抛出，例如超出 64 位范围的整数。
    """
    option = orjson.OPT_INDENT_2 if indent else 0
    try:
        return orjson.dumps(dump_schema(schema), option=option)
    except orjson.JSONEncodeError as e:
        raise SchemaSerializationError(f"Failed to encode schema as JSON: {e}") from e
