"""全局常量定义模块。

本模块定义了 schemanode 使用的所有全局常量，包括：
- JSON 值类型名称
- 关键字词表（按取值形态分组）
- 子 Schema 槽位表
- 配置默认值
"""

from enum import StrEnum

DEFAULT_LOG_LEVEL = "INFO"
CONFIG_FILE_NAME = "schemanode.yaml"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

JSON_TYPE_NAMES: frozenset[str] = frozenset(
    {"null", "boolean", "object", "array", "number", "string", "integer"}
)

STRING_KEYWORDS: frozenset[str] = frozenset(
    {
        "id",
        "$id",
        "$schema",
        "$comment",
        "$ref",
        "title",
        "description",
        "markdownDescription",
        "pattern",
        "format",
        "errorMessage",
        "patternErrorMessage",
        "deprecationMessage",
        "suggestSortText",
    }
)

BOOLEAN_KEYWORDS: frozenset[str] = frozenset(
    {"uniqueItems", "doNotSuggest", "allowComments", "allowTrailingCommas"}
)

COUNT_KEYWORDS: frozenset[str] = frozenset(
    {"minProperties", "maxProperties", "minItems", "maxItems", "minLength", "maxLength"}
)

COUNT_BOUND_PAIRS: tuple[tuple[str, str], ...] = (
    ("minProperties", "maxProperties"),
    ("minItems", "maxItems"),
    ("minLength", "maxLength"),
)

NUMBER_KEYWORDS: frozenset[str] = frozenset({"minimum", "maximum"})

EXCLUSIVE_BOUND_KEYWORDS: frozenset[str] = frozenset({"exclusiveMinimum", "exclusiveMaximum"})

STRING_LIST_KEYWORDS: frozenset[str] = frozenset({"enumDescriptions", "markdownEnumDescriptions"})

JSON_VALUE_KEYWORDS: frozenset[str] = frozenset({"default", "const"})

SNIPPET_TEXT_FIELDS: tuple[str, ...] = ("label", "description", "markdownDescription", "bodyText")


class SlotKind(StrEnum):
    """子 Schema 槽位的形态。

    Attributes:
        SCHEMA: 单个布尔值或 Schema。
        SCHEMA_LIST: 有序的布尔值或 Schema 序列。
        SCHEMA_MAP: 名称到布尔值或 Schema 的映射。
        ITEMS: 单个 Schema 或位置序列（元组校验）。
        DEPENDENCIES: 名称到 Schema 或属性名列表的映射。
    """

    SCHEMA = "schema"
    SCHEMA_LIST = "schema_list"
    SCHEMA_MAP = "schema_map"
    ITEMS = "items"
    DEPENDENCIES = "dependencies"


# 顺序即遍历顺序
SCHEMA_SLOTS: dict[str, SlotKind] = {
    "items": SlotKind.ITEMS,
    "additionalItems": SlotKind.SCHEMA,
    "contains": SlotKind.SCHEMA,
    "properties": SlotKind.SCHEMA_MAP,
    "patternProperties": SlotKind.SCHEMA_MAP,
    "additionalProperties": SlotKind.SCHEMA,
    "dependencies": SlotKind.DEPENDENCIES,
    "propertyNames": SlotKind.SCHEMA,
    "allOf": SlotKind.SCHEMA_LIST,
    "anyOf": SlotKind.SCHEMA_LIST,
    "oneOf": SlotKind.SCHEMA_LIST,
    "not": SlotKind.SCHEMA,
    "if": SlotKind.SCHEMA,
    "then": SlotKind.SCHEMA,
    "else": SlotKind.SCHEMA,
    "definitions": SlotKind.SCHEMA_MAP,
}

KNOWN_KEYWORDS: frozenset[str] = (
    STRING_KEYWORDS
    | BOOLEAN_KEYWORDS
    | COUNT_KEYWORDS
    | NUMBER_KEYWORDS
    | EXCLUSIVE_BOUND_KEYWORDS
    | STRING_LIST_KEYWORDS
    | JSON_VALUE_KEYWORDS
    | frozenset(SCHEMA_SLOTS)
    | frozenset({"type", "required", "enum", "examples", "multipleOf", "defaultSnippets"})
)
