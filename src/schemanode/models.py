"""Schema 节点模型定义模块。

本模块定义了 JSON Schema 文档的 Pydantic 模型，包括：
- SchemaNode: 单个 Schema 文档或子 Schema
- DefaultSnippet: 编辑器补全片段
- SchemaRef: 布尔值或 Schema 的递归单元
- SchemaKind: 槽位取值的能力分类

模型构造后不可变，可在多个读取方之间直接共享。
字段使用 snake_case 命名，序列化时使用 JSON 关键字作为别名。
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_serializer,
)
from pydantic.alias_generators import to_camel


def _check_count(value: int | float) -> int | float:
    """计数关键字须为非负整数，允许 ``1.0`` 这类整数值浮点数并原样保留。"""
    if value < 0 or (isinstance(value, float) and not value.is_integer()):
        raise ValueError("expected a non-negative integer")
    return value


JsonTypeName = Literal["null", "boolean", "object", "array", "number", "string", "integer"]
JsonNumber = StrictInt | StrictFloat
Count = Annotated[StrictInt | StrictFloat, AfterValidator(_check_count)]
NonEmptyNames = Annotated[list[StrictStr], Field(min_length=1)]


class SchemaKind(StrEnum):
    """槽位取值的能力分类。

    Attributes:
        ALWAYS_VALID: 布尔值 ``true``，接受任意值。
        ALWAYS_INVALID: 布尔值 ``false``，拒绝任意值。
        EMPTY: 不含任何关键字的 ``{}``，接受任意值。
        STRUCTURED: 至少含有一个关键字的 Schema。
    """

    ALWAYS_VALID = "always_valid"
    ALWAYS_INVALID = "always_invalid"
    EMPTY = "empty"
    STRUCTURED = "structured"


class _KeywordModel(BaseModel):
    """以 JSON 关键字为别名、允许扩展字段的不可变模型基类。"""

    model_config = ConfigDict(
        extra="allow", frozen=True, alias_generator=to_camel, allow_inf_nan=False
    )

    @model_serializer(mode="wrap")
    def _serialize(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        """序列化时剔除被同名扩展键标记为已设置、但实际未赋值的字段。

        例如扩展键 ``comment`` 与 ``$comment`` 字段同名，不应输出 ``"$comment": null``。
        """
        data = handler(self)
        if not info.by_alias or not self.model_extra:
            return data
        fields = type(self).model_fields
        for name in self.model_extra.keys() & fields.keys():
            if getattr(self, name) is None:
                data.pop(fields[name].alias, None)
        return data

    @property
    def extensions(self) -> dict[str, Any]:
        """未识别关键字组成的扩展字段，按原始键保存。"""
        return dict(self.model_extra or {})


class DefaultSnippet(_KeywordModel):
    """编辑器默认片段。

    Attributes:
        label: 片段标签。
        description: 纯文本描述。
        markdown_description: Markdown 描述。
        body: 将被序列化写入文档的值。
        body_text: 含转义序列的原始文本。
    """

    label: StrictStr | None = None
    description: StrictStr | None = None
    markdown_description: StrictStr | None = None
    body: JsonValue = None
    body_text: StrictStr | None = None


class SchemaNode(_KeywordModel):
    """JSON Schema 节点。

    所有字段均可选，缺省表示不施加该约束。未识别的关键字保存在
    Pydantic 的 extra 中，通过 ``extensions`` 访问。

    ``$ref`` 仅保存为字符串，不在模型内解析，因此模型在所有权上始终是树。
    ``exclusive_minimum``/``exclusive_maximum`` 同时支持布尔形式与数值形式，
    ``items`` 同时支持单个 Schema 与位置序列，具体草案语义由校验器决定。
    """

    id: StrictStr | None = None
    schema_id: StrictStr | None = Field(default=None, alias="$id")
    meta_schema: StrictStr | None = Field(default=None, alias="$schema")
    comment: StrictStr | None = Field(default=None, alias="$comment")
    title: StrictStr | None = None
    description: StrictStr | None = None
    markdown_description: StrictStr | None = None
    default: JsonValue = None
    examples: list[JsonValue] | None = None

    type: JsonTypeName | list[JsonTypeName] | None = None

    required: NonEmptyNames | None = None
    properties: dict[str, SchemaRef] | None = None
    pattern_properties: dict[str, SchemaRef] | None = None
    additional_properties: SchemaRef | None = None
    min_properties: Count | None = None
    max_properties: Count | None = None
    dependencies: dict[str, SchemaRef | list[StrictStr]] | None = None
    property_names: SchemaRef | None = None

    items: SchemaRef | list[SchemaRef] | None = None
    additional_items: SchemaRef | None = None
    min_items: Count | None = None
    max_items: Count | None = None
    unique_items: StrictBool | None = None
    contains: SchemaRef | None = None

    pattern: StrictStr | None = None
    min_length: Count | None = None
    max_length: Count | None = None

    minimum: JsonNumber | None = None
    maximum: JsonNumber | None = None
    exclusive_minimum: StrictBool | JsonNumber | None = None
    exclusive_maximum: StrictBool | JsonNumber | None = None
    multiple_of: JsonNumber | None = None

    ref: StrictStr | None = Field(default=None, alias="$ref")
    all_of: list[SchemaRef] | None = None
    any_of: list[SchemaRef] | None = None
    one_of: list[SchemaRef] | None = None
    not_: SchemaRef | None = Field(default=None, alias="not")
    if_: SchemaRef | None = Field(default=None, alias="if")
    then: SchemaRef | None = None
    else_: SchemaRef | None = Field(default=None, alias="else")
    enum: Annotated[list[JsonValue], Field(min_length=1)] | None = None
    const: JsonValue = None
    format: StrictStr | None = None

    definitions: dict[str, SchemaRef] | None = None

    default_snippets: list[DefaultSnippet] | None = None
    error_message: StrictStr | None = None
    pattern_error_message: StrictStr | None = None
    deprecation_message: StrictStr | None = None
    enum_descriptions: list[StrictStr] | None = None
    markdown_enum_descriptions: list[StrictStr] | None = None
    do_not_suggest: StrictBool | None = None
    suggest_sort_text: StrictStr | None = None
    allow_comments: StrictBool | None = None
    allow_trailing_commas: StrictBool | None = None

    @property
    def is_empty(self) -> bool:
        """是否不含任何关键字（包括扩展字段）。"""
        return not self.model_fields_set and not self.model_extra

    @property
    def type_names(self) -> tuple[str, ...]:
        """将 ``type`` 归一化为类型名元组，未设置时为空元组。"""
        if self.type is None:
            return ()
        if isinstance(self.type, list):
            return tuple(self.type)
        return (self.type,)

    @property
    def has_tuple_items(self) -> bool:
        """``items`` 是否为位置序列（元组校验）。"""
        return isinstance(self.items, list)

    def enum_description(self, index: int, *, markdown: bool = False) -> str | None:
        """获取与 ``enum`` 第 index 项对应的描述。

        描述列表与 ``enum`` 按位置对齐，但长度不一定一致，缺失的条目视为无描述。

        Args:
            index: ``enum`` 中的下标。
            markdown: 为 True 时读取 ``markdownEnumDescriptions``。

        Returns:
            对应的描述，不存在时返回 None。
        """
        descriptions = self.markdown_enum_descriptions if markdown else self.enum_descriptions
        if descriptions is None or not 0 <= index < len(descriptions):
            return None
        return descriptions[index]


SchemaRef = SchemaNode | StrictBool

SchemaNode.model_rebuild()


def as_node(ref: SchemaRef) -> SchemaNode | None:
    """取出槽位中的 Schema 节点，布尔值返回 None。"""
    return ref if isinstance(ref, SchemaNode) else None


def schema_kind(ref: SchemaRef) -> SchemaKind:
    """判断槽位取值的能力分类。

    Args:
        ref: 布尔值或 Schema 节点。

    Returns:
        对应的 SchemaKind。
    """
    if ref is True:
        return SchemaKind.ALWAYS_VALID
    if ref is False:
        return SchemaKind.ALWAYS_INVALID
    if ref.is_empty:
        return SchemaKind.EMPTY
    return SchemaKind.STRUCTURED


def accepts_everything(ref: SchemaRef) -> bool:
    """是否无条件接受任意值（``true`` 或 ``{}``）。"""
    return schema_kind(ref) in (SchemaKind.ALWAYS_VALID, SchemaKind.EMPTY)


def rejects_everything(ref: SchemaRef) -> bool:
    """是否无条件拒绝任意值（``false``）。"""
    return schema_kind(ref) is SchemaKind.ALWAYS_INVALID


def imposes_constraints(ref: SchemaRef) -> bool:
    """是否为含关键字的结构化 Schema。"""
    return schema_kind(ref) is SchemaKind.STRUCTURED
