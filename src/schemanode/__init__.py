"""schemanode - JSON Schema 文档的内存数据模型。

本模块提供 JSON Schema 的核心数据模型，包括：
- SchemaNode 递归模型与布尔值/Schema 联合类型
- 从已解析 JSON 值构造与序列化
- 子 Schema 遍历与能力查询
"""

from importlib.metadata import version

from schemanode.config import LoaderConfig
from schemanode.exceptions import (
    ConfigurationError,
    MalformedKeywordValueError,
    MalformedSchemaError,
    SchemaNodeError,
    SchemaSerializationError,
)
from schemanode.loader import SchemaLoader, dump_schema, dumps_schema, load_schema
from schemanode.models import (
    DefaultSnippet,
    SchemaKind,
    SchemaNode,
    SchemaRef,
    accepts_everything,
    as_node,
    imposes_constraints,
    rejects_everything,
    schema_kind,
)
from schemanode.traversal import iter_children, iter_ids, iter_refs, walk

__version__ = version("schemanode")

__all__ = [
    "ConfigurationError",
    "DefaultSnippet",
    "LoaderConfig",
    "MalformedKeywordValueError",
    "MalformedSchemaError",
    "SchemaKind",
    "SchemaLoader",
    "SchemaNode",
    "SchemaNodeError",
    "SchemaRef",
    "SchemaSerializationError",
    "accepts_everything",
    "as_node",
    "dump_schema",
    "dumps_schema",
    "imposes_constraints",
    "iter_children",
    "iter_ids",
    "iter_refs",
    "load_schema",
    "rejects_everything",
    "schema_kind",
    "walk",
]
