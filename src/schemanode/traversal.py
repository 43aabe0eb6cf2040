"""Schema 树遍历模块。

本模块提供对 SchemaNode 树的只读遍历，供校验器与引用解析器使用，包括：
- 枚举直接子 Schema 及其路径片段
- 深度优先遍历整棵树
- 收集 ``$ref`` 与 ``$id``/``id`` 出现的位置

遍历只沿包含关系进行，``$ref`` 不会被跟随。
"""

from collections.abc import Iterator

from schemanode.constants import SCHEMA_SLOTS, SlotKind
from schemanode.models import SchemaNode, SchemaRef
from schemanode.utils.pointer import SchemaPath, format_pointer

_SLOT_ATTRS: dict[str, str] = {
    field.alias or name: name
    for name, field in SchemaNode.model_fields.items()
    if (field.alias or name) in SCHEMA_SLOTS
}


def iter_children(schema: SchemaRef) -> Iterator[tuple[SchemaPath, SchemaRef]]:
    """枚举直接子 Schema。

    槽位按关键字声明顺序访问；序列槽位保持声明顺序，映射槽位保持插入顺序。
    ``dependencies`` 中的属性名列表不是 Schema，会被跳过。

    Args:
        schema: 布尔值或 SchemaNode，布尔值没有子节点。

    Yields:
        (相对路径片段, 子 Schema) 二元组，例如 ``(("properties", "name"), child)``。
    """
    if isinstance(schema, bool):
        return
    for keyword, slot in SCHEMA_SLOTS.items():
        value = getattr(schema, _SLOT_ATTRS[keyword])
        if value is None:
            continue
        if slot is SlotKind.SCHEMA or (slot is SlotKind.ITEMS and not isinstance(value, list)):
            yield (keyword,), value
        elif slot in (SlotKind.SCHEMA_LIST, SlotKind.ITEMS):
            for idx, child in enumerate(value):
                yield (keyword, idx), child
        elif slot is SlotKind.SCHEMA_MAP:
            for name, child in value.items():
                yield (keyword, name), child
        else:
            for name, dependency in value.items():
                if not isinstance(dependency, list):
                    yield (keyword, name), dependency


def walk(
    schema: SchemaRef, path: SchemaPath = ()
) -> Iterator[tuple[SchemaPath, SchemaRef]]:
    """深度优先前序遍历整棵 Schema 树。

    Args:
        schema: 根 Schema。
        path: 根 Schema 自身的路径，默认为空。

    Yields:
        (从根开始的路径, Schema) 二元组，根节点最先产出。
    """
    yield path, schema
    for segments, child in iter_children(schema):
        yield from walk(child, (*path, *segments))


def iter_refs(schema: SchemaRef) -> Iterator[tuple[str, SchemaNode]]:
    """收集所有携带 ``$ref`` 的节点。

    Yields:
        (JSON Pointer, 节点) 二元组，引用值本身通过 ``node.ref`` 读取。
    """
    for path, node in walk(schema):
        if isinstance(node, SchemaNode) and node.ref is not None:
            yield format_pointer(path), node


def iter_ids(schema: SchemaRef) -> Iterator[tuple[str, str, SchemaNode]]:
    """收集所有声明了 ``$id`` 或 ``id`` 的节点。

    同一节点同时声明两者时，先产出 ``$id``。

    Yields:
        (JSON Pointer, 标识符, 节点) 三元组。
    """
    for path, node in walk(schema):
        if not isinstance(node, SchemaNode):
            continue
        for identifier in (node.schema_id, node.id):
            if identifier is not None:
                yield format_pointer(path), identifier, node
