"""JSON Pointer 工具模块。

本模块提供 Schema 树内路径的表示与格式化（RFC 6901）。
"""

from collections.abc import Iterable

type SchemaPath = tuple[str | int, ...]


def escape_segment(segment: str | int) -> str:
    """转义单个路径片段。

    Args:
        segment: 属性名、关键字或序列下标。

    Returns:
        转义后的片段，``~`` 变为 ``~0``，``/`` 变为 ``~1``。
    """
    return str(segment).replace("~", "~0").replace("/", "~1")


def format_pointer(path: Iterable[str | int]) -> str:
    """将路径片段格式化为 URI 片段形式的 JSON Pointer。

    Args:
        path: 从根节点开始的路径片段。

    Returns:
        形如 ``#/properties/name`` 的字符串，根节点为 ``#``。
    """
    return "#" + "".join(f"/{escape_segment(segment)}" for segment in path)
