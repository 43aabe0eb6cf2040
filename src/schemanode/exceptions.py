"""异常定义模块。

本模块定义了 schemanode 中使用的所有自定义异常类，
采用层级化设计便于异常捕获和处理。
"""

from schemanode.utils.pointer import SchemaPath, format_pointer


class SchemaNodeError(Exception):
    """schemanode 基础异常类。

    所有自定义异常的基类，可用于统一捕获所有项目异常。
    """

    pass


class ConfigurationError(SchemaNodeError):
    """配置相关异常。

    当配置文件无法读取、格式错误或验证失败时抛出。
    """

    pass


class MalformedSchemaError(SchemaNodeError, ValueError):
    """Schema 结构异常。

    当待构造的值不是 Schema 对象或布尔值时抛出。

    Attributes:
        path: 出错位置的路径片段。
        reason: 错误原因。
    """

    def __init__(self, path: SchemaPath, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{format_pointer(path)}: {reason}")

    @property
    def pointer(self) -> str:
        """出错位置的 JSON Pointer。"""
        return format_pointer(self.path)


class MalformedKeywordValueError(MalformedSchemaError):
    """关键字取值异常。

    当关键字的值类型错误或违反结构约束时抛出，
    例如 ``required`` 不是数组或 ``enum`` 为空。

    Attributes:
        keyword: 取值非法的关键字。
    """

    def __init__(self, path: SchemaPath, keyword: str, reason: str):
        self.keyword = keyword
        super().__init__(path, reason)


class SchemaSerializationError(SchemaNodeError):
    """Schema 序列化异常。

    当 Schema 中的值无法编码为 JSON 字节串时抛出，
    例如超出 64 位范围的整数。
    """

    pass
