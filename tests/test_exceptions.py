import pytest

from schemanode.exceptions import (
    ConfigurationError,
    MalformedKeywordValueError,
    MalformedSchemaError,
    SchemaNodeError,
    SchemaSerializationError,
)


class TestExceptions:
    def test_schemanode_error_is_exception(self):
        assert issubclass(SchemaNodeError, Exception)

    def test_configuration_error_inherits_schemanode_error(self):
        assert issubclass(ConfigurationError, SchemaNodeError)

    def test_serialization_error_inherits_schemanode_error(self):
        assert issubclass(SchemaSerializationError, SchemaNodeError)
        assert not issubclass(SchemaSerializationError, MalformedSchemaError)

    def test_malformed_schema_error_is_value_error(self):
        assert issubclass(MalformedSchemaError, SchemaNodeError)
        assert issubclass(MalformedSchemaError, ValueError)

    def test_keyword_error_inherits_malformed_schema_error(self):
        assert issubclass(MalformedKeywordValueError, MalformedSchemaError)

    def test_malformed_schema_message(self):
        error = MalformedSchemaError((), "expected a schema object or boolean, got string")
        assert str(error) == "#: expected a schema object or boolean, got string"
        assert error.path == ()
        assert error.pointer == "#"

    def test_keyword_error_attributes(self):
        error = MalformedKeywordValueError(("properties", "a", "required"), "required", "bad")
        assert str(error) == "#/properties/a/required: bad"
        assert error.keyword == "required"
        assert error.reason == "bad"
        assert error.path == ("properties", "a", "required")

    def test_keyword_error_caught_by_base(self):
        with pytest.raises(SchemaNodeError):
            raise MalformedKeywordValueError(("enum",), "enum", "must be a non-empty array")
