from schemanode.utils.pointer import escape_segment, format_pointer


class TestPointer:
    def test_root(self):
        assert format_pointer(()) == "#"

    def test_segments(self):
        assert format_pointer(("properties", "name", "items", 0)) == "#/properties/name/items/0"

    def test_escape(self):
        assert escape_segment("a/b") == "a~1b"
        assert escape_segment("m~n") == "m~0n"
        assert escape_segment("~/") == "~0~1"
        assert escape_segment(3) == "3"

    def test_escaped_pointer(self):
        assert format_pointer(("patternProperties", "^/api/~v$")) == "#/patternProperties/^~1api~1~0v$"
