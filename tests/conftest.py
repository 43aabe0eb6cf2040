"""测试配置和共享 fixtures。"""

import copy

import pytest

from schemanode.config import LoaderConfig

EDITOR_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://example.com/settings.schema.json",
    "$comment": "workspace settings",
    "title": "Settings",
    "description": "Editor settings file",
    "markdownDescription": "Editor **settings** file",
    "type": "object",
    "allowComments": True,
    "allowTrailingCommas": True,
    "required": ["name", "version"],
    "properties": {
        "name": {
            "type": "string",
            "minLength": 1,
            "maxLength": 64,
            "pattern": "^[a-z][a-z0-9-]*$",
            "patternErrorMessage": "Use lowercase letters, digits and dashes.",
        },
        "version": {"$ref": "#/definitions/semver"},
        "level": {
            "enum": ["error", "warn", "off"],
            "enumDescriptions": ["Report as error", "Report as warning", "Disable"],
            "markdownEnumDescriptions": ["Report as **error**"],
            "default": "warn",
        },
        "ratio": {
            "type": "number",
            "minimum": 0,
            "exclusiveMinimum": True,
            "maximum": 1.5,
            "multipleOf": 0.25,
        },
        "port": {"type": "integer", "exclusiveMaximum": 65536},
        "legacy": {
            "type": ["string", "null"],
            "deprecationMessage": "Use `name` instead.",
            "doNotSuggest": True,
        },
        "tags": {
            "type": "array",
            "items": {"type": "string", "format": "hostname"},
            "uniqueItems": True,
            "minItems": 0,
            "maxItems": 8,
            "contains": {"const": "default"},
        },
        "point": {
            "type": "array",
            "items": [{"type": "number"}, {"type": "number"}],
            "additionalItems": False,
        },
        "env": {
            "type": "object",
            "patternProperties": {"^[A-Z_]+$": {"type": "string"}},
            "additionalProperties": False,
            "propertyNames": {"maxLength": 32},
            "minProperties": 1,
            "maxProperties": 16,
        },
    },
    "dependencies": {
        "port": ["name"],
        "env": {"required": ["name"]},
    },
    "allOf": [{"title": "A"}, True, {"title": "C"}],
    "anyOf": [{"required": ["name"]}, {"required": ["version"]}],
    "oneOf": [{"type": "object"}, False],
    "not": {"required": ["forbidden"]},
    "if": {"properties": {"level": {"const": "off"}}},
    "then": {"maxProperties": 2},
    "else": True,
    "definitions": {
        "semver": {
            "type": "string",
            "examples": ["1.0.0", "2.1.3"],
            "errorMessage": "Expected a semantic version.",
        },
    },
    "defaultSnippets": [
        {"label": "Minimal", "description": "name and version", "body": {"name": "$1", "version": "0.1.0"}},
        {"label": "Raw", "markdownDescription": "raw *text*", "bodyText": "{\n\t\"name\": \"$1\"\n}"},
    ],
    "suggestSortText": "0001",
    "x-owner": {"team": "tooling"},
}


@pytest.fixture
def editor_schema():
    """带编辑器扩展的完整 Schema 文档。"""
    return copy.deepcopy(EDITOR_SCHEMA)


@pytest.fixture
def self_referencing_schema():
    """definitions 中自引用的 Schema 文档。"""
    return {
        "$ref": "#/definitions/tree",
        "definitions": {
            "tree": {
                "type": "object",
                "properties": {
                    "value": {"type": "integer"},
                    "children": {"type": "array", "items": {"$ref": "#/definitions/tree"}},
                },
            },
        },
    }


@pytest.fixture
def substitute_config():
    """异常子 Schema 替换为 true 的配置。"""
    return LoaderConfig(on_malformed="substitute")
