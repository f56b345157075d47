"""Engine adapter: registration, compilation and instance checks."""

import pytest

from jsonschema_set.config import ValidatorConfig
from jsonschema_set.engine.compiler import SchemaCompiler
from jsonschema_set.exceptions import CompileError, InstanceValidationError, ResourceError

from conftest import ADDRESS_ID, USER_ID


def _compiler(*pairs, config=None):
    compiler = SchemaCompiler(config)
    for sid, document in pairs:
        compiler.add_resource(sid, document)
    return compiler


def test_cross_document_reference(address, user_profile, valid_user):
    compiled = _compiler((ADDRESS_ID, address), (USER_ID, user_profile)).compile(USER_ID)
    compiled.validate(valid_user)

    bad = dict(valid_user, address={"region": "Aichi", "countryName": "Japan"})
    with pytest.raises(InstanceValidationError) as excinfo:
        compiled.validate(bad)
    assert excinfo.value.path == "/address"
    assert "'locality' is a required property" in str(excinfo.value)
    assert USER_ID in str(excinfo.value)


def test_missing_cross_document_reference(user_profile):
    compiler = _compiler((USER_ID, user_profile))
    with pytest.raises(CompileError) as excinfo:
        compiler.compile(USER_ID)
    assert "address.schema.json" in str(excinfo.value)
    assert excinfo.value.identifier == USER_ID


def test_unknown_target():
    with pytest.raises(CompileError):
        _compiler(("a", {"type": "object"})).compile("b")


def test_dangling_local_pointer():
    with pytest.raises(CompileError):
        _compiler(("s", {"properties": {"x": {"$ref": "#/$defs/missing"}}})).compile("s")


def test_dangling_anchor():
    with pytest.raises(CompileError):
        _compiler(("s", {"$ref": "#nowhere"})).compile("s")


def test_local_references_resolve():
    schema = {
        "$defs": {"positive": {"type": "integer", "minimum": 1}},
        "type": "array",
        "items": {"$ref": "#/$defs/positive"},
    }
    compiled = _compiler(("file:list.json", schema)).compile("file:list.json")
    assert compiled.is_valid([1, 2, 3])
    assert not compiled.is_valid([1, 0])


def test_relative_reference_between_documents():
    compiler = _compiler(
        ("https://example.com/dir/main.json", {"$ref": "item.json"}),
        ("https://example.com/dir/item.json", {"type": "string"}),
    )
    compiled = compiler.compile("https://example.com/dir/main.json")
    assert compiled.is_valid("x")
    assert not compiled.is_valid(1)


def test_referenced_document_must_pass_its_metaschema():
    compiler = _compiler(
        ("https://example.com/a.json", {"$ref": "b.json"}),
        ("https://example.com/b.json", {"type": "nonesuch"}),
    )
    with pytest.raises(CompileError) as excinfo:
        compiler.compile("https://example.com/a.json")
    assert excinfo.value.identifier == "https://example.com/a.json"
    assert "'b.json' is not valid against metaschema" in str(excinfo.value)


def test_referenced_document_checked_through_fragment():
    compiler = _compiler(
        ("https://example.com/a.json", {"$ref": "defs.json#/$defs/name"}),
        ("https://example.com/defs.json", {"$defs": {"name": {"type": "string"}}, "minLength": -1}),
    )
    with pytest.raises(CompileError):
        compiler.compile("https://example.com/a.json")


def test_referenced_document_uses_its_own_dialect():
    compiler = _compiler(
        ("https://example.com/a.json", {"$ref": "b.json"}),
        (
            "https://example.com/b.json",
            {"$schema": "http://json-schema.org/draft-07/schema#", "type": "integer"},
        ),
    )
    compiled = compiler.compile("https://example.com/a.json")
    assert compiled.is_valid(1)
    assert not compiled.is_valid("1")


def test_unreferenced_malformed_document_is_not_checked():
    compiler = _compiler(
        ("https://example.com/a.json", {"type": "string"}),
        ("https://example.com/b.json", {"type": "nonesuch"}),
    )
    assert compiler.compile("https://example.com/a.json").is_valid("x")


def test_fragment_target():
    compiler = _compiler(
        ("https://example.com/defs.json", {"$defs": {"count": {"type": "integer", "minimum": 0}}}),
    )
    compiled = compiler.compile("https://example.com/defs.json#/$defs/count")
    assert compiled.is_valid(3)
    assert not compiled.is_valid(-1)


def test_invalid_keyword_value():
    with pytest.raises(CompileError) as excinfo:
        _compiler(("s", {"type": "not-a-type"})).compile("s")
    assert "metaschema" in str(excinfo.value)


def test_unknown_dialect():
    compiler = _compiler(("s", {"$schema": "https://example.com/my-dialect", "type": "object"}))
    with pytest.raises(CompileError) as excinfo:
        compiler.compile("s")
    assert "unsupported draft" in str(excinfo.value)


def test_draft7_dialect_is_detected():
    schema = {"$schema": "http://json-schema.org/draft-07/schema#", "type": "object", "required": ["a"]}
    compiled = _compiler(("s", schema)).compile("s")
    assert compiled.is_valid({"a": 1})
    assert not compiled.is_valid({})


def test_metaschema_reference_resolves():
    compiled = _compiler(("s", {"$ref": "https://json-schema.org/draft/2020-12/schema"})).compile("s")
    assert compiled.is_valid({"type": "object"})
    assert not compiled.is_valid({"type": 12})


def test_formats_are_annotations_by_default():
    schema = {"type": "string", "format": "email"}
    assert _compiler(("s", schema)).compile("s").is_valid("not an email")

    strict = _compiler(("s", schema), config=ValidatorConfig(assert_formats=True)).compile("s")
    assert not strict.is_valid("not an email")


def test_duplicate_resource():
    compiler = _compiler(("s", {}))
    with pytest.raises(ResourceError):
        compiler.add_resource("s", {"type": "object"})
    assert "s" in compiler


def test_reference_cycles_terminate():
    schema = {
        "type": "object",
        "properties": {"child": {"$ref": "#"}},
    }
    compiled = _compiler(("tree", schema)).compile("tree")
    assert compiled.is_valid({"child": {"child": {}}})
    assert not compiled.is_valid({"child": {"child": 1}})
