"""Canonical identifier assignment for ordered schema sets."""

from jsonschema_set.registry.identifiers import canonical_identifier, declared_id, resolve_identifiers


def test_anonymous_documents_use_position_suffix():
    schemas = [{"type": "object"}, {"type": "array"}, {"type": "string"}, {}]
    assert resolve_identifiers("D", schemas) == ["D", "D1", "D2", "D3"]


def test_explicit_id_wins_at_position_zero():
    assert resolve_identifiers("D", [{"$id": "first"}, {"type": "array"}]) == ["first", "D1"]


def test_fallback_numbering_follows_absolute_position():
    schemas = [{"$id": "a"}, {"$id": "b"}, {"type": "array"}, {"$id": "c"}, True]
    assert resolve_identifiers("file:test.json", schemas) == ["a", "b", "file:test.json2", "c", "file:test.json4"]


def test_non_string_id_is_ignored():
    assert canonical_identifier("D", 0, {"$id": 42}) == "D"
    assert canonical_identifier("D", 3, {"$id": None}) == "D3"
    assert canonical_identifier("D", 1, {"$id": ["x"]}) == "D1"


def test_non_object_documents_fall_back():
    assert resolve_identifiers("D", [True, [1, 2], "s"]) == ["D", "D1", "D2"]


def test_duplicates_are_not_rejected_here():
    assert resolve_identifiers("s", [{"type": "object"}, {"$id": "s"}]) == ["s", "s"]


def test_empty_set():
    assert resolve_identifiers("D", []) == []


def test_declared_id():
    assert declared_id({"$id": "foo"}) == "foo"
    assert declared_id({"$id": "yo", "id": "hi"}) == "yo"
    assert declared_id({"id": "hi"}) is None
    assert declared_id(False) is None
