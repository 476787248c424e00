"""
Tests for attribute nodes.

This module tests:
- Immutable modifiers (presence, defaults, descriptions)
- Scalar coercion and Django validators
- Array and nested object validation with dotted error paths
- clean_fields presence handling
"""

from datetime import datetime

import pytest
from bson import ObjectId
from django.core.exceptions import ValidationError

from mongoql.attributes import (
    Presence,
    array,
    boolean,
    clean_fields,
    date,
    number,
    object,
    objectid,
    string,
)


@pytest.mark.unit
class TestModifiers:
    """Modifiers return new nodes and never mutate the original."""

    def test_required_returns_copy(self):
        base = string()
        required = base.required()

        assert required is not base
        assert base.presence is Presence.OPTIONAL
        assert required.is_required

    def test_forbidden_and_optional(self):
        node = string().forbidden()
        assert node.is_forbidden
        assert node.optional().presence is Presence.OPTIONAL

    def test_describe(self):
        node = string().describe("User name")
        assert node.description == "User name"
        assert string().description is None

    def test_default_value_and_callable_default(self):
        assert not string().has_default
        assert boolean().default(False).get_default() is False
        assert array().default(list).get_default() == []

    def test_modifiers_keep_equality(self):
        assert string().max_length(3) == string().max_length(3)
        assert string().max_length(3) != string().max_length(4)

    def test_nodes_are_hashable(self):
        nodes = [
            object({"body": string()}),
            array(object({"body": string()}).named("Comment")),
            string().refine({"create": string().required()}),
            string().max_length(3).email(),
            array().default(list),
        ]
        for node in nodes:
            assert isinstance(hash(node), int)

    def test_equal_nodes_hash_equal(self):
        first = object({"body": string().max_length(3)}).named("Comment")
        second = object({"body": string().max_length(3)}).named("Comment")

        assert first == second
        assert hash(first) == hash(second)
        assert {first: "comment"}[second] == "comment"


@pytest.mark.unit
class TestScalarAttributes:
    def test_string_rejects_non_strings(self):
        with pytest.raises(ValidationError):
            string().clean(5)

    def test_string_max_length(self):
        node = string().max_length(3)
        assert node.clean("abc") == "abc"
        with pytest.raises(ValidationError) as excinfo:
            node.clean("abcd")
        assert "at most 3 characters" in excinfo.value.messages[0]

    def test_string_email(self):
        node = string().email()
        assert node.clean("craig@example.com") == "craig@example.com"
        with pytest.raises(ValidationError):
            node.clean("craig")

    def test_string_pattern(self):
        node = string().pattern(r"^[a-z]+$")
        assert node.clean("abc") == "abc"
        with pytest.raises(ValidationError):
            node.clean("ABC")

    def test_number_coerces_strings(self):
        assert number().clean("3.5") == 3.5
        assert number().clean(7) == 7

    def test_number_integer(self):
        node = number().integer()
        assert node.clean("3") == 3
        with pytest.raises(ValidationError):
            node.clean(3.5)

    def test_number_rejects_booleans(self):
        with pytest.raises(ValidationError):
            number().clean(True)

    def test_number_bounds(self):
        node = number().min(1).max(10)
        assert node.clean(5) == 5
        with pytest.raises(ValidationError):
            node.clean(0)
        with pytest.raises(ValidationError):
            node.clean(11)

    def test_boolean(self):
        assert boolean().clean(True) is True
        assert boolean().clean("false") is False
        with pytest.raises(ValidationError):
            boolean().clean("maybe")

    def test_date_parses_iso_strings(self):
        value = date().clean("2024-01-02T03:04:05")
        assert isinstance(value, datetime)
        assert (value.year, value.month, value.day) == (2024, 1, 2)

    def test_date_rejects_garbage(self):
        with pytest.raises(ValidationError):
            date().clean("not a date")

    def test_objectid_converts_hex_strings(self):
        oid = ObjectId()
        assert objectid().clean(str(oid)) == oid
        assert objectid().clean(oid) is oid

    def test_objectid_rejects_invalid(self):
        with pytest.raises(ValidationError):
            objectid().clean("nope")
        with pytest.raises(ValidationError):
            objectid().clean(12)


@pytest.mark.unit
class TestCompositeAttributes:
    def test_array_validates_items(self):
        node = array(number().integer())
        assert node.clean(["1", 2]) == [1, 2]

        with pytest.raises(ValidationError) as excinfo:
            node.clean([1, "x"])
        assert "1" in excinfo.value.message_dict

    def test_array_rejects_non_lists(self):
        with pytest.raises(ValidationError):
            array().clean("abc")

    def test_array_rejects_null_items(self):
        with pytest.raises(ValidationError) as excinfo:
            array(string()).clean(["a", None])
        assert excinfo.value.message_dict["1"] == ["This field cannot be null."]

    def test_untyped_object_accepts_any_mapping(self):
        assert object().clean({"a": 1}) == {"a": 1}
        with pytest.raises(ValidationError):
            object().clean([1])

    def test_object_rejects_unknown_keys(self):
        node = object({"body": string()})
        with pytest.raises(ValidationError) as excinfo:
            node.clean({"body": "hi", "extra": 1})
        assert excinfo.value.message_dict == {"extra": ["This field is not allowed."]}

    def test_nested_errors_use_dotted_paths(self):
        node = array(object({"body": string().required()}))
        with pytest.raises(ValidationError) as excinfo:
            node.clean([{"body": "ok"}, {}])
        assert excinfo.value.message_dict == {"1.body": ["This field is required."]}

    def test_named_object(self):
        assert object({"a": string()}).named("Comment").type_name == "Comment"


@pytest.mark.unit
class TestCleanFields:
    def test_required_missing(self):
        with pytest.raises(ValidationError) as excinfo:
            clean_fields({"name": string().required()}, {})
        assert excinfo.value.message_dict == {"name": ["This field is required."]}

    def test_null_counts_as_absent(self):
        assert clean_fields({"name": string()}, {"name": None}) == {}

    def test_defaults_applied_when_absent(self):
        fields = {"published": boolean().default(False)}
        assert clean_fields(fields, {}) == {"published": False}
        assert clean_fields(fields, {"published": True}) == {"published": True}

    def test_forbidden_present(self):
        with pytest.raises(ValidationError) as excinfo:
            clean_fields({"_id": objectid().forbidden()}, {"_id": str(ObjectId())})
        assert excinfo.value.message_dict == {"_id": ["This field is not allowed."]}

    def test_collects_every_error(self):
        fields = {"name": string().required(), "age": number()}
        with pytest.raises(ValidationError) as excinfo:
            clean_fields(fields, {"age": "old", "nickname": "x"})
        assert set(excinfo.value.message_dict) == {"name", "age", "nickname"}

    def test_absent_optional_fields_omitted(self):
        fields = {"name": string(), "email": string()}
        assert clean_fields(fields, {"name": "Craig"}) == {"name": "Craig"}
