"""Unit tests for the value codec (remote reference marshalling)."""

import math

import pytest
from pydantic import BaseModel

from driverwire.errors import EncodingError
from driverwire.protocol.values import (
    ELEMENT_KEY,
    FRAME_KEY,
    SHADOW_ROOT_KEY,
    WINDOW_KEY,
    ElementRef,
    FrameRef,
    ShadowRootRef,
    WindowRef,
    as_reference,
    decode_value,
    encode_value,
)

SID = "sess-1"


class TestSentinelKeys:
    """The reserved identifiers are fixed by the protocol."""

    def test_element_key(self):
        assert ELEMENT_KEY == "element-6066-11e4-a52e-4f735466cecf"

    def test_other_keys(self):
        assert SHADOW_ROOT_KEY == "shadow-6066-11e4-a52e-4f735466cecf"
        assert FRAME_KEY == "frame-075b-4da1-b6ba-e579c2d3230a"
        assert WINDOW_KEY == "window-fcc6-11e5-b4f8-330a88ab9d7f"


class TestReferences:
    """Test reference handle semantics."""

    def test_equality_by_id_within_session(self):
        """Two handles to the same id in the same session are equal."""
        assert ElementRef(SID, "a") == ElementRef(SID, "a")
        assert ElementRef(SID, "a") != ElementRef(SID, "b")
        assert ElementRef(SID, "a") != ElementRef("other", "a")

    def test_kinds_are_distinct(self):
        """An element and a shadow root with the same id are different."""
        assert ElementRef(SID, "a") != ShadowRootRef(SID, "a")

    def test_hashable(self):
        """Handles can be used as dict keys and in sets."""
        refs = {ElementRef(SID, "a"), ElementRef(SID, "a"), ElementRef(SID, "b")}

        assert len(refs) == 2

    def test_immutable(self):
        """Handles cannot be mutated."""
        ref = ElementRef(SID, "a")

        with pytest.raises(AttributeError):
            ref.id = "b"  # type: ignore[misc]

    def test_to_json(self):
        assert ElementRef(SID, "a").to_json() == {ELEMENT_KEY: "a"}
        assert WindowRef(SID, "w").to_json() == {WINDOW_KEY: "w"}


class TestEncode:
    """Test encode_value()."""

    def test_scalars_pass_through(self):
        for value in ("text", 1, 1.5, True, False, None):
            assert encode_value(value) == value

    def test_reference_at_top_level(self):
        assert encode_value(ElementRef(SID, "e1")) == {ELEMENT_KEY: "e1"}

    def test_references_at_depth(self):
        """References are rewritten wherever they appear."""
        value = {
            "list": [1, [ElementRef(SID, "e1"), {"deep": ShadowRootRef(SID, "s1")}]],
            "frame": FrameRef(SID, "f1"),
            "plain": {"a": "b"},
        }

        assert encode_value(value) == {
            "list": [1, [{ELEMENT_KEY: "e1"}, {"deep": {SHADOW_ROOT_KEY: "s1"}}]],
            "frame": {FRAME_KEY: "f1"},
            "plain": {"a": "b"},
        }

    def test_tuples_become_lists(self):
        assert encode_value((1, ElementRef(SID, "e"))) == [1, {ELEMENT_KEY: "e"}]

    def test_wrapper_with_remote_reference(self):
        """Objects exposing remote_reference encode as that reference."""

        class Wrapper:
            remote_reference = ElementRef(SID, "wrapped")

        assert encode_value([Wrapper()]) == [{ELEMENT_KEY: "wrapped"}]

    def test_pydantic_model(self):
        """Models are dumped by alias without unset fields."""

        class Point(BaseModel):
            x: int
            y: int | None = None

        assert encode_value({"p": Point(x=1)}) == {"p": {"x": 1}}

    def test_unserializable_object_rejected(self):
        with pytest.raises(EncodingError, match="object"):
            encode_value({"a": object()})

    def test_set_rejected(self):
        with pytest.raises(EncodingError):
            encode_value({1, 2})

    def test_non_string_key_rejected(self):
        with pytest.raises(EncodingError, match="keys must be strings"):
            encode_value({1: "a"})

    @pytest.mark.parametrize("number", [math.nan, math.inf, -math.inf])
    def test_non_finite_numbers_rejected(self, number: float):
        with pytest.raises(EncodingError):
            encode_value([number])

    def test_reference_from_another_session_rejected(self):
        """A handle cannot be sent to a session that did not issue it."""
        with pytest.raises(EncodingError, match="belongs to session"):
            encode_value([ElementRef("other", "e1")], session_id=SID)

    def test_reference_session_not_checked_without_session_id(self):
        assert encode_value(ElementRef("other", "e1")) == {ELEMENT_KEY: "e1"}


class TestDecode:
    """Test decode_value()."""

    def test_scalars_pass_through(self):
        for value in ("text", 1, 1.5, True, None):
            assert decode_value(value, SID) == value

    def test_element(self):
        ref = decode_value({ELEMENT_KEY: "e1"}, SID)

        assert ref == ElementRef(SID, "e1")
        assert ref.session_id == SID

    @pytest.mark.parametrize(
        ("key", "ref_type"),
        [
            (ELEMENT_KEY, ElementRef),
            (SHADOW_ROOT_KEY, ShadowRootRef),
            (FRAME_KEY, FrameRef),
            (WINDOW_KEY, WindowRef),
        ],
    )
    def test_each_reference_kind(self, key: str, ref_type: type):
        assert decode_value({key: "x"}, SID) == ref_type(SID, "x")

    def test_nested(self):
        wire = {"rows": [[{ELEMENT_KEY: "a"}], [{ELEMENT_KEY: "b"}, 3]], "n": None}

        assert decode_value(wire, SID) == {
            "rows": [[ElementRef(SID, "a")], [ElementRef(SID, "b"), 3]],
            "n": None,
        }

    def test_extra_key_is_a_plain_object(self):
        """A sentinel key alongside other keys is not a reference."""
        wire = {"element-6066-11e4-a52e-4f735466cecf": "abc", "extra": 1}

        decoded = decode_value(wire, SID)

        assert decoded == wire
        assert isinstance(decoded, dict)

    def test_misspelled_key_is_a_plain_object(self):
        wire = {"element-6066-11e4-a52e-4f735466cecF": "abc"}

        assert decode_value(wire, SID) == wire

    def test_legacy_element_key_is_a_plain_object(self):
        wire = {"ELEMENT": "abc"}

        assert decode_value(wire, SID) == wire

    def test_non_string_id_is_a_plain_object(self):
        wire = {ELEMENT_KEY: 5}

        assert decode_value(wire, SID) == wire

    def test_plain_object_children_are_still_decoded(self):
        """A non-reference object may contain references."""
        wire = {ELEMENT_KEY: "outer", "child": {ELEMENT_KEY: "inner"}}

        assert decode_value(wire, SID) == {
            ELEMENT_KEY: "outer",
            "child": ElementRef(SID, "inner"),
        }

    def test_unknown_ids_decode_without_error(self):
        """Decoding never checks whether the remote object exists."""
        ref = decode_value({ELEMENT_KEY: "fbe5004d-ec8b-4c7b-ad08-642c55d84505"}, SID)

        assert ref == ElementRef(SID, "fbe5004d-ec8b-4c7b-ad08-642c55d84505")

    def test_as_reference_on_non_objects(self):
        assert as_reference([ELEMENT_KEY], SID) is None
        assert as_reference({}, SID) is None


WIRE_TREES = [
    None,
    [],
    {},
    {ELEMENT_KEY: "a"},
    [{ELEMENT_KEY: "a"}, {SHADOW_ROOT_KEY: "s"}, {FRAME_KEY: "f"}, {WINDOW_KEY: "w"}],
    {"a": {"b": {"c": [{"d": {ELEMENT_KEY: "deep"}}]}}},
    {ELEMENT_KEY: "not-a-ref", "extra": [{ELEMENT_KEY: "ref"}]},
    {"mixed": [1, "two", 3.0, True, None, {ELEMENT_KEY: "x"}]},
]


class TestRoundTrip:
    """encode and decode are inverses on references at any depth."""

    @pytest.mark.parametrize("wire", WIRE_TREES)
    def test_encode_of_decode_reproduces_wire(self, wire):
        assert encode_value(decode_value(wire, SID), session_id=SID) == wire

    def test_decode_of_encode_reproduces_value(self):
        value = {
            "elements": [ElementRef(SID, "a"), ElementRef(SID, "b")],
            "nested": {"root": ShadowRootRef(SID, "s"), "n": [1, [WindowRef(SID, "w")]]},
        }

        assert decode_value(encode_value(value, session_id=SID), SID) == value
