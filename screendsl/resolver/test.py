"""Unit tests for the Value Resolver."""

import pytest

from screendsl.resolver import (
    MAX_DEPTH,
    first_present,
    get_max_depth,
    lookup,
    parse_float,
    resolve,
    resolve_bool,
    resolve_list,
    resolve_mapping,
    resolve_number,
    resolve_string,
    unwrap,
    unwrap_tree,
)


def _nest(value, depth: int, key: str = "value"):
    """Wrap a value ``depth`` times under ``key``."""
    for _ in range(depth):
        value = {key: value}
    return value


class TestUnwrap:
    """Tests for the wrapper priority and termination rules."""

    @pytest.mark.unit
    def test_none_returns_fallback(self):
        assert resolve(None, "fallback") == "fallback"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["text", 0, 1.5, False, True, [1, 2]])
    def test_primitives_pass_through(self, value):
        """Primitives ignore the fallback."""
        assert resolve(value, "fallback") == value

    @pytest.mark.unit
    def test_value_wins_over_const_and_properties(self):
        wrapped = {"value": "v", "const": "c", "properties": {"value": "p"}}
        assert resolve(wrapped) == "v"

    @pytest.mark.unit
    def test_const_wins_over_properties(self):
        assert resolve({"const": "c", "properties": {"value": "p"}}) == "c"

    @pytest.mark.unit
    def test_falsy_value_key_is_still_followed(self):
        """A present value key is used even when falsy."""
        assert resolve({"value": False, "const": True}) is False
        assert resolve({"value": 0, "const": 5}) == 0

    @pytest.mark.unit
    def test_null_value_key_resolves_to_fallback(self):
        assert resolve({"value": None, "const": "c"}, "fb") == "fb"

    @pytest.mark.unit
    def test_properties_container_is_entered(self):
        assert resolve({"properties": {"value": "inner"}}) == "inner"

    @pytest.mark.unit
    def test_plain_mapping_returned_unchanged(self):
        data = {"color": "#fff"}
        assert resolve(data) is data

    @pytest.mark.unit
    def test_mixed_nesting(self):
        wrapped = {"properties": {"value": {"const": {"value": 12}}}}
        assert resolve(wrapped) == 12

    @pytest.mark.unit
    def test_depth_bound_allows_max_depth(self):
        assert unwrap(_nest("deep", MAX_DEPTH)) == "deep"

    @pytest.mark.unit
    def test_depth_bound_exceeded_returns_fallback(self):
        assert unwrap(_nest("deep", MAX_DEPTH + 1), "fb") == "fb"

    @pytest.mark.unit
    def test_custom_depth(self):
        assert unwrap(_nest(1, 3), "fb", max_depth=2) == "fb"
        assert unwrap(_nest(1, 2), "fb", max_depth=2) == 1

    @pytest.mark.unit
    def test_self_referential_structure_terminates(self):
        cyclic: dict = {}
        cyclic["value"] = cyclic
        assert unwrap(cyclic, "safe") == "safe"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["x", 3, 2.5, True, None])
    def test_resolution_is_idempotent(self, value):
        once = resolve(value, "f")
        assert resolve(once, "f") == once


class TestResolveBool:
    """Tests for boolean coercion."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["true", "1", "yes", "y", " YES ", "True"])
    def test_truthy_strings(self, text):
        assert resolve_bool(text, False) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["false", "0", "no", "n", " No "])
    def test_falsy_strings(self, text):
        assert resolve_bool(text, True) is False

    @pytest.mark.unit
    def test_numbers(self):
        assert resolve_bool(1, False) is True
        assert resolve_bool(0, True) is False
        assert resolve_bool(-2.5, False) is True

    @pytest.mark.unit
    def test_wrapped_values(self):
        assert resolve_bool({"value": "no"}, True) is False
        assert resolve_bool({"const": "yes"}, False) is True
        assert resolve_bool({"properties": {"value": "true"}}, False) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["maybe", "", {}, [], {"other": 1}, None])
    def test_unrecognized_returns_fallback(self, value):
        assert resolve_bool(value, True) is True
        assert resolve_bool(value, False) is False


class TestResolveNumber:
    """Tests for number coercion."""

    @pytest.mark.unit
    def test_numbers_pass_through(self):
        assert resolve_number(3, 0) == 3
        assert resolve_number(2.5, 0) == 2.5

    @pytest.mark.unit
    def test_strings_use_parse_float(self):
        assert resolve_number("14", 0) == 14
        assert resolve_number("12.5px", 0) == 12.5
        assert resolve_number({"value": "-3"}, 0) == -3

    @pytest.mark.unit
    def test_integral_strings_become_int(self):
        result = resolve_number("240px", 0)
        assert result == 240
        assert isinstance(result, int)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", ["", "   ", "abc", "px", True, {}, [], None, float("nan")]
    )
    def test_unparseable_returns_fallback(self, value):
        assert resolve_number(value, 7) == 7


class TestResolveString:
    """Tests for string coercion."""

    @pytest.mark.unit
    def test_strings_pass_through(self):
        assert resolve_string({"const": "header"}) == "header"

    @pytest.mark.unit
    def test_json_style_stringification(self):
        assert resolve_string(True) == "true"
        assert resolve_string(12.0) == "12"
        assert resolve_string(1.5) == "1.5"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", None, {"value": None}, {"a": 1}, [1]])
    def test_empty_returns_fallback(self, value):
        assert resolve_string(value, "fb") == "fb"


class TestResolveContainers:
    """Tests for mapping/list coercion."""

    @pytest.mark.unit
    def test_mapping(self):
        assert resolve_mapping({"properties": {"a": 1}}) == {"a": 1}
        assert resolve_mapping("text", {}) == {}

    @pytest.mark.unit
    def test_list(self):
        assert resolve_list({"value": [1, 2]}) == [1, 2]
        assert resolve_list({"a": 1}, []) == []


class TestFallbackTotality:
    """Malformed input always resolves to the fallback."""

    MALFORMED = [None, {"value": None}, {"const": None}, _nest(None, 40)]

    @pytest.mark.unit
    @pytest.mark.parametrize("value", MALFORMED)
    def test_every_coercion_falls_back(self, value):
        sentinel = object()
        assert resolve(value, sentinel) is sentinel
        assert resolve_bool(value, True) is True
        assert resolve_number(value, sentinel) is sentinel
        assert resolve_string(value, sentinel) is sentinel


class TestLookup:
    """Tests for path lookup and alias helpers."""

    @pytest.mark.unit
    def test_direct_path(self):
        assert lookup({"a": {"b": 1}}, "a", "b") == 1

    @pytest.mark.unit
    def test_enters_properties_containers(self):
        props = {"layout": {"properties": {"css": {"container": {"padding": "4px"}}}}}
        assert lookup(props, "layout", "css", "container") == {"padding": "4px"}

    @pytest.mark.unit
    def test_missing_path_returns_fallback(self):
        assert lookup({"a": 1}, "a", "b", fallback="fb") == "fb"
        assert lookup(None, "a", fallback={}) == {}

    @pytest.mark.unit
    def test_first_present_skips_none(self):
        data = {"a": None, "b": False, "c": True}
        assert first_present(data, ["a", "b", "c"]) is False
        assert first_present(data, ["x"]) is None
        assert first_present("not a mapping", ["a"]) is None


class TestUnwrapTree:
    """Tests for whole-tree unwrapping."""

    @pytest.mark.unit
    def test_unwraps_nested_props(self):
        tree = {
            "title": {"value": "Hello"},
            "style": {"properties": {"color": {"const": "#000"}}},
            "items": [{"value": 1}, {"label": {"value": "x"}}],
        }
        assert unwrap_tree(tree) == {
            "title": "Hello",
            "style": {"color": "#000"},
            "items": [1, {"label": "x"}],
        }

    @pytest.mark.unit
    def test_cyclic_tree_is_truncated(self):
        cyclic: dict = {"name": "loop"}
        cyclic["child"] = cyclic
        result = unwrap_tree(cyclic, max_depth=3)
        assert result["name"] == "loop"
        assert result["child"]["child"]["child"]["child"] is None


class TestHelpers:
    """Tests for parse_float and configuration."""

    @pytest.mark.unit
    def test_parse_float(self):
        assert parse_float("  -4.5em") == -4.5
        assert parse_float(".5") == 0.5
        assert parse_float("1e2px") == 100.0
        assert parse_float("abc") is None

    @pytest.mark.unit
    def test_get_max_depth_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SCREENDSL_MAX_RESOLVE_DEPTH", "8")
        assert get_max_depth() == 8

    @pytest.mark.unit
    def test_unwrap_honours_configured_depth(self, monkeypatch):
        """SCREENDSL_MAX_RESOLVE_DEPTH bounds unwrap when no depth is passed."""
        monkeypatch.setenv("SCREENDSL_MAX_RESOLVE_DEPTH", "2")
        assert unwrap(_nest(5, 2), "fb") == 5
        assert unwrap(_nest(5, 4), "fb") == "fb"

    @pytest.mark.unit
    def test_unwrap_tree_honours_configured_depth(self, monkeypatch):
        """unwrap_tree truncates past the configured depth."""
        monkeypatch.setenv("SCREENDSL_MAX_RESOLVE_DEPTH", "1")
        assert unwrap_tree({"a": 1}) == {"a": 1}
        assert unwrap_tree({"a": {"b": {"c": 1}}}) == {"a": {"b": None}}
