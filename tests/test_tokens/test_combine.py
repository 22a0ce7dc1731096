"""Tests for the combiner and modifier expansion."""

from better_bem.tokens import combine, expand_modifiers


class TestCombine:
    def test_cartesian_base_major(self):
        assert combine(("a", "b"), ("x", "y"), "__") == ("a__x", "a__y", "b__x", "b__y")

    def test_empty_base_returns_extra(self):
        assert combine((), ("x", "y"), "__") == ("x", "y")

    def test_empty_extra_returns_nothing(self):
        assert combine(("a", "b"), (), "__") == ()

    def test_both_empty(self):
        assert combine((), (), "--") == ()

    def test_no_dangling_glue_for_empty_parts(self):
        assert combine(("", "a"), ("x", ""), "--") == ("x", "", "a--x", "a")

    def test_empty_glue(self):
        assert combine(("a",), ("b",), "") == ("ab",)

    def test_accepts_lists(self):
        assert combine(["a"], ["b"], "-") == ("a-b",)


class TestExpandModifiers:
    def test_keeps_unmodified_names_first(self):
        result = expand_modifiers(("block",), ["mod_1", "mod_2"], "--", "-")
        assert result == ("block", "block--mod_1", "block--mod_2")

    def test_key_value_modifiers(self):
        result = expand_modifiers(("block",), ["mod_1", {"mod_2": False, "mod_3": "value"}], "--", "-")
        assert result == ("block", "block--mod_1", "block--mod_3-value")

    def test_multiple_bases(self):
        result = expand_modifiers(("a", "b"), "m", "--", "-")
        assert result == ("a", "b", "a--m", "b--m")

    def test_no_modifiers(self):
        assert expand_modifiers(("a",), (), "--", "-") == ("a",)

    def test_no_base(self):
        assert expand_modifiers((), ["m"], "--", "-") == ()

    def test_custom_glue(self):
        assert expand_modifiers(("a",), {"size": 2}, "_", "=") == ("a", "a_size=2")
