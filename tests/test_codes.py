from occupation_browser.utils.codes import CodePrefixes, parse_code


class TestParseCode:
    def test_four_digit_code_yields_all_levels(self):
        assert parse_code("2512") == CodePrefixes("2", "25", "251", "2512")

    def test_suffix_after_dot_is_ignored(self):
        prefixes = parse_code("2512.1.3")
        assert prefixes == CodePrefixes("2", "25", "251", "2512")
        assert prefixes.deepest == "2512"

    def test_short_code_leaves_deeper_levels_undefined(self):
        prefixes = parse_code("25")
        assert prefixes == CodePrefixes("2", "25", None, None)
        assert prefixes.levels() == ["2", "25"]
        assert prefixes.deepest == "25"

    def test_long_code_is_cut_at_unit_level(self):
        assert parse_code("25123").unit == "2512"

    def test_empty_or_missing_code(self):
        assert parse_code("") is None
        assert parse_code(None) is None

    def test_code_with_nothing_before_dot(self):
        assert parse_code(".5") is None

    def test_non_numeric_code_is_sliced_as_is(self):
        assert parse_code("ab1") == CodePrefixes("a", "ab", "ab1", None)
