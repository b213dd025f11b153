import occupation_browser
from occupation_browser.utils.highlight import highlight_matches


class TestHighlightMatches:
    def test_wraps_inclusive_ranges(self):
        assert highlight_matches("Software developer", [(0, 7)]) == "<mark>Software</mark> developer"

    def test_multiple_ranges_in_any_order(self):
        text = "software tester of software"
        assert highlight_matches(text, [(19, 26), (0, 7)]) == (
            "<mark>software</mark> tester of <mark>software</mark>"
        )

    def test_no_ranges(self):
        assert highlight_matches("Carpenter", []) == "Carpenter"

    def test_text_is_escaped(self):
        assert highlight_matches("R&D <lead>", [(0, 2)]) == "<mark>R&amp;D</mark> &lt;lead&gt;"

    def test_overlapping_ranges_are_merged_forward(self):
        assert highlight_matches("abcdef", [(0, 2), (1, 4)]) == "<mark>abc</mark><mark>de</mark>f"

    def test_highlights_search_result_offsets(self, index):
        result = index.query("software", limit=1)[0]
        label = result.match_for("preferred_label")
        assert occupation_browser.highlight_matches(label.value, label.indices) == "<mark>Software</mark> developer"
