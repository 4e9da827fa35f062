from cli_helptext.textutil import align, indent_lines, indent_string


class TestAlign:
    """Test column alignment."""

    def test_pads_to_longest(self):
        """Every non-empty entry is padded to the longest length."""
        assert align(["a", "abc", "ab"]) == ["a  ", "abc", "ab "]

    def test_empty_entries_stay_empty(self):
        """Empty entries are not padded."""
        assert align(["", "abcd", ""]) == ["", "abcd", ""]

    def test_idempotent(self):
        """Aligning an aligned column changes nothing."""
        once = align(["-v, ", "-f", "", "-long"])
        assert align(once) == once

    def test_returns_new_list(self):
        """The input column is left untouched."""
        column = ["a", "abc"]
        align(column)
        assert column == ["a", "abc"]

    def test_empty_column(self):
        assert align([]) == []


class TestIndentString:
    """Test indentation of multi-line blocks."""

    def test_prefixes_every_line_but_first(self):
        assert indent_string("a\nb\nc", "> ") == "a\n> b\n> c"

    def test_line_count_unchanged(self):
        text = "one\ntwo\n\nfour\n"
        result = indent_string(text, "    ")
        assert result.count("\n") == text.count("\n")
        assert all(line.startswith("    ") for line in result.split("\n")[1:])

    def test_single_line_unchanged(self):
        assert indent_string("just one", "    ") == "just one"

    def test_not_idempotent(self):
        """Indenting twice double-prefixes."""
        assert indent_string(indent_string("a\nb", "-"), "-") == "a\n--b"


def test_indent_lines_prefixes_first_line_too():
    assert indent_lines(["a\nb", "c"], "  ") == ["  a\n  b", "  c"]
