"""Tests for the subset YAML frontmatter parser."""

import pytest

from staticmcp.yaml_subset import parse_number, parse_yaml_subset


class TestScalars:
    """Test single-line value forms."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("title: Getting Started", "Getting Started"),
            ('title: "Quoted: value"', "Quoted: value"),
            ("title: 'single'", "single"),
            ('title: "true"', "true"),
            ('title: "no \\n escapes"', "no \\n escapes"),
            ("draft: true", True),
            ("draft: false", False),
            ("position: 1", 1),
            ("ratio: 1.5", 1.5),
            ("version: 1.0", 1),
            ("big: 1e3", 1000),
            ("neg: -2", -2),
            ("half: .5", 0.5),
            ("hex: 0x10", 16),
            ("underscored: 1_000", "1_000"),
            ("nan: NaN", "NaN"),
            ("url: https://example.com/a", "https://example.com/a"),
            ("padded:    spaced out   ", "spaced out"),
        ],
    )
    def test_scalar(self, line, expected):
        result = parse_yaml_subset(line)
        (value,) = result.values()
        assert value == expected
        assert type(value) is type(expected)

    def test_json_array(self):
        """Strict JSON arrays are parsed."""
        assert parse_yaml_subset('tags: ["a", 2, true]') == {"tags": ["a", 2, True]}

    def test_non_finite_json_array_is_string(self):
        """NaN and Infinity are not strict JSON."""
        assert parse_yaml_subset("v: [NaN]") == {"v": "[NaN]"}
        assert parse_yaml_subset("v: [1, -Infinity]") == {"v": "[1, -Infinity]"}

    def test_non_json_array_is_string(self):
        """A bracketed value that is not strict JSON stays a string."""
        assert parse_yaml_subset("tags: [deployment, production]") == {
            "tags": "[deployment, production]"
        }

    def test_comments_and_blank_lines_skipped(self):
        text = "# a comment: with colon\n\ntitle: x\n   # indented comment"
        assert parse_yaml_subset(text) == {"title": "x"}

    def test_lines_without_colon_skipped(self):
        assert parse_yaml_subset("just text\ntitle: x") == {"title": "x"}

    def test_duplicate_key_last_wins(self):
        assert parse_yaml_subset("a: 1\na: 2") == {"a": 2}

    def test_keys_case_sensitive(self):
        assert parse_yaml_subset("Title: A\ntitle: b") == {"Title": "A", "title": "b"}


class TestLiteralBlock:
    """Test | blocks."""

    def test_two_lines(self):
        """Lines joined with newlines."""
        text = "desc: |\n  line one\n  line two"
        assert parse_yaml_subset(text) == {"desc": "line one\nline two"}

    def test_internal_blank_lines_kept(self):
        text = "desc: |\n  a\n\n  b\nnext: 1"
        assert parse_yaml_subset(text) == {"desc": "a\n\nb", "next": 1}

    def test_deeper_indentation_kept(self):
        """Exactly the base indent is stripped."""
        text = "code: |\n  def f():\n      return 1"
        assert parse_yaml_subset(text) == {"code": "def f():\n    return 1"}

    def test_stops_at_dedent(self):
        text = "desc: |\n    one\n    two\ntitle: T"
        assert parse_yaml_subset(text) == {"desc": "one\ntwo", "title": "T"}

    def test_unindented_lines_collected(self):
        """Base indent comes from the first line, even when it is zero."""
        text = "desc: |\nline one\nline two"
        assert parse_yaml_subset(text) == {"desc": "line one\nline two"}


class TestFoldedBlock:
    """Test > blocks."""

    def test_two_lines(self):
        """Lines joined with a single space."""
        text = "desc: >\n  line one\n  line two"
        assert parse_yaml_subset(text) == {"desc": "line one line two"}

    def test_blank_lines_skipped(self):
        text = "desc: >\n  one\n\n    two  \nafter: x"
        assert parse_yaml_subset(text) == {"desc": "one two", "after": "x"}


class TestBlockArray:
    """Test key: followed by - items."""

    def test_unindented_items(self):
        assert parse_yaml_subset("tags:\n- a\n- b") == {"tags": ["a", "b"]}

    def test_indented_items(self):
        assert parse_yaml_subset("tags:\n  - a\n  - b") == {"tags": ["a", "b"]}

    def test_items_stay_strings(self):
        assert parse_yaml_subset("nums:\n  - 1\n  - true") == {"nums": ["1", "true"]}

    def test_continuation_joined(self):
        """A deeper non-item line continues the previous item."""
        text = "tags:\n  - long\n    item\n  - b"
        assert parse_yaml_subset(text) == {"tags": ["long item", "b"]}

    def test_following_key_parsed(self):
        """The first dedented line is handed back to the main loop."""
        text = "tags:\n  - a\n  - b\ntitle: Hello\ndraft: true"
        assert parse_yaml_subset(text) == {"tags": ["a", "b"], "title": "Hello", "draft": True}

    def test_continuation_at_item_indent(self):
        """A non-item line at the same indent continues the last item."""
        assert parse_yaml_subset("tags:\n- a\nmore") == {"tags": ["a more"]}

    def test_unindented_items_consume_following_lines(self):
        """Only a dedent below the base indent ends the list."""
        text = "tags:\n- a\ntitle: x"
        assert parse_yaml_subset(text) == {"tags": ["a title: x"]}

    def test_empty_value_at_end(self):
        assert parse_yaml_subset("title: x\ntags:") == {"title": "x", "tags": []}

    def test_empty_value_reads_next_line_as_block(self):
        """The next line sets the base indent, so it belongs to the block."""
        assert parse_yaml_subset("tags:\ntitle: x") == {"tags": []}


class TestParseNumber:
    """Test numeric detection."""

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "1e", "0x", "Infinity", "1e999"])
    def test_not_numbers(self, text):
        assert parse_number(text) is None

    def test_large_float_kept_float(self):
        assert parse_number("1e20") == 1e20
        assert isinstance(parse_number("1e20"), float)
