"""Tests for semantic commit comment parsing."""

from __future__ import annotations

import json

import pytest

from semver_py.core.commits import (
    ChangeKind,
    SemanticComment,
    SemanticType,
    parse_comment,
)
from semver_py.exceptions import (
    InvalidCommentFormatError,
    ParseError,
    SerializationError,
    UnexpectedSemanticTypeError,
)


class TestParseComment:
    """Tests for parse_comment() / SemanticComment.parse()."""

    @pytest.mark.parametrize(
        ("comment", "expected"),
        [
            ("feat: feature here", SemanticComment("feature here", SemanticType.feature())),
            ("feat! feature here", SemanticComment("feature here", SemanticType.feature(True))),
            ("fix: fix here", SemanticComment("fix here", SemanticType.fix())),
            ("fix! fix here", SemanticComment("fix here", SemanticType.fix(True))),
            ("fix!fix here", SemanticComment("fix here", SemanticType.fix(True))),
            ("refact: refactoring here", SemanticComment("refactoring here", SemanticType.refactoring())),
            ("refact:refactoring here", SemanticComment("refactoring here", SemanticType.refactoring())),
            ("refact! refactoring here", SemanticComment("refactoring here", SemanticType.refactoring(True))),
        ],
    )
    def test_parse_semantic_type(self, comment: str, expected: SemanticComment):
        """Prefix and delimiter select kind and breaking flag."""
        assert parse_comment(comment) == expected

    def test_no_space_after_delimiter(self):
        """A delimiter glued to the description classifies like a spaced one."""
        assert parse_comment("fix!fix here") == parse_comment("fix! fix here")

    def test_description_is_trimmed(self):
        """Whitespace around the description is removed."""
        pc = parse_comment("feat:   add user authentication  \t")
        assert pc.comment == "add user authentication"

    def test_empty_description_allowed(self):
        """Nothing after the delimiter gives an empty description."""
        pc = parse_comment("fix:   ")
        assert pc.comment == ""
        assert pc.semantic_type == SemanticType.fix()

    def test_only_first_delimiter_counts(self):
        """Delimiters inside the description are inert."""
        pc = parse_comment("fix: handle ratio 1:2! now")
        assert pc.comment == "handle ratio 1:2! now"
        assert not pc.is_breaking

    def test_breaking_then_colon(self):
        """'feat!: ...' is breaking and keeps the colon in the description."""
        pc = parse_comment("feat!: redesign API")
        assert pc.is_breaking
        assert pc.semantic_type.kind is ChangeKind.FEATURE
        assert pc.comment == ": redesign API"

    def test_classmethod_matches_function(self):
        """SemanticComment.parse() and parse_comment() agree."""
        assert SemanticComment.parse("refact! x") == parse_comment("refact! x")

    @pytest.mark.parametrize(
        "comment",
        [
            "this is a comment with invalid format",
            "",
            ": missing type",
            " fix: leading space",
            "fix(api): scoped",
            "fix",
            "fix - no delimiter",
        ],
    )
    def test_invalid_format(self, comment: str):
        """Comments without a leading '<type>:' or '<type>!' are rejected."""
        with pytest.raises(InvalidCommentFormatError) as exc_info:
            parse_comment(comment)
        assert exc_info.value.comment == comment

    def test_unexpected_semantic_type(self):
        """Unknown prefix tokens are reported with the offending literal."""
        with pytest.raises(UnexpectedSemanticTypeError) as exc_info:
            parse_comment("wop! some work around.")
        assert exc_info.value.semantic_type == "wop"

    def test_prefix_is_case_sensitive(self):
        """'FEAT' is not 'feat'."""
        with pytest.raises(UnexpectedSemanticTypeError) as exc_info:
            parse_comment("FEAT: uppercase type")
        assert exc_info.value.semantic_type == "FEAT"

    def test_non_ascii_token_rejected(self):
        """Only ASCII letters, digits and underscores form the prefix token."""
        with pytest.raises(InvalidCommentFormatError):
            parse_comment("fïx: accented")

    def test_errors_share_base(self):
        """Parsing errors derive from ParseError."""
        with pytest.raises(ParseError):
            parse_comment("docs: not supported")


class TestSemanticType:
    """Tests for SemanticType equality."""

    def test_structural_equality(self):
        """Kind and breaking flag both take part in equality."""
        assert SemanticType.fix(True) == SemanticType(ChangeKind.FIX, is_breaking=True)
        assert SemanticType.fix(True) != SemanticType.fix(False)
        assert SemanticType.fix() != SemanticType.refactoring()

    def test_comment_is_immutable(self, fix_comment: SemanticComment):
        """Classifications cannot be modified after creation."""
        with pytest.raises(AttributeError):
            fix_comment.comment = "changed"  # type: ignore[misc]


class TestJsonRepresentation:
    """Tests for SemanticComment JSON conversion."""

    def test_to_dict_shape(self):
        """The kind is the single key of semantic_type."""
        pc = parse_comment("feat! breaking feature.")
        assert pc.to_dict() == {
            "comment": "breaking feature.",
            "semantic_type": {"Feature": {"is_breaking": True}},
        }

    def test_as_json_string(self, fix_comment: SemanticComment):
        """JSON output is a single line by default."""
        text = fix_comment.as_json_string()
        assert "\n" not in text
        assert json.loads(text) == {
            "comment": "handle empty input",
            "semantic_type": {"Fix": {"is_breaking": False}},
        }

    def test_as_json_string_indent(self, refact_comment: SemanticComment):
        """An indent spreads the JSON over several lines."""
        text = refact_comment.as_json_string(indent=2)
        assert '\n  "comment": "split parser module"' in text

    def test_as_json_string_rejects_surrogates(self):
        """Lone surrogates cannot be encoded and raise SerializationError."""
        pc = SemanticComment("caf\udcff", SemanticType.fix())

        with pytest.raises(SerializationError):
            pc.as_json_string()

    def test_json_round_trip(self, feat_comment: SemanticComment):
        """Loading the JSON back yields an equal classification."""
        assert SemanticComment.from_json(feat_comment.as_json_string()) == feat_comment

    def test_description_unchanged_by_round_trip(self):
        """Description text survives serialization untouched."""
        pc = parse_comment('fix: quote "this" and ünïcode: ok!')
        assert SemanticComment.from_json(pc.as_json_string()).comment == pc.comment

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "[]",
            '{"comment": "x"}',
            '{"comment": 1, "semantic_type": {"Fix": {"is_breaking": false}}}',
            '{"comment": "x", "semantic_type": {"Docs": {"is_breaking": false}}}',
            '{"comment": "x", "semantic_type": {"Fix": {"is_breaking": "no"}}}',
            '{"comment": "x", "semantic_type": {"Fix": {}, "Feature": {}}}',
        ],
    )
    def test_from_json_rejects_malformed(self, text: str):
        """Malformed JSON raises SerializationError."""
        with pytest.raises(SerializationError):
            SemanticComment.from_json(text)
