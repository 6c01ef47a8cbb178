"""Semantic commit comment parsing.

A comment is classified by its leading prefix token and delimiter:

    <type>: description    non-breaking change
    <type>! description    breaking change

where <type> is one of ``feat``, ``fix`` or ``refact``. The prefix must start
at the first character of the comment, and only the first delimiter counts;
any ``:`` or ``!`` after it belongs to the description.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from semver_py.exceptions import (
    InvalidCommentFormatError,
    SerializationError,
    UnexpectedSemanticTypeError,
)

BREAKING_DELIMITER = "!"
NON_BREAKING_DELIMITER = ":"


class ChangeKind(Enum):
    """The intent of a change, as declared by its comment prefix."""

    FIX = "Fix"
    FEATURE = "Feature"
    REFACTORING = "Refactoring"


# Prefix tokens are case-sensitive.
PREFIX_TO_KIND: dict[str, ChangeKind] = {
    "feat": ChangeKind.FEATURE,
    "fix": ChangeKind.FIX,
    "refact": ChangeKind.REFACTORING,
}


@dataclass(frozen=True, slots=True)
class SemanticType:
    """A change kind together with its breaking flag."""

    kind: ChangeKind
    is_breaking: bool = False

    @classmethod
    def fix(cls, is_breaking: bool = False) -> SemanticType:
        return cls(ChangeKind.FIX, is_breaking)

    @classmethod
    def feature(cls, is_breaking: bool = False) -> SemanticType:
        return cls(ChangeKind.FEATURE, is_breaking)

    @classmethod
    def refactoring(cls, is_breaking: bool = False) -> SemanticType:
        return cls(ChangeKind.REFACTORING, is_breaking)


@dataclass(frozen=True, slots=True)
class SemanticComment:
    """A classified comment.

    Attributes:
        comment: The description following the delimiter, whitespace trimmed
        semantic_type: Change kind and breaking flag taken from the prefix
    """

    comment: str
    semantic_type: SemanticType

    @property
    def is_breaking(self) -> bool:
        return self.semantic_type.is_breaking

    @classmethod
    def parse(cls, comment: str) -> SemanticComment:
        """Classify a comment string.

        Args:
            comment: Raw comment, e.g. ``"feat! drop legacy config"``

        Returns:
            The parsed SemanticComment

        Raises:
            InvalidCommentFormatError: If there is no ``<token>:`` or
                ``<token>!`` prefix at the start of the comment
            UnexpectedSemanticTypeError: If the prefix token is not
                ``feat``, ``fix`` or ``refact``
        """
        end = _scan_prefix_token(comment)
        if end == 0 or end == len(comment):
            raise InvalidCommentFormatError(comment)

        delimiter = comment[end]
        if delimiter not in (NON_BREAKING_DELIMITER, BREAKING_DELIMITER):
            raise InvalidCommentFormatError(comment)

        prefix = comment[:end].strip()
        kind = PREFIX_TO_KIND.get(prefix)
        if kind is None:
            raise UnexpectedSemanticTypeError(prefix)

        return cls(
            comment=comment[end + 1 :].strip(),
            semantic_type=SemanticType(kind, is_breaking=delimiter == BREAKING_DELIMITER),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the external representation of this classification.

        The change kind is the key of a single-entry mapping:

            {"comment": "...", "semantic_type": {"Fix": {"is_breaking": false}}}
        """
        return {
            "comment": self.comment,
            "semantic_type": {
                self.semantic_type.kind.value: {"is_breaking": self.semantic_type.is_breaking},
            },
        }

    def as_json_string(self, indent: int | None = None) -> str:
        """Serialize to JSON.

        Raises:
            SerializationError: If the value cannot be encoded
        """
        try:
            text = json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
            # Lone surrogates pass json.dumps but cannot be written out.
            text.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"error while serializing comment: {e}") from e
        return text

    @classmethod
    def from_dict(cls, data: Any) -> SemanticComment:
        """Build a SemanticComment from the mapping produced by to_dict().

        Raises:
            SerializationError: If the mapping does not have the expected shape
        """
        if not isinstance(data, dict) or set(data) != {"comment", "semantic_type"}:
            raise SerializationError("expected an object with 'comment' and 'semantic_type'")

        comment = data["comment"]
        semantic_type = data["semantic_type"]
        if not isinstance(comment, str):
            raise SerializationError("'comment' must be a string")
        if not isinstance(semantic_type, dict) or len(semantic_type) != 1:
            raise SerializationError("'semantic_type' must have exactly one kind")

        ((kind_name, metadata),) = semantic_type.items()
        try:
            kind = ChangeKind(kind_name)
        except ValueError as e:
            raise SerializationError(f"unknown semantic type {kind_name!r}") from e

        if not isinstance(metadata, dict) or not isinstance(metadata.get("is_breaking"), bool):
            raise SerializationError(f"{kind_name!r} must carry a boolean 'is_breaking'")

        return cls(comment=comment, semantic_type=SemanticType(kind, metadata["is_breaking"]))

    @classmethod
    def from_json(cls, text: str) -> SemanticComment:
        """Inverse of as_json_string().

        Raises:
            SerializationError: If the text is not valid JSON of the expected shape
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"error while deserializing comment: {e}") from e
        return cls.from_dict(data)


def _is_token_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _scan_prefix_token(comment: str) -> int:
    """Return the end index of the token run starting at index 0."""
    end = 0
    while end < len(comment) and _is_token_char(comment[end]):
        end += 1
    return end


def parse_comment(comment: str) -> SemanticComment:
    """Classify a comment string. See SemanticComment.parse()."""
    return SemanticComment.parse(comment)
