"""Tests for domain/exceptions.py."""

import pytest

from classfilter.domain.exceptions import (
    ClassFilterError,
    EmptyArgumentListError,
    FilterParseError,
    InvalidCasePolicyError,
    MalformedExpressionError,
    UnknownFilterKindError,
    UnresolvableTypeError,
    WrongArityError,
)


class TestHierarchy:
    """All errors share one root and the matching builtin."""

    @pytest.mark.parametrize(
        "error",
        [
            EmptyArgumentListError("Name", "at least one string is required"),
            UnknownFilterKindError("Bogus"),
            MalformedExpressionError("And(True()", "unbalanced parentheses"),
            WrongArityError("HasAnnotation", "a, b", "requires exactly one type name"),
            UnresolvableTypeError("a.B", "HasAnnotation: type not found"),
            InvalidCasePolicyError("Maybe"),
        ],
    )
    def test_root_and_value_error(self, error: Exception) -> None:
        """Every error is a ClassFilterError and a ValueError."""
        assert isinstance(error, ClassFilterError)
        assert isinstance(error, ValueError)

    def test_parse_errors_carry_fragment(self) -> None:
        """Parse errors expose the offending fragment."""
        error = MalformedExpressionError("And(True()", "unbalanced parentheses")
        assert isinstance(error, FilterParseError)
        assert error.fragment == "And(True()"
        assert error.reason == "unbalanced parentheses"
        assert "And(True()" in str(error)

    def test_unknown_kind_name(self) -> None:
        """UnknownFilterKindError keeps the name."""
        error = UnknownFilterKindError("Bogus")
        assert error.name == "Bogus"
        assert error.fragment == "Bogus"

    def test_wrong_arity_kind(self) -> None:
        """WrongArityError keeps the kind and prefixes the message."""
        error = WrongArityError("Regex", "", "requires a pattern")
        assert error.kind == "Regex"
        assert error.reason == "Regex: requires a pattern"

    def test_empty_argument_list_message(self) -> None:
        """EmptyArgumentListError message names the kind."""
        error = EmptyArgumentListError("Prefix", "at least one string is required")
        assert str(error) == "Prefix: at least one string is required"
        assert error.kind == "Prefix"
