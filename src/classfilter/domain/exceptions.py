"""Domain exceptions: all public errors of classfilter.

All exceptions visible to users are defined here.
Parser and construction code raise these, never their own public exceptions.
"""


class ClassFilterError(Exception):
    """Base for all classfilter error exceptions.

    Allows: except ClassFilterError to catch all library errors.
    """


class EmptyArgumentListError(ClassFilterError, ValueError):
    """Filter constructed with a missing or empty argument list.

    Raised for string-list filters without strings, and for combinators
    receiving a None child.

    Attributes:
        kind: Canonical name of the filter being constructed.
        reason: What was missing.
    """

    def __init__(self, kind: str, reason: str) -> None:
        """Initialize with filter kind and reason."""
        self.kind = kind
        self.reason = reason
        super().__init__(f"{kind}: {reason}")


class FilterParseError(ClassFilterError, ValueError):
    """Failed to parse a filter expression.

    FAIL-FIRST: no partial filter tree is ever returned.

    Attributes:
        fragment: Offending part of the expression.
        reason: Error description.
    """

    def __init__(self, fragment: str, reason: str) -> None:
        """Initialize with offending fragment and reason."""
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"{reason}: {fragment!r}")


class UnknownFilterKindError(FilterParseError):
    """Expression header names no registered filter kind.

    Attributes:
        name: The unrecognized kind identifier.
    """

    def __init__(self, name: str) -> None:
        """Initialize with unrecognized kind name."""
        self.name = name
        super().__init__(name, "not a registered filter kind")


class MalformedExpressionError(FilterParseError):
    """Unbalanced parentheses, truncated input or stray text."""


class WrongArityError(FilterParseError):
    """Filter kind received fewer or more arguments than it accepts.

    Attributes:
        kind: Canonical name of the filter kind.
    """

    def __init__(self, kind: str, fragment: str, reason: str) -> None:
        """Initialize with kind, offending arguments and reason."""
        self.kind = kind
        super().__init__(fragment, f"{kind}: {reason}")


class UnresolvableTypeError(FilterParseError):
    """Type name could not be resolved or is not an annotation type.

    Raised by HasAnnotation construction, never by evaluation.
    """


class InvalidCasePolicyError(FilterParseError):
    """Token is neither 'Sensitive' nor 'Insensitive'."""

    def __init__(self, token: str) -> None:
        """Initialize with offending token."""
        super().__init__(token, "not a case policy (expected Sensitive or Insensitive)")
