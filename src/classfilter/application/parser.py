"""Parser service: canonical filter text -> Filter tree.

Grammar:
    expr    := ident "(" args ")"
    args    := "" | item ("," item)*
    item    := expr | token

Kind identifiers and case policy literals are case-insensitive.
FAIL-FIRST: any violation raises a FilterParseError subclass carrying the
offending fragment; no partial tree is ever returned.

Parsing keeps no state between calls beyond the read-only kind registry,
so one parser may serve many threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from classfilter.domain.exceptions import (
    InvalidCasePolicyError,
    MalformedExpressionError,
    UnknownFilterKindError,
    UnresolvableTypeError,
    WrongArityError,
)
from classfilter.domain.model.case import CaseSensitivity
from classfilter.domain.model.filters import (
    CONSTANTS,
    AndFilter,
    FilterKind,
    HasAnnotationFilter,
    NameFilter,
    NotFilter,
    OrFilter,
    PrefixFilter,
    RegexFilter,
    SuffixFilter,
    WildcardFilter,
)
from classfilter.infrastructure.resolvers import ImportlibTypeResolver

if TYPE_CHECKING:
    from collections.abc import Mapping

    from classfilter.domain.model.filters import Filter
    from classfilter.domain.ports.type_resolver import TypeResolver

logger = logging.getLogger(__name__)

# Lowercased canonical name -> kind. Built once, never mutated.
KIND_REGISTRY: Mapping[str, FilterKind] = MappingProxyType(
    {kind.value.casefold(): kind for kind in FilterKind},
)

_STRING_LIST_CLASSES: Mapping[FilterKind, type] = MappingProxyType(
    {
        FilterKind.NAME: NameFilter,
        FilterKind.PREFIX: PrefixFilter,
        FilterKind.SUFFIX: SuffixFilter,
        FilterKind.WILDCARD: WildcardFilter,
    },
)


@dataclass(frozen=True, slots=True)
class Expression:
    """One function expression split into its parts.

    Attributes:
        name: Kind identifier as written
        kind: Resolved filter kind
        args: Raw argument text between the outer parentheses, trimmed
        rest: Text following the closing parenthesis
    """

    name: str
    kind: FilterKind
    args: str
    rest: str


def split_expression(text: str) -> Expression:
    """Split "Name( args )rest" into header, argument span and remainder.

    Args:
        text: Expression text

    Returns:
        Expression with kind resolved

    Raises:
        MalformedExpressionError: No "(" or unbalanced parentheses
        UnknownFilterKindError: Header is not a registered kind
    """
    expr = text.strip()
    open_pos = expr.find("(")
    if open_pos < 0:
        raise MalformedExpressionError(expr, "expected 'Name(...)'")

    name = expr[:open_pos].strip()
    kind = KIND_REGISTRY.get(name.casefold())
    if kind is None:
        raise UnknownFilterKindError(name)

    depth = 1
    for index in range(open_pos + 1, len(expr)):
        char = expr[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return Expression(
                    name=name,
                    kind=kind,
                    args=expr[open_pos + 1 : index].strip(),
                    rest=expr[index + 1 :],
                )

    raise MalformedExpressionError(expr, "unbalanced parentheses")


def split_args(args: str) -> list[str]:
    """Split argument text on top-level commas, trimming each token.

    Commas inside parentheses do not split. Empty text yields no tokens.
    """
    if not args.strip():
        return []

    tokens: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(args):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            tokens.append(args[start:index].strip())
            start = index + 1
    tokens.append(args[start:].strip())
    return tokens


def split_children(args: str) -> list[str]:
    """Split combinator arguments into child expressions.

    A comma separates children only at depth 0 and only once a child
    expression has been closed; a comma before that belongs to the child.

    Raises:
        MalformedExpressionError: Stray text between or after children
    """
    children: list[str] = []
    depth = 0
    start = 0
    closed = False

    for index, char in enumerate(args):
        if closed:
            if char == ",":
                start = index + 1
                closed = False
            elif not char.isspace():
                raise MalformedExpressionError(args[start:], "expected ',' between filters")
            continue

        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                children.append(args[start : index + 1].strip())
                closed = True

    if not closed:
        tail = args[start:].strip()
        if tail:
            raise MalformedExpressionError(tail, "incomplete filter expression")
        if children:
            raise MalformedExpressionError(args, "dangling ','")

    return children


class FilterParser:
    """Parses canonical filter text into filter trees.

    Attributes:
        _resolver: Resolves HasAnnotation type names
    """

    def __init__(self, resolver: TypeResolver | None = None) -> None:
        """Initialize parser.

        Args:
            resolver: Type lookup for HasAnnotation arguments.
                Uses ImportlibTypeResolver if None.
        """
        self._resolver = resolver if resolver is not None else ImportlibTypeResolver()

    def parse(self, text: str) -> Filter:
        """Parse filter text.

        Text after the outermost closing parenthesis is ignored.

        Args:
            text: Filter expression, e.g. "Or( InterfaceClass(), Not( Prefix( org.xenei ) ) )"

        Returns:
            Filter tree

        Raises:
            TypeError: If text is not a string
            FilterParseError: If text is not a valid filter expression
        """
        if not isinstance(text, str):
            raise TypeError(f"filter text must be str, got {type(text).__name__}")

        expression = split_expression(text)
        if expression.rest.strip():
            logger.debug("ignoring text after %s(...): %r", expression.name, expression.rest)
        return self._build(expression)

    def _parse_single(self, text: str) -> Filter:
        """Parse text that must hold exactly one expression."""
        expression = split_expression(text)
        if expression.rest.strip():
            raise MalformedExpressionError(expression.rest.strip(), "unexpected text after filter")
        return self._build(expression)

    def _build(self, expression: Expression) -> Filter:
        kind = expression.kind
        args = expression.args
        logger.debug("building %s from %r", kind.value, args)

        if kind in CONSTANTS:
            if args:
                raise WrongArityError(kind.value, args, "takes no arguments")
            return CONSTANTS[kind]

        match kind:
            case FilterKind.AND | FilterKind.OR:
                children = tuple(self._parse_single(child) for child in split_children(args))
                return AndFilter(children) if kind is FilterKind.AND else OrFilter(children)
            case FilterKind.NOT:
                return self._build_not(args)
            case FilterKind.HAS_ANNOTATION:
                return self._build_has_annotation(args)
            case FilterKind.REGEX:
                return self._build_regex(args)
            case _:
                return self._build_string_list(kind, args)

    def _build_not(self, args: str) -> NotFilter:
        if not args:
            raise WrongArityError("Not", args, "requires one filter")
        expression = split_expression(args)
        if expression.rest.strip():
            raise WrongArityError("Not", args, "requires exactly one filter")
        return NotFilter(self._build(expression))

    def _build_has_annotation(self, args: str) -> HasAnnotationFilter:
        tokens = split_args(args)
        if len(tokens) != 1:
            raise WrongArityError(
                "HasAnnotation",
                args,
                f"requires exactly one type name, got {len(tokens)}",
            )

        type_name = tokens[0]
        info = self._resolver.resolve(type_name)
        if info is None:
            raise UnresolvableTypeError(type_name, "HasAnnotation: type not found")
        if not info.is_annotation:
            raise UnresolvableTypeError(type_name, "HasAnnotation: not an annotation type")
        return HasAnnotationFilter(info)

    def _build_regex(self, args: str) -> RegexFilter:
        tokens = split_args(args)
        if not tokens:
            raise WrongArityError("Regex", args, "requires a pattern")

        case = _case_token(tokens[0])
        if case is None:
            # No policy token: the first token is the pattern
            if len(tokens) > 1:
                logger.debug("Regex: ignoring arguments after pattern: %r", tokens[1:])
            return _make_regex(tokens[0], CaseSensitivity.SENSITIVE)

        if len(tokens) < 2:
            raise WrongArityError("Regex", args, "requires a pattern after the case policy")
        # Policy token holds no comma, so the first comma is the top-level one
        pattern = args[args.index(",") + 1 :].strip()
        return _make_regex(pattern, case)

    def _build_string_list(self, kind: FilterKind, args: str) -> Filter:
        tokens = split_args(args)
        case = _case_token(tokens[0]) if tokens else None
        if case is not None:
            tokens = tokens[1:]

        if not tokens:
            raise WrongArityError(kind.value, args, "requires at least one string")
        filter_class = _STRING_LIST_CLASSES[kind]
        return filter_class(strings=tuple(tokens), case=case or CaseSensitivity.SENSITIVE)


def _case_token(token: str) -> CaseSensitivity | None:
    """Policy named by token, or None when token is an ordinary argument."""
    try:
        return CaseSensitivity.for_name(token)
    except InvalidCasePolicyError:
        return None


def _make_regex(pattern: str, case: CaseSensitivity) -> RegexFilter:
    try:
        return RegexFilter(pattern=pattern, case=case)
    except ValueError as e:
        raise MalformedExpressionError(pattern, f"invalid regex ({e})") from e


_DEFAULT_PARSER = FilterParser()


def parse(text: str, resolver: TypeResolver | None = None) -> Filter:
    """Parse filter text with the default or given resolver.

    See FilterParser.parse.
    """
    if resolver is None:
        return _DEFAULT_PARSER.parse(text)
    return FilterParser(resolver).parse(text)
