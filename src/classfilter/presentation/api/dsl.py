"""Builder functions for filters.

Example:
    flt = or_(INTERFACE_CLASS, not_(prefix("org.xenei")))
    str(flt)  # Or( InterfaceClass(), Not( Prefix( Sensitive, org.xenei ) ) )
    accept_name(flt, "java.lang.String")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from classfilter.application.evaluation import FilterEvaluator
from classfilter.domain.exceptions import InvalidCasePolicyError, UnresolvableTypeError
from classfilter.domain.model.case import CaseSensitivity
from classfilter.domain.model.filters import (
    AndFilter,
    HasAnnotationFilter,
    NameFilter,
    NotFilter,
    OrFilter,
    PrefixFilter,
    RegexFilter,
    SuffixFilter,
    WildcardFilter,
)
from classfilter.domain.model.type_info import TypeInfo
from classfilter.infrastructure.resolvers import ImportlibTypeResolver

if TYPE_CHECKING:
    from classfilter.domain.model.filters import Filter
    from classfilter.domain.model.locator import Locator
    from classfilter.domain.ports.type_resolver import TypeResolver

_DEFAULT_EVALUATOR = FilterEvaluator()


def _policy(case: CaseSensitivity | str | None) -> CaseSensitivity:
    """Case policy from enum or name. Unknown names raise ValueError."""
    if case is None:
        return CaseSensitivity.SENSITIVE
    if isinstance(case, str):
        try:
            return CaseSensitivity.for_name(case)
        except InvalidCasePolicyError as e:
            raise ValueError(
                f"case must be Sensitive or Insensitive, got {case!r}",
            ) from e
    return case


def name_filter(*names: str, case: CaseSensitivity | str | None = None) -> NameFilter:
    """Accept candidates equal to any of names."""
    return NameFilter(strings=names, case=_policy(case))


def prefix(*prefixes: str, case: CaseSensitivity | str | None = None) -> PrefixFilter:
    """Accept candidates starting with any of prefixes."""
    return PrefixFilter(strings=prefixes, case=_policy(case))


def suffix(*suffixes: str, case: CaseSensitivity | str | None = None) -> SuffixFilter:
    """Accept candidates ending with any of suffixes."""
    return SuffixFilter(strings=suffixes, case=_policy(case))


def wildcard(*patterns: str, case: CaseSensitivity | str | None = None) -> WildcardFilter:
    """Accept candidates matching any wildcard pattern (* and ?)."""
    return WildcardFilter(strings=patterns, case=_policy(case))


def regex(pattern: str, case: CaseSensitivity | str | None = None) -> RegexFilter:
    """Accept candidates fully matching the regular expression."""
    return RegexFilter(pattern=pattern, case=_policy(case))


def has_annotation(
    annotation: str | type | TypeInfo,
    resolver: TypeResolver | None = None,
) -> HasAnnotationFilter:
    """Accept types carrying annotation.

    Args:
        annotation: Annotation type, its descriptor, or its qualified name
        resolver: Resolves a name. Uses ImportlibTypeResolver if None.

    Raises:
        UnresolvableTypeError: Name does not resolve, or not an annotation type
    """
    if isinstance(annotation, str):
        info = (resolver or ImportlibTypeResolver()).resolve(annotation)
        if info is None:
            raise UnresolvableTypeError(annotation, "HasAnnotation: type not found")
    elif isinstance(annotation, TypeInfo):
        info = annotation
    else:
        info = TypeInfo.from_class(annotation)
    return HasAnnotationFilter(info)


def not_(flt: Filter) -> NotFilter:
    """Negate flt."""
    return NotFilter(flt)


def and_(*filters: Filter) -> AndFilter:
    """Accept when all filters accept. No filters: accept nothing."""
    return AndFilter(filters)


def or_(*filters: Filter) -> OrFilter:
    """Accept when any filter accepts. No filters: accept nothing."""
    return OrFilter(filters)


def _evaluator(resolver: TypeResolver | None) -> FilterEvaluator:
    return _DEFAULT_EVALUATOR if resolver is None else FilterEvaluator(resolver)


def accept_name(flt: Filter, name: str, resolver: TypeResolver | None = None) -> bool:
    """Test flt against a qualified name."""
    return _evaluator(resolver).accept_name(flt, name)


def accept_type(flt: Filter, target: TypeInfo | type, resolver: TypeResolver | None = None) -> bool:
    """Test flt against a type descriptor or live class."""
    return _evaluator(resolver).accept_type(flt, target)


def accept_locator(flt: Filter, locator: Locator, resolver: TypeResolver | None = None) -> bool:
    """Test flt against a URL string or path."""
    return _evaluator(resolver).accept_locator(flt, locator)
