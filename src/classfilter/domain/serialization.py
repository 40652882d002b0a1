"""Canonical text form of filters.

Format: Name( arg, arg, ... ), or Name() without arguments.
String filters always lead with their case policy, so a stored string
that reads "Sensitive" never gets mistaken for a policy when parsed back.
"""

from __future__ import annotations

from classfilter.domain.model.filters import (
    AbstractClassFilter,
    AndFilter,
    AnnotationClassFilter,
    FalseFilter,
    Filter,
    HasAnnotationFilter,
    InterfaceClassFilter,
    NameFilter,
    NotFilter,
    OrFilter,
    PrefixFilter,
    RegexFilter,
    SuffixFilter,
    TrueFilter,
    WildcardFilter,
    canonical_name,
)


def filter_args(flt: Filter) -> tuple[str, ...]:
    """Argument vector of a filter as it appears in canonical text.

    Combinator children are rendered recursively.
    """
    match flt:
        case (
            TrueFilter()
            | FalseFilter()
            | AbstractClassFilter()
            | InterfaceClassFilter()
            | AnnotationClassFilter()
        ):
            return ()
        case NameFilter() | PrefixFilter() | SuffixFilter() | WildcardFilter():
            return (flt.case.value, *flt.strings)
        case RegexFilter():
            return (flt.case.value, flt.pattern)
        case HasAnnotationFilter():
            return (flt.annotation.qualified_name,)
        case NotFilter():
            return (serialize(flt.child),)
        case AndFilter() | OrFilter():
            return tuple(serialize(child) for child in flt.children)
    raise TypeError(f"not a filter: {type(flt).__name__}")


def serialize(flt: Filter) -> str:
    """Canonical text of a filter.

    Examples:
        True()
        Not( False() )
        Wildcard( Insensitive, *Xene?.*Foo )
        Or( InterfaceClass(), Not( Prefix( Sensitive, org.xenei ) ) )
    """
    name = canonical_name(type(flt).__name__)
    args = filter_args(flt)
    if not args:
        return f"{name}()"
    return f"{name}( {', '.join(args)} )"
