"""Filter evaluation on the three candidate surfaces.

Surfaces:
    name     qualified name string
    type     TypeInfo (or live class, described on the fly)
    locator  URL string or path

Class-property filters on the name surface resolve the name first.
Resolution failure is a value: the filter returns False, nothing raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from classfilter.domain.model.filters import (
    AbstractClassFilter,
    AndFilter,
    AnnotationClassFilter,
    FalseFilter,
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
)
from classfilter.domain.model.locator import locator_text
from classfilter.domain.model.type_info import describe
from classfilter.infrastructure.resolvers import ImportlibTypeResolver

if TYPE_CHECKING:
    from collections.abc import Callable

    from classfilter.domain.model.filters import Filter
    from classfilter.domain.model.locator import Locator
    from classfilter.domain.model.type_info import TypeInfo
    from classfilter.domain.ports.type_resolver import TypeResolver

ClassPropertyFilter = (
    AbstractClassFilter | InterfaceClassFilter | AnnotationClassFilter | HasAnnotationFilter
)
TextFilter = NameFilter | PrefixFilter | SuffixFilter | WildcardFilter | RegexFilter


def match_text(flt: TextFilter, text: str) -> bool:
    """Apply a string filter to text under its case policy."""
    match flt:
        case NameFilter(strings=strings, case=case):
            return any(case.equals(text, s) for s in strings)
        case PrefixFilter(strings=strings, case=case):
            return any(case.starts_with(text, s) for s in strings)
        case SuffixFilter(strings=strings, case=case):
            return any(case.ends_with(text, s) for s in strings)
        case WildcardFilter(compiled=patterns):
            return any(p.fullmatch(text) is not None for p in patterns)
        case RegexFilter(compiled=pattern):
            return pattern.fullmatch(text) is not None
    raise TypeError(f"not a string filter: {type(flt).__name__}")


def match_type(flt: ClassPropertyFilter, info: TypeInfo) -> bool:
    """Apply a class-property filter to a type descriptor."""
    match flt:
        case AbstractClassFilter():
            return info.is_abstract
        case InterfaceClassFilter():
            return info.is_interface
        case AnnotationClassFilter():
            return info.is_annotation
        case HasAnnotationFilter(annotation=annotation):
            return info.has_annotation(annotation.qualified_name)
    raise TypeError(f"not a class-property filter: {type(flt).__name__}")


def _combine(flt: NotFilter | AndFilter | OrFilter, accepts: Callable[[Filter], bool]) -> bool:
    """Evaluate combinator over children in declared order.

    Empty And and empty Or both reject.
    """
    match flt:
        case NotFilter(child=child):
            return not accepts(child)
        case AndFilter(children=children):
            if not children:
                return False
            return all(accepts(child) for child in children)
        case OrFilter(children=children):
            return any(accepts(child) for child in children)
    raise TypeError(f"not a combinator: {type(flt).__name__}")


class FilterEvaluator:
    """Evaluates filters against candidates.

    Stateless apart from the injected resolver: safe to share across
    threads when the resolver is.
    """

    def __init__(self, resolver: TypeResolver | None = None) -> None:
        """Initialize evaluator.

        Args:
            resolver: Type lookup for name-surface class checks.
                Uses ImportlibTypeResolver if None.
        """
        self._resolver = resolver if resolver is not None else ImportlibTypeResolver()

    @property
    def resolver(self) -> TypeResolver:
        return self._resolver

    def accept_name(self, flt: Filter, name: str) -> bool:
        """Test filter against a qualified name.

        Args:
            flt: Filter to apply
            name: Qualified name

        Returns:
            True if accepted
        """
        match flt:
            case TrueFilter():
                return True
            case FalseFilter():
                return False
            case (
                AbstractClassFilter()
                | InterfaceClassFilter()
                | AnnotationClassFilter()
                | HasAnnotationFilter()
            ):
                info = self._resolver.resolve(name)
                return info is not None and match_type(flt, info)
            case NameFilter() | PrefixFilter() | SuffixFilter() | WildcardFilter() | RegexFilter():
                return match_text(flt, name)
            case NotFilter() | AndFilter() | OrFilter():
                return _combine(flt, lambda child: self.accept_name(child, name))
        raise TypeError(f"not a filter: {type(flt).__name__}")

    def accept_type(self, flt: Filter, target: TypeInfo | type) -> bool:
        """Test filter against a type.

        String filters test the qualified name of the type.

        Args:
            flt: Filter to apply
            target: TypeInfo or live class

        Returns:
            True if accepted
        """
        info = describe(target)
        match flt:
            case TrueFilter():
                return True
            case FalseFilter():
                return False
            case (
                AbstractClassFilter()
                | InterfaceClassFilter()
                | AnnotationClassFilter()
                | HasAnnotationFilter()
            ):
                return match_type(flt, info)
            case NameFilter() | PrefixFilter() | SuffixFilter() | WildcardFilter() | RegexFilter():
                return match_text(flt, info.qualified_name)
            case NotFilter() | AndFilter() | OrFilter():
                return _combine(flt, lambda child: self.accept_type(child, info))
        raise TypeError(f"not a filter: {type(flt).__name__}")

    def accept_locator(self, flt: Filter, locator: Locator) -> bool:
        """Test filter against a resource locator.

        Class-property filters always reject: a bare locator has no type.

        Args:
            flt: Filter to apply
            locator: URL string or path

        Returns:
            True if accepted
        """
        match flt:
            case TrueFilter():
                return True
            case FalseFilter():
                return False
            case (
                AbstractClassFilter()
                | InterfaceClassFilter()
                | AnnotationClassFilter()
                | HasAnnotationFilter()
            ):
                return False
            case NameFilter() | PrefixFilter() | SuffixFilter() | WildcardFilter() | RegexFilter():
                return match_text(flt, locator_text(locator))
            case NotFilter() | AndFilter() | OrFilter():
                return _combine(flt, lambda child: self.accept_locator(child, locator))
        raise TypeError(f"not a filter: {type(flt).__name__}")
