"""Filter variants: immutable predicates over names, types and locators.

One frozen dataclass per filter kind; Filter is their union.
Evaluation and serialization dispatch on the variant with match statements
(application.evaluation, domain.serialization), no behavior is inherited.

Constant filters (True, False, AbstractClass, InterfaceClass,
AnnotationClass) are process-wide singletons: constructing one always
returns the same instance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from classfilter.domain.exceptions import EmptyArgumentListError, UnresolvableTypeError
from classfilter.domain.model.case import CaseSensitivity
from classfilter.domain.model.type_info import TypeInfo
from classfilter.domain.patterns import compile_wildcard_regex

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class FilterKind(Enum):
    """Filter kinds. Value is the canonical name used in filter text."""

    TRUE = "True"
    FALSE = "False"
    ABSTRACT_CLASS = "AbstractClass"
    INTERFACE_CLASS = "InterfaceClass"
    ANNOTATION_CLASS = "AnnotationClass"
    HAS_ANNOTATION = "HasAnnotation"
    NAME = "Name"
    PREFIX = "Prefix"
    SUFFIX = "Suffix"
    WILDCARD = "Wildcard"
    REGEX = "Regex"
    NOT = "Not"
    AND = "And"
    OR = "Or"


def canonical_name(class_name: str) -> str:
    """Strip the display-only "ResourceFilter"/"Filter" suffix.

    Example: NameFilter -> Name, HasAnnotationFilter -> HasAnnotation.
    """
    for suffix in ("ResourceFilter", "Filter"):
        if class_name.endswith(suffix) and class_name != suffix:
            return class_name[: -len(suffix)]
    return class_name


def _canonical_text(self: Filter) -> str:
    from classfilter.domain.serialization import serialize

    return serialize(self)


_CONSTANT_INSTANCES: dict[type, object] = {}


class _ConstantFilter:
    """Singleton construction for zero-argument filters."""

    __slots__ = ()

    def __new__(cls) -> _ConstantFilter:
        instance = _CONSTANT_INSTANCES.get(cls)
        if instance is None:
            instance = super().__new__(cls)
            _CONSTANT_INSTANCES[cls] = instance
        return instance

    def __copy__(self) -> _ConstantFilter:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> _ConstantFilter:
        return self

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (type(self), ())

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class TrueFilter(_ConstantFilter):
    """Accepts everything."""


@dataclass(frozen=True, slots=True)
class FalseFilter(_ConstantFilter):
    """Accepts nothing."""


@dataclass(frozen=True, slots=True)
class AbstractClassFilter(_ConstantFilter):
    """Accepts abstract types."""


@dataclass(frozen=True, slots=True)
class InterfaceClassFilter(_ConstantFilter):
    """Accepts interface (Protocol) types."""


@dataclass(frozen=True, slots=True)
class AnnotationClassFilter(_ConstantFilter):
    """Accepts annotation types."""


TRUE = TrueFilter()
FALSE = FalseFilter()
ABSTRACT_CLASS = AbstractClassFilter()
INTERFACE_CLASS = InterfaceClassFilter()
ANNOTATION_CLASS = AnnotationClassFilter()


def _require_printable(kind: str, value: str, *, allow_commas: bool) -> None:
    """Reject arguments the canonical text form cannot carry. FAIL-FIRST.

    Filter text trims arguments, splits them on commas outside parentheses
    and closes the expression at the first unmatched ")". An argument must
    therefore have no surrounding whitespace and balanced parentheses;
    string-list arguments must also have no comma outside parentheses.
    """
    if value != value.strip():
        raise ValueError(f"{kind}: argument has surrounding whitespace: {value!r}")
    depth = 0
    for char in value:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                break
        elif char == "," and depth == 0 and not allow_commas:
            raise ValueError(f"{kind}: argument has a comma outside parentheses: {value!r}")
    if depth != 0:
        raise ValueError(f"{kind}: argument has unbalanced parentheses: {value!r}")


def _strings_tuple(kind: str, strings: Iterable[str]) -> tuple[str, ...]:
    """Validate string-list argument. FAIL-FIRST."""
    if strings is None:
        raise EmptyArgumentListError(kind, "strings must not be None")
    if isinstance(strings, str):
        raise TypeError(f"{kind}: strings must be a sequence of str, not a single str")
    result = tuple(strings)
    if not result:
        raise EmptyArgumentListError(kind, "at least one string is required")
    for s in result:
        if not isinstance(s, str):
            raise TypeError(f"{kind}: expected str, got {type(s).__name__}")
        _require_printable(kind, s, allow_commas=False)
    return result


def _case_policy(kind: str, case: CaseSensitivity | None) -> CaseSensitivity:
    if case is None:
        return CaseSensitivity.SENSITIVE
    if not isinstance(case, CaseSensitivity):
        raise TypeError(f"{kind}: case must be CaseSensitivity, got {type(case).__name__}")
    return case


@dataclass(frozen=True, slots=True)
class NameFilter:
    """Accepts candidates equal to any of the names.

    Attributes:
        strings: Names to accept (at least one)
        case: Comparison policy (default sensitive)
    """

    strings: tuple[str, ...]
    case: CaseSensitivity = CaseSensitivity.SENSITIVE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "strings", _strings_tuple("Name", self.strings))
        object.__setattr__(self, "case", _case_policy("Name", self.case))

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class PrefixFilter:
    """Accepts candidates starting with any of the prefixes."""

    strings: tuple[str, ...]
    case: CaseSensitivity = CaseSensitivity.SENSITIVE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "strings", _strings_tuple("Prefix", self.strings))
        object.__setattr__(self, "case", _case_policy("Prefix", self.case))

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class SuffixFilter:
    """Accepts candidates ending with any of the suffixes."""

    strings: tuple[str, ...]
    case: CaseSensitivity = CaseSensitivity.SENSITIVE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "strings", _strings_tuple("Suffix", self.strings))
        object.__setattr__(self, "case", _case_policy("Suffix", self.case))

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class WildcardFilter:
    """Accepts candidates matching any of the wildcard patterns.

    Patterns are compiled once at construction.

    Attributes:
        strings: Wildcard patterns (at least one)
        case: Matching policy (default sensitive)
    """

    strings: tuple[str, ...]
    case: CaseSensitivity = CaseSensitivity.SENSITIVE
    compiled: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate and compile patterns. FAIL-FIRST."""
        strings = _strings_tuple("Wildcard", self.strings)
        case = _case_policy("Wildcard", self.case)
        object.__setattr__(self, "strings", strings)
        object.__setattr__(self, "case", case)
        object.__setattr__(
            self,
            "compiled",
            tuple(compile_wildcard_regex(p, case.regex_flags) for p in strings),
        )

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class RegexFilter:
    """Accepts candidates fully matching the regular expression.

    Attributes:
        pattern: Regular expression source
        case: Matching policy (default sensitive)
    """

    pattern: str
    case: CaseSensitivity = CaseSensitivity.SENSITIVE
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate and compile pattern. FAIL-FIRST."""
        if self.pattern is None:
            raise EmptyArgumentListError("Regex", "pattern must not be None")
        if not isinstance(self.pattern, str):
            raise TypeError(f"Regex: pattern must be str, got {type(self.pattern).__name__}")
        _require_printable("Regex", self.pattern, allow_commas=True)
        case = _case_policy("Regex", self.case)
        object.__setattr__(self, "case", case)
        try:
            compiled = re.compile(self.pattern, case.regex_flags)
        except re.error as e:
            raise ValueError(f"Invalid regex '{self.pattern}': {e}") from e
        object.__setattr__(self, "compiled", compiled)

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class HasAnnotationFilter:
    """Accepts types carrying the annotation.

    Attributes:
        annotation: Resolved annotation type descriptor
    """

    annotation: TypeInfo

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.annotation is None:
            raise EmptyArgumentListError("HasAnnotation", "annotation must not be None")
        if not isinstance(self.annotation, TypeInfo):
            raise TypeError(
                f"HasAnnotation: annotation must be TypeInfo, got {type(self.annotation).__name__}",
            )
        if not self.annotation.is_annotation:
            raise UnresolvableTypeError(
                self.annotation.qualified_name,
                "HasAnnotation: not an annotation type",
            )

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class NotFilter:
    """Negates its child."""

    child: Filter

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.child is None:
            raise EmptyArgumentListError("Not", "child must not be None")
        _require_filter("Not", self.child)

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class AndFilter:
    """Accepts when every child accepts, in child order.

    An empty And accepts nothing.
    """

    children: tuple[Filter, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "children", _children_tuple("And", self.children))

    __str__ = _canonical_text


@dataclass(frozen=True, slots=True)
class OrFilter:
    """Accepts when any child accepts, in child order.

    An empty Or accepts nothing.
    """

    children: tuple[Filter, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "children", _children_tuple("Or", self.children))

    __str__ = _canonical_text


Filter = (
    TrueFilter
    | FalseFilter
    | AbstractClassFilter
    | InterfaceClassFilter
    | AnnotationClassFilter
    | HasAnnotationFilter
    | NameFilter
    | PrefixFilter
    | SuffixFilter
    | WildcardFilter
    | RegexFilter
    | NotFilter
    | AndFilter
    | OrFilter
)

StringListFilter = NameFilter | PrefixFilter | SuffixFilter | WildcardFilter
ConstantFilter = (
    TrueFilter | FalseFilter | AbstractClassFilter | InterfaceClassFilter | AnnotationClassFilter
)


def _require_filter(kind: str, value: object) -> None:
    if not isinstance(value, Filter):
        raise TypeError(f"{kind}: expected a filter, got {type(value).__name__}")


def _children_tuple(kind: str, children: Iterable[Filter]) -> tuple[Filter, ...]:
    """Validate combinator children. FAIL-FIRST."""
    if children is None:
        raise EmptyArgumentListError(kind, "children must not be None")
    result = tuple(children)
    for child in result:
        if child is None:
            raise EmptyArgumentListError(kind, "child filter must not be None")
        _require_filter(kind, child)
    return result


FILTER_CLASSES: Mapping[FilterKind, type] = MappingProxyType(
    {
        FilterKind.TRUE: TrueFilter,
        FilterKind.FALSE: FalseFilter,
        FilterKind.ABSTRACT_CLASS: AbstractClassFilter,
        FilterKind.INTERFACE_CLASS: InterfaceClassFilter,
        FilterKind.ANNOTATION_CLASS: AnnotationClassFilter,
        FilterKind.HAS_ANNOTATION: HasAnnotationFilter,
        FilterKind.NAME: NameFilter,
        FilterKind.PREFIX: PrefixFilter,
        FilterKind.SUFFIX: SuffixFilter,
        FilterKind.WILDCARD: WildcardFilter,
        FilterKind.REGEX: RegexFilter,
        FilterKind.NOT: NotFilter,
        FilterKind.AND: AndFilter,
        FilterKind.OR: OrFilter,
    },
)

# Zero-argument kinds and their one instance
CONSTANTS: Mapping[FilterKind, ConstantFilter] = MappingProxyType(
    {
        FilterKind.TRUE: TRUE,
        FilterKind.FALSE: FALSE,
        FilterKind.ABSTRACT_CLASS: ABSTRACT_CLASS,
        FilterKind.INTERFACE_CLASS: INTERFACE_CLASS,
        FilterKind.ANNOTATION_CLASS: ANNOTATION_CLASS,
    },
)


def get_filter_kind(flt: Filter) -> FilterKind:
    """Get FilterKind for filter.

    Exhaustive match on Filter union.
    """
    match flt:
        case TrueFilter():
            return FilterKind.TRUE
        case FalseFilter():
            return FilterKind.FALSE
        case AbstractClassFilter():
            return FilterKind.ABSTRACT_CLASS
        case InterfaceClassFilter():
            return FilterKind.INTERFACE_CLASS
        case AnnotationClassFilter():
            return FilterKind.ANNOTATION_CLASS
        case HasAnnotationFilter():
            return FilterKind.HAS_ANNOTATION
        case NameFilter():
            return FilterKind.NAME
        case PrefixFilter():
            return FilterKind.PREFIX
        case SuffixFilter():
            return FilterKind.SUFFIX
        case WildcardFilter():
            return FilterKind.WILDCARD
        case RegexFilter():
            return FilterKind.REGEX
        case NotFilter():
            return FilterKind.NOT
        case AndFilter():
            return FilterKind.AND
        case OrFilter():
            return FilterKind.OR
    raise TypeError(f"not a filter: {type(flt).__name__}")
