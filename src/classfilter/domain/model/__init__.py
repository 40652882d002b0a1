"""Domain model: filter variants, case policy, type descriptors."""

from classfilter.domain.model.case import CaseSensitivity
from classfilter.domain.model.filters import (
    ABSTRACT_CLASS,
    ANNOTATION_CLASS,
    CONSTANTS,
    FALSE,
    FILTER_CLASSES,
    INTERFACE_CLASS,
    TRUE,
    AbstractClassFilter,
    AndFilter,
    AnnotationClassFilter,
    FalseFilter,
    Filter,
    FilterKind,
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
    get_filter_kind,
)
from classfilter.domain.model.locator import Locator, locator_text
from classfilter.domain.model.type_info import Annotation, TypeInfo, annotate, describe

__all__ = [
    # Case
    "CaseSensitivity",
    # Filters
    "Filter",
    "FilterKind",
    "FILTER_CLASSES",
    "CONSTANTS",
    "TRUE",
    "FALSE",
    "ABSTRACT_CLASS",
    "INTERFACE_CLASS",
    "ANNOTATION_CLASS",
    "TrueFilter",
    "FalseFilter",
    "AbstractClassFilter",
    "InterfaceClassFilter",
    "AnnotationClassFilter",
    "HasAnnotationFilter",
    "NameFilter",
    "PrefixFilter",
    "SuffixFilter",
    "WildcardFilter",
    "RegexFilter",
    "NotFilter",
    "AndFilter",
    "OrFilter",
    "canonical_name",
    "get_filter_kind",
    # Targets
    "Annotation",
    "TypeInfo",
    "annotate",
    "describe",
    "Locator",
    "locator_text",
]
