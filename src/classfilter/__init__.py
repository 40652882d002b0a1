"""classfilter - composable filters over class names, types and resource locators.

Filters print as canonical text and parse back from it:

    >>> flt = parse("Or( InterfaceClass(), Not( Prefix( org.xenei ) ) )")
    >>> str(flt)
    'Or( InterfaceClass(), Not( Prefix( Sensitive, org.xenei ) ) )'
"""

__version__ = "0.1.0"

from classfilter.application.evaluation import FilterEvaluator
from classfilter.application.parser import FilterParser, parse
from classfilter.application.reporters import TreeReportConfig, TreeReporter
from classfilter.application.services import SearchService
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
from classfilter.domain.model import (
    ABSTRACT_CLASS,
    ANNOTATION_CLASS,
    FALSE,
    INTERFACE_CLASS,
    TRUE,
    AbstractClassFilter,
    AndFilter,
    Annotation,
    AnnotationClassFilter,
    CaseSensitivity,
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
    TypeInfo,
    WildcardFilter,
    annotate,
    get_filter_kind,
)
from classfilter.domain.patterns import compile_wildcard
from classfilter.domain.serialization import serialize
from classfilter.infrastructure import ImportlibTypeResolver, MappingTypeResolver, ScanConfig, scan
from classfilter.presentation.api import (
    accept_locator,
    accept_name,
    accept_type,
    and_,
    has_annotation,
    name_filter,
    not_,
    or_,
    prefix,
    regex,
    suffix,
    wildcard,
)

__all__ = [
    "__version__",
    # Filters
    "Filter",
    "FilterKind",
    "get_filter_kind",
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
    "CaseSensitivity",
    # Types
    "Annotation",
    "TypeInfo",
    "annotate",
    # Text form
    "compile_wildcard",
    "serialize",
    "parse",
    "FilterParser",
    # Evaluation
    "FilterEvaluator",
    "accept_name",
    "accept_type",
    "accept_locator",
    # Builders
    "name_filter",
    "prefix",
    "suffix",
    "wildcard",
    "regex",
    "has_annotation",
    "not_",
    "and_",
    "or_",
    # Collaborators
    "ImportlibTypeResolver",
    "MappingTypeResolver",
    "ScanConfig",
    "scan",
    "SearchService",
    # Reporting
    "TreeReporter",
    "TreeReportConfig",
    # Errors
    "ClassFilterError",
    "EmptyArgumentListError",
    "FilterParseError",
    "UnknownFilterKindError",
    "MalformedExpressionError",
    "WrongArityError",
    "UnresolvableTypeError",
    "InvalidCasePolicyError",
]
