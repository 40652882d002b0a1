"""Tests for domain/model/filters.py."""

import copy
import pickle
from dataclasses import FrozenInstanceError

import pytest

from classfilter.domain.exceptions import EmptyArgumentListError, UnresolvableTypeError
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
from tests.factories import MARKER, make_type_info

STRING_LIST_CLASSES = [NameFilter, PrefixFilter, SuffixFilter, WildcardFilter]


class TestConstantSingletons:
    """Constant filters are process-wide singletons."""

    @pytest.mark.parametrize(
        ("cls", "constant"),
        [
            (TrueFilter, TRUE),
            (FalseFilter, FALSE),
            (AbstractClassFilter, ABSTRACT_CLASS),
            (InterfaceClassFilter, INTERFACE_CLASS),
            (AnnotationClassFilter, ANNOTATION_CLASS),
        ],
    )
    def test_construction_returns_constant(self, cls: type, constant: object) -> None:
        """Calling the class returns the one instance."""
        assert cls() is constant

    def test_copy_preserves_identity(self) -> None:
        """copy and deepcopy return the same instance."""
        assert copy.copy(TRUE) is TRUE
        assert copy.deepcopy(FALSE) is FALSE

    def test_pickle_preserves_identity(self) -> None:
        """Unpickling yields the singleton."""
        assert pickle.loads(pickle.dumps(INTERFACE_CLASS)) is INTERFACE_CLASS

    def test_constant_table_covers_zero_arity_kinds(self) -> None:
        """CONSTANTS maps each zero-argument kind to its instance."""
        assert CONSTANTS[FilterKind.TRUE] is TRUE
        assert CONSTANTS[FilterKind.FALSE] is FALSE
        assert CONSTANTS[FilterKind.ABSTRACT_CLASS] is ABSTRACT_CLASS
        assert CONSTANTS[FilterKind.INTERFACE_CLASS] is INTERFACE_CLASS
        assert CONSTANTS[FilterKind.ANNOTATION_CLASS] is ANNOTATION_CLASS
        assert len(CONSTANTS) == 5

    def test_distinct_constants_unequal(self) -> None:
        """Different constant kinds never compare equal."""
        assert TRUE != FALSE
        assert ABSTRACT_CLASS != INTERFACE_CLASS


class TestStringListFilters:
    """Construction of Name/Prefix/Suffix/Wildcard."""

    @pytest.mark.parametrize("cls", STRING_LIST_CLASSES)
    def test_empty_strings_raises(self, cls: type) -> None:
        """Zero strings fail at construction."""
        with pytest.raises(EmptyArgumentListError, match="at least one string"):
            cls(strings=())

    @pytest.mark.parametrize("cls", STRING_LIST_CLASSES)
    def test_none_strings_raises(self, cls: type) -> None:
        """None strings fail at construction."""
        with pytest.raises(EmptyArgumentListError):
            cls(strings=None)

    @pytest.mark.parametrize("cls", STRING_LIST_CLASSES)
    def test_single_str_rejected(self, cls: type) -> None:
        """A bare str is not silently split into characters."""
        with pytest.raises(TypeError, match="not a single str"):
            cls(strings="org.xenei")

    @pytest.mark.parametrize("cls", STRING_LIST_CLASSES)
    def test_non_str_item_rejected(self, cls: type) -> None:
        """Every item must be a str."""
        with pytest.raises(TypeError, match="expected str"):
            cls(strings=("a", 1))

    @pytest.mark.parametrize("cls", STRING_LIST_CLASSES)
    def test_list_frozen_to_tuple(self, cls: type) -> None:
        """Caller list is copied: later mutation has no effect."""
        source = ["a", "b"]
        flt = cls(strings=source)
        source.append("c")
        assert flt.strings == ("a", "b")

    @pytest.mark.parametrize("cls", STRING_LIST_CLASSES)
    def test_case_defaults_to_sensitive(self, cls: type) -> None:
        """Omitted or None case policy means sensitive."""
        assert cls(strings=("a",)).case is CaseSensitivity.SENSITIVE
        assert cls(strings=("a",), case=None).case is CaseSensitivity.SENSITIVE

    @pytest.mark.parametrize("cls", STRING_LIST_CLASSES)
    def test_invalid_case_type_rejected(self, cls: type) -> None:
        """Case must be a CaseSensitivity."""
        with pytest.raises(TypeError, match="case must be CaseSensitivity"):
            cls(strings=("a",), case="Insensitive")

    def test_wildcard_compiles_each_pattern(self) -> None:
        """Wildcard keeps one compiled regex per pattern."""
        flt = WildcardFilter(strings=("*.Foo", "?ar"))
        assert len(flt.compiled) == 2

    def test_equality_ignores_compiled(self) -> None:
        """Equal arguments give equal filters."""
        assert WildcardFilter(strings=("a*",)) == WildcardFilter(strings=["a*"])
        assert hash(NameFilter(strings=("a",))) == hash(NameFilter(strings=("a",)))


class TestRegexFilter:
    """Construction of Regex."""

    def test_invalid_pattern_raises(self) -> None:
        """Invalid regex raises ValueError at construction."""
        with pytest.raises(ValueError, match="Invalid regex"):
            RegexFilter(pattern="[unclosed")

    def test_none_pattern_raises(self) -> None:
        """None pattern fails at construction."""
        with pytest.raises(EmptyArgumentListError):
            RegexFilter(pattern=None)

    def test_insensitive_compiles_ignorecase(self) -> None:
        """Insensitive policy reaches the compiled pattern."""
        flt = RegexFilter(pattern="abc", case=CaseSensitivity.INSENSITIVE)
        assert flt.compiled.fullmatch("ABC")


class TestHasAnnotationFilter:
    """Construction of HasAnnotation."""

    def test_requires_annotation_type(self) -> None:
        """Non-annotation descriptor is rejected."""
        with pytest.raises(UnresolvableTypeError, match="not an annotation type"):
            HasAnnotationFilter(make_type_info("acme.Plain"))

    def test_none_rejected(self) -> None:
        """None annotation fails at construction."""
        with pytest.raises(EmptyArgumentListError):
            HasAnnotationFilter(None)

    def test_non_type_info_rejected(self) -> None:
        """A plain name is not accepted: resolve it first."""
        with pytest.raises(TypeError, match="must be TypeInfo"):
            HasAnnotationFilter(MARKER)

    def test_holds_descriptor(self) -> None:
        """Annotation descriptor is stored as given."""
        info = make_type_info(MARKER, is_annotation=True)
        assert HasAnnotationFilter(info).annotation is info


class TestCombinators:
    """Construction of Not/And/Or."""

    def test_not_none_child_raises(self) -> None:
        """Not requires a child."""
        with pytest.raises(EmptyArgumentListError, match="child must not be None"):
            NotFilter(None)

    def test_not_non_filter_raises(self) -> None:
        """Not requires a filter child."""
        with pytest.raises(TypeError, match="expected a filter"):
            NotFilter("True()")

    @pytest.mark.parametrize("cls", [AndFilter, OrFilter])
    def test_none_entry_raises(self, cls: type) -> None:
        """A None entry in the child list fails."""
        with pytest.raises(EmptyArgumentListError, match="child filter must not be None"):
            cls((TRUE, None))

    @pytest.mark.parametrize("cls", [AndFilter, OrFilter])
    def test_none_children_raises(self, cls: type) -> None:
        """None child list fails."""
        with pytest.raises(EmptyArgumentListError):
            cls(None)

    @pytest.mark.parametrize("cls", [AndFilter, OrFilter])
    def test_empty_allowed(self, cls: type) -> None:
        """Zero children is a valid combinator."""
        assert cls().children == ()

    @pytest.mark.parametrize("cls", [AndFilter, OrFilter])
    def test_children_copied(self, cls: type) -> None:
        """Combinator owns a private tuple of children."""
        source = [TRUE, FALSE]
        flt = cls(source)
        source.clear()
        assert flt.children == (TRUE, FALSE)

    def test_order_preserved(self) -> None:
        """Children keep declared order."""
        flt = OrFilter((FALSE, TRUE, ABSTRACT_CLASS))
        assert flt.children == (FALSE, TRUE, ABSTRACT_CLASS)


class TestImmutability:
    """Filters cannot be modified after construction."""

    def test_string_filter_frozen(self) -> None:
        """Assigning a field raises."""
        flt = NameFilter(strings=("a",))
        with pytest.raises(FrozenInstanceError):
            flt.strings = ("b",)  # type: ignore[misc]

    def test_combinator_frozen(self) -> None:
        """Assigning children raises."""
        flt = AndFilter((TRUE,))
        with pytest.raises(FrozenInstanceError):
            flt.children = ()  # type: ignore[misc]


class TestKinds:
    """Kind tags and canonical names."""

    @pytest.mark.parametrize(
        ("class_name", "expected"),
        [
            ("NameFilter", "Name"),
            ("WildcardFilter", "Wildcard"),
            ("HasAnnotationFilter", "HasAnnotation"),
            ("PrefixResourceFilter", "Prefix"),
            ("Filter", "Filter"),
            ("Custom", "Custom"),
        ],
    )
    def test_canonical_name(self, class_name: str, expected: str) -> None:
        """Display suffixes are stripped."""
        assert canonical_name(class_name) == expected

    def test_every_kind_has_class(self) -> None:
        """Each kind maps to a class whose canonical name is the kind value."""
        for kind in FilterKind:
            assert canonical_name(FILTER_CLASSES[kind].__name__) == kind.value

    def test_get_filter_kind(self) -> None:
        """get_filter_kind tags each variant."""
        assert get_filter_kind(TRUE) is FilterKind.TRUE
        assert get_filter_kind(NameFilter(strings=("a",))) is FilterKind.NAME
        assert get_filter_kind(NotFilter(TRUE)) is FilterKind.NOT
        assert get_filter_kind(OrFilter()) is FilterKind.OR

    def test_get_filter_kind_rejects_non_filter(self) -> None:
        """Non-filters raise TypeError."""
        with pytest.raises(TypeError, match="not a filter"):
            get_filter_kind("True()")  # type: ignore[arg-type]
