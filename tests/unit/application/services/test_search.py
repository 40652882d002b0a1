"""Tests for application/services/search.py."""

import zipfile
from pathlib import Path

import pytest

from classfilter.application.evaluation import FilterEvaluator
from classfilter.application.services.search import SearchService, default_filter
from classfilter.domain.model.filters import (
    ABSTRACT_CLASS,
    TRUE,
    NotFilter,
    PrefixFilter,
    SuffixFilter,
)
from tests.factories import ABSTRACT, CONCRETE, INTERFACE, make_resolver, make_type_info


@pytest.fixture
def service() -> SearchService:
    """Service backed by the offline acme type table."""
    return SearchService(FilterEvaluator(make_resolver()))


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Package tree: app/{__init__, core, util/{__init__, text}, tests/test_core}."""
    pkg = tmp_path / "app"
    (pkg / "util").mkdir(parents=True)
    (pkg / "tests").mkdir()
    for rel in ("__init__.py", "core.py", "util/__init__.py", "util/text.py", "tests/test_core.py"):
        (pkg / rel).write_text("")
    return pkg


class TestDefaultFilter:
    """Filter used when none is given."""

    def test_empty_package(self) -> None:
        """No package accepts everything."""
        assert default_filter("") is TRUE

    def test_package_prefix(self) -> None:
        """Package name becomes a prefix filter."""
        assert default_filter("app") == PrefixFilter(strings=("app",))


class TestFind:
    """Scanning plus name filtering."""

    def test_default_filter_keeps_package(self, service: SearchService, tree: Path) -> None:
        """All modules under the package."""
        names = service.find_names(tree, "app")
        assert names == (
            "app",
            "app.core",
            "app.tests.test_core",
            "app.util",
            "app.util.text",
        )

    def test_explicit_filter(self, service: SearchService, tree: Path) -> None:
        """Filter narrows the result."""
        flt = NotFilter(PrefixFilter(strings=("app.tests",)))
        names = service.find_names(tree, "app", flt)
        assert "app.tests.test_core" not in names
        assert "app.core" in names

    def test_lazy(self, service: SearchService, tree: Path) -> None:
        """find() yields entries with locators."""
        entry = next(iter(service.find(tree, "app", PrefixFilter(strings=("app.core",)))))
        assert entry.qualified_name == "app.core"
        assert entry.locator == (tree / "core.py").resolve()

    def test_missing_root(self, service: SearchService, tmp_path: Path) -> None:
        """Missing root raises immediately."""
        with pytest.raises(ValueError, match="does not exist"):
            service.find(tmp_path / "nope", "app")

    def test_archive(self, service: SearchService, tmp_path: Path) -> None:
        """Zip archives are scanned too."""
        archive = tmp_path / "lib.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("app/__init__.py", "")
            zf.writestr("app/core.py", "")
            zf.writestr("README.txt", "")
        assert service.find_names(archive) == ("app", "app.core")


class TestFindLocators:
    """Locator filtering over scanned entries."""

    def test_locator_filter(self, service: SearchService, tree: Path) -> None:
        """Filter applies to locator text."""
        locators = service.find_locators(tree, "app", SuffixFilter(strings=("text.py",)))
        assert locators == ((tree / "util" / "text.py").resolve(),)

    def test_default_accepts_all(self, service: SearchService, tree: Path) -> None:
        """No filter returns every locator, not only those prefixed by the package."""
        locators = service.find_locators(tree, "app")
        assert len(locators) == 5
        assert not any(str(loc).startswith("app") for loc in locators)

    def test_class_property_rejects_locators(self, service: SearchService, tree: Path) -> None:
        """Class-property filters accept no locator."""
        assert service.find_locators(tree, "app", ABSTRACT_CLASS) == ()


class TestCollections:
    """Filtering given collections."""

    def test_filter_names_order(self, service: SearchService) -> None:
        """Input order kept, input untouched."""
        names = [CONCRETE, ABSTRACT, INTERFACE]
        assert service.filter_names(names, ABSTRACT_CLASS) == (ABSTRACT, INTERFACE)
        assert names == [CONCRETE, ABSTRACT, INTERFACE]

    def test_filter_types(self, service: SearchService) -> None:
        """Descriptors filtered by flags."""
        shape = make_type_info(ABSTRACT, is_abstract=True)
        square = make_type_info(CONCRETE)
        assert service.filter_types([square, shape], ABSTRACT_CLASS) == (shape,)

    def test_filter_locators(self, service: SearchService) -> None:
        """Locators filtered by text."""
        locators = ["file:///a.py", "file:///b.txt"]
        assert service.filter_locators(locators, SuffixFilter(strings=(".py",))) == (
            "file:///a.py",
        )
