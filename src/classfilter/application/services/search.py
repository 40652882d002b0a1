"""Search service: run filters over scanned modules and collections.

Collection helpers keep input order and never mutate their input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from classfilter.application.evaluation import FilterEvaluator
from classfilter.domain.model.filters import TRUE, PrefixFilter
from classfilter.infrastructure.scanning import scan

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from classfilter.domain.model.filters import Filter
    from classfilter.domain.model.locator import Locator
    from classfilter.domain.model.type_info import TypeInfo
    from classfilter.infrastructure.scanning import ScanConfig, ScanEntry


def default_filter(package_name: str) -> Filter:
    """Filter used when none is given: names under package_name."""
    if not package_name:
        return TRUE
    return PrefixFilter(strings=(package_name,))


class SearchService:
    """Applies filters to scanned entries and candidate collections.

    Attributes:
        _evaluator: Evaluates filters (owns the type resolver)
    """

    def __init__(self, evaluator: FilterEvaluator | None = None) -> None:
        """Initialize service.

        Args:
            evaluator: Filter evaluator. Uses default if None.
        """
        self._evaluator = evaluator or FilterEvaluator()

    def find(
        self,
        root: Path | str,
        package_name: str = "",
        flt: Filter | None = None,
        config: ScanConfig | None = None,
    ) -> Iterator[ScanEntry]:
        """Lazily yield scanned entries whose name the filter accepts.

        Args:
            root: Directory or archive to scan
            package_name: Package corresponding to root
            flt: Filter on qualified names. Defaults to Prefix(package_name).
            config: Scan configuration

        Raises:
            ValueError: If root does not exist
        """
        active = flt if flt is not None else default_filter(package_name)
        entries = scan(root, package_name, config)
        return (e for e in entries if self._evaluator.accept_name(active, e.qualified_name))

    def find_names(
        self,
        root: Path | str,
        package_name: str = "",
        flt: Filter | None = None,
        config: ScanConfig | None = None,
    ) -> tuple[str, ...]:
        """Qualified names under root accepted by the filter."""
        return tuple(e.qualified_name for e in self.find(root, package_name, flt, config))

    def find_locators(
        self,
        root: Path | str,
        package_name: str = "",
        flt: Filter | None = None,
        config: ScanConfig | None = None,
    ) -> tuple[Locator, ...]:
        """Locators under root whose locator text the filter accepts.

        Unlike find(), the filter is applied to the locator, not the name.
        """
        active = flt if flt is not None else TRUE
        return tuple(
            e.locator
            for e in scan(root, package_name, config)
            if self._evaluator.accept_locator(active, e.locator)
        )

    def filter_names(self, names: Iterable[str], flt: Filter) -> tuple[str, ...]:
        """Names accepted by the filter, in input order."""
        return tuple(n for n in names if self._evaluator.accept_name(flt, n))

    def filter_types(
        self,
        types: Iterable[TypeInfo | type],
        flt: Filter,
    ) -> tuple[TypeInfo | type, ...]:
        """Types (descriptors or live classes) accepted by the filter, in input order."""
        return tuple(t for t in types if self._evaluator.accept_type(flt, t))

    def filter_locators(self, locators: Iterable[Locator], flt: Filter) -> tuple[Locator, ...]:
        """Locators accepted by the filter, in input order."""
        return tuple(loc for loc in locators if self._evaluator.accept_locator(flt, loc))
