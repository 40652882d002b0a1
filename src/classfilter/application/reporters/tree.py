"""Tree reporter: Filter -> rich formatted tree string.

Output is str, not print(). Caller decides destination.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from classfilter.application.evaluation import FilterEvaluator
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
    get_filter_kind,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from classfilter.domain.model.filters import Filter

_ACCEPT_MARK = "[green]✓[/green]"
_REJECT_MARK = "[red]✗[/red]"


@dataclass(frozen=True, slots=True)
class TreeReportConfig:
    """Configuration for tree reporter.

    Attributes:
        show_case: Show case policy of string filters.
        color: Emit ANSI styles.
        width: Console width in characters.
    """

    show_case: bool = True
    color: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class TreeReporter:
    """Renders filter trees, one node per filter."""

    def __init__(self, config: TreeReportConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or TreeReportConfig()

    def report(self, flt: Filter) -> str:
        """Format filter as tree.

        Args:
            flt: Filter to render.

        Returns:
            Formatted tree.
        """
        return self._render(self._build(flt, None))

    def explain(self, flt: Filter, name: str, evaluator: FilterEvaluator | None = None) -> str:
        """Format filter as tree annotated with each node's verdict on name.

        Every node is evaluated on its own, without short-circuiting,
        so the whole tree shows which parts accept the candidate.

        Args:
            flt: Filter to render.
            name: Candidate qualified name.
            evaluator: Evaluator to use. Uses default if None.

        Returns:
            Formatted tree with a mark per node.
        """
        active = evaluator or FilterEvaluator()
        root = self._build(flt, lambda node: active.accept_name(node, name))
        return self._render(root, title=f"[bold]{escape(name)}[/bold]")

    def _build(self, flt: Filter, verdict: Callable[[Filter], bool] | None) -> Tree:
        tree = Tree(self._label(flt, verdict))
        self._add_children(tree, flt, verdict)
        return tree

    def _add_children(
        self,
        tree: Tree,
        flt: Filter,
        verdict: Callable[[Filter], bool] | None,
    ) -> None:
        match flt:
            case NotFilter(child=child):
                children: tuple[Filter, ...] = (child,)
            case AndFilter(children=items) | OrFilter(children=items):
                children = items
            case _:
                return
        for child in children:
            branch = tree.add(self._label(child, verdict))
            self._add_children(branch, child, verdict)

    def _label(self, flt: Filter, verdict: Callable[[Filter], bool] | None) -> str:
        text = f"[bold]{get_filter_kind(flt).value}[/bold]"
        details = self._details(flt)
        if details:
            text = f"{text} {details}"
        if verdict is None:
            return text
        mark = _ACCEPT_MARK if verdict(flt) else _REJECT_MARK
        return f"{mark} {text}"

    def _details(self, flt: Filter) -> str:
        match flt:
            case NameFilter() | PrefixFilter() | SuffixFilter() | WildcardFilter():
                values = ", ".join(escape(s) for s in flt.strings)
                return self._with_case(flt.case.value, values)
            case RegexFilter():
                return self._with_case(flt.case.value, escape(flt.pattern))
            case HasAnnotationFilter():
                return f"[cyan]{escape(flt.annotation.qualified_name)}[/cyan]"
            case AndFilter() | OrFilter() if not flt.children:
                return "[dim](empty: rejects all)[/dim]"
        return ""

    def _with_case(self, case: str, values: str) -> str:
        if self._config.show_case:
            return f"[dim]{case}[/dim] {values}"
        return values

    def _render(self, tree: Tree, title: str | None = None) -> str:
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
            emoji=False,
            highlight=False,
        )
        if title is not None:
            console.print(title)
        console.print(tree)
        return output.getvalue()
