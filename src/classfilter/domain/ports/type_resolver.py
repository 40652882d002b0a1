"""Type resolver port.

Users plug their own type lookup by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from classfilter.domain.model.type_info import TypeInfo


class TypeResolver(Protocol):
    """Contract for resolving qualified names to type descriptors.

    Implementations must not raise for unknown names: return None.
    Must be safe to call from multiple threads.
    """

    def resolve(self, qualified_name: str) -> TypeInfo | None:
        """Resolve qualified name.

        Args:
            qualified_name: Dotted type name (module.Class)

        Returns:
            TypeInfo, or None if the name does not resolve to a type
        """
        ...
