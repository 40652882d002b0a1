"""Type resolvers: qualified name -> TypeInfo.

ImportlibTypeResolver imports modules to describe live classes.
MappingTypeResolver looks names up in a fixed table (offline use).
"""

from __future__ import annotations

import importlib
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from classfilter.domain.model.type_info import TypeInfo

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


class ImportlibTypeResolver:
    """Resolve names by importing the module that defines them.

    For "a.b.C.D" tries module "a.b.C" then "a.b" then "a", and walks the
    remaining attributes. Nested classes resolve through their qualname.

    resolve() never raises: importing arbitrary modules executes their code,
    so any failure is reported as None and logged at DEBUG.
    """

    def resolve(self, qualified_name: str) -> TypeInfo | None:
        """Resolve qualified name to descriptor of a live class.

        Args:
            qualified_name: Dotted name (module.Class or module.Outer.Inner)

        Returns:
            TypeInfo, or None if not importable or not a class
        """
        target = self.load(qualified_name)
        if target is None:
            return None
        return TypeInfo.from_class(target)

    def load(self, qualified_name: str) -> type | None:
        """Load the class object itself.

        Args:
            qualified_name: Dotted name

        Returns:
            Class, or None if not found or not a class
        """
        if not qualified_name or not qualified_name.strip():
            return None

        parts = qualified_name.strip().split(".")
        if not all(part.isidentifier() for part in parts):
            logger.debug("not a qualified name: %r", qualified_name)
            return None

        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
            except Exception:  # noqa: BLE001 - module code may raise anything on import
                logger.debug("importing %s failed", module_name, exc_info=True)
                return None

            target: object = module
            for attr in parts[split:]:
                target = getattr(target, attr, None)
                if target is None:
                    break

            if isinstance(target, type):
                return target
            logger.debug("%s is not a class", qualified_name)
            return None

        logger.debug("no importable module for %s", qualified_name)
        return None


class MappingTypeResolver:
    """Resolve names from a fixed table of descriptors.

    Immutable after construction: safe to share across threads.
    """

    def __init__(self, types: Iterable[TypeInfo] | Mapping[str, TypeInfo] = ()) -> None:
        """Initialize resolver.

        Args:
            types: Descriptors, or mapping of qualified name to descriptor

        Raises:
            TypeError: If an entry is not a TypeInfo
        """
        if hasattr(types, "items"):
            items = types.items()
        else:
            items = ((getattr(t, "qualified_name", repr(t)), t) for t in types)
        table: dict[str, TypeInfo] = {}
        for name, info in items:
            if not isinstance(info, TypeInfo):
                raise TypeError(f"expected TypeInfo for {name!r}, got {type(info).__name__}")
            table[name] = info
        self._types = MappingProxyType(table)

    def resolve(self, qualified_name: str) -> TypeInfo | None:
        info = self._types.get(qualified_name.strip())
        if info is None:
            logger.debug("unknown type %s", qualified_name)
        return info

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._types

    def __len__(self) -> int:
        return len(self._types)
