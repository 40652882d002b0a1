"""Domain ports: contracts for external collaborators."""

from classfilter.domain.ports.type_resolver import TypeResolver

__all__ = ["TypeResolver"]
