"""Type descriptors and class annotations.

TypeInfo is what class-targeted filters inspect. It can be built directly
(offline, from static metadata) or described from a live Python class.

Python has no class annotations in the Java sense. Annotation types here are
subclasses of Annotation, attached to classes with the annotate() decorator:

    class Deprecated(Annotation):
        pass

    @annotate(Deprecated)
    class OldApi:
        ...
"""

from __future__ import annotations

import inspect
from abc import ABC
from dataclasses import dataclass
from typing import TYPE_CHECKING, is_protocol

if TYPE_CHECKING:
    from collections.abc import Callable

# Attribute holding annotation names in the annotated class __dict__
ANNOTATIONS_ATTR = "__classfilter_annotations__"


class Annotation:
    """Base for annotation types.

    Subclasses are annotation types. They are markers, never instantiated
    by classfilter.
    """


def qualified_name(cls: type) -> str:
    """Dotted name of a class: module + qualname."""
    module = cls.__module__
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def annotate[T: type](*markers: type[Annotation]) -> Callable[[T], T]:
    """Class decorator attaching annotation types to a class.

    Annotations are not inherited by subclasses.

    Args:
        *markers: Annotation subclasses to attach.

    Returns:
        Decorator returning the same class.

    Raises:
        ValueError: If no markers given.
        TypeError: If a marker is not an Annotation subclass.
    """
    if not markers:
        raise ValueError("annotate() requires at least one annotation type")
    for marker in markers:
        is_marker = isinstance(marker, type) and issubclass(marker, Annotation)
        if not is_marker or marker is Annotation:
            raise TypeError(f"{marker!r} is not an Annotation subclass")

    names = tuple(qualified_name(m) for m in markers)

    def decorator(cls: T) -> T:
        existing = cls.__dict__.get(ANNOTATIONS_ATTR, ())
        merged = existing + tuple(n for n in names if n not in existing)
        setattr(cls, ANNOTATIONS_ATTR, merged)
        return cls

    return decorator


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Descriptor of a resolved type.

    Attributes:
        qualified_name: Full dotted name (module.Class)
        is_abstract: Has abstract methods, inherits ABC, or is an interface
        is_interface: Is a typing.Protocol class
        is_annotation: Is an Annotation subclass
        annotations: Qualified names of attached annotation types
    """

    qualified_name: str
    is_abstract: bool = False
    is_interface: bool = False
    is_annotation: bool = False
    annotations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")
        if isinstance(self.annotations, str):
            raise TypeError("annotations must be a tuple of names, not str")
        object.__setattr__(self, "annotations", tuple(self.annotations))

    def has_annotation(self, annotation: str) -> bool:
        return annotation in self.annotations

    @classmethod
    def from_class(cls, klass: type) -> TypeInfo:
        """Describe a live Python class.

        Args:
            klass: Class to describe

        Returns:
            TypeInfo snapshot of the class

        Raises:
            TypeError: If klass is not a class
        """
        if not isinstance(klass, type):
            raise TypeError(f"expected a class, got {type(klass).__name__}")

        is_interface = is_protocol(klass)
        is_abstract = is_interface or inspect.isabstract(klass) or ABC in klass.__bases__
        is_annotation = issubclass(klass, Annotation) and klass is not Annotation

        return cls(
            qualified_name=qualified_name(klass),
            is_abstract=is_abstract,
            is_interface=is_interface,
            is_annotation=is_annotation,
            annotations=klass.__dict__.get(ANNOTATIONS_ATTR, ()),
        )


def describe(target: TypeInfo | type) -> TypeInfo:
    """Return TypeInfo for descriptor or live class."""
    if isinstance(target, TypeInfo):
        return target
    return TypeInfo.from_class(target)
