"""Real classes resolved by name in tests (importable as tests.sample_types)."""

from abc import ABC, abstractmethod
from typing import Protocol

from classfilter import Annotation, annotate


class Marker(Annotation):
    """Annotation type attached to Tagged."""


class OtherMarker(Annotation):
    """Annotation type attached to nothing."""


class Greeter(Protocol):
    def greet(self) -> str: ...


class BaseShape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Square(BaseShape):
    def area(self) -> float:
        return 1.0


@annotate(Marker)
class Tagged:
    pass


class TaggedChild(Tagged):
    pass


class Outer:
    class Inner:
        pass


NOT_A_CLASS = 42
