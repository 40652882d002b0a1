"""Resource locators: URL strings or filesystem paths."""

from __future__ import annotations

from pathlib import PurePath

type Locator = str | PurePath


def locator_text(locator: Locator) -> str:
    """Textual form of a locator, as matched by string filters.

    Strings are used verbatim. Absolute paths become file:// URIs,
    relative paths use forward slashes.

    Raises:
        TypeError: If locator is neither str nor PurePath
    """
    if isinstance(locator, str):
        return locator
    if isinstance(locator, PurePath):
        return locator.as_uri() if locator.is_absolute() else locator.as_posix()
    raise TypeError(f"locator must be str or PurePath, got {type(locator).__name__}")
