"""Module scanning over directory trees and zip archives.

Produces (qualified name, locator) entries for Python modules found under
a scan root. Scanning is lazy and restartable: every call walks afresh.
"""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from classfilter.domain.model.locator import Locator

logger = logging.getLogger(__name__)

# Default directories to skip while scanning
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        ".eggs",
    },
)

ARCHIVE_SUFFIXES = frozenset({".zip", ".whl", ".egg", ".pyz"})


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Configuration for scanning.

    Attributes:
        excludes: Directory names never descended into.
        suffixes: File suffixes treated as modules.
    """

    excludes: frozenset[str] = DEFAULT_EXCLUDES
    suffixes: frozenset[str] = frozenset({".py"})

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.suffixes:
            raise ValueError("suffixes must not be empty")
        for suffix in self.suffixes:
            if not suffix.startswith("."):
                raise ValueError(f"suffix must start with '.': {suffix!r}")


@dataclass(frozen=True, slots=True)
class ScanEntry:
    """One scanned module.

    Attributes:
        qualified_name: Dotted module name
        locator: Where the module lives (path or archive URL)
    """

    qualified_name: str
    locator: Locator

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")


def scan(
    root: Path | str,
    package_name: str = "",
    config: ScanConfig | None = None,
) -> Iterator[ScanEntry]:
    """Lazily scan root for modules.

    root may be a directory or a zip archive (.zip, .whl, .egg, .pyz).
    package_name prefixes every module name; empty means root is a
    sys.path entry and names start at the top-level package.

    Args:
        root: Directory or archive to scan
        package_name: Package corresponding to root (may be empty)
        config: Scan configuration. Uses defaults if None.

    Yields:
        ScanEntry per module. In a directory, its modules come first and
        its subdirectories after, both in sorted order.

    Raises:
        ValueError: If root does not exist
    """
    root_path = Path(root)
    if not root_path.exists():
        raise ValueError(f"scan root does not exist: {root_path}")

    cfg = config or ScanConfig()

    if root_path.is_file():
        if root_path.suffix not in ARCHIVE_SUFFIXES and not zipfile.is_zipfile(root_path):
            raise ValueError(f"scan root must be a directory or zip archive: {root_path}")
        return _scan_archive(root_path, package_name, cfg)
    return _scan_directory(root_path, package_name, cfg)


def _scan_directory(root: Path, package_name: str, config: ScanConfig) -> Iterator[ScanEntry]:
    for dirpath, dirnames, filenames in root.walk():
        # Pruned in place: excluded trees are never entered
        dirnames[:] = sorted(d for d in dirnames if d not in config.excludes)
        for filename in sorted(filenames):
            path = dirpath / filename
            if path.suffix not in config.suffixes:
                continue
            relative = path.relative_to(root)
            name = module_name(PurePosixPath(relative.as_posix()), package_name)
            if name is None:
                logger.debug("skipping %s: not a module path", path)
                continue
            yield ScanEntry(qualified_name=name, locator=path.resolve())


def _scan_archive(archive: Path, package_name: str, config: ScanConfig) -> Iterator[ScanEntry]:
    archive_uri = archive.resolve().as_uri()
    try:
        with zipfile.ZipFile(archive) as zf:
            members = sorted(zf.namelist())
    except zipfile.BadZipFile as e:
        logger.warning("cannot read archive %s: %s", archive, e)
        return

    for member in members:
        relative = PurePosixPath(member)
        if member.endswith("/") or relative.suffix not in config.suffixes:
            continue
        if any(part in config.excludes for part in relative.parts[:-1]):
            continue
        name = module_name(relative, package_name)
        if name is None:
            logger.debug("skipping %s!/%s: not a module path", archive, member)
            continue
        yield ScanEntry(qualified_name=name, locator=f"{archive_uri}!/{member}")


def module_name(relative: PurePosixPath, package_name: str = "") -> str | None:
    """Convert module path (relative to scan root) to dotted name.

    __init__ maps to its package. Returns None when a path part is not an
    identifier, or for a root __init__ without package_name.

    Example:
        module_name(PurePosixPath("domain/model.py"), "myapp") -> "myapp.domain.model"
    """
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    if not all(part.isidentifier() for part in parts):
        return None

    prefix = [package_name] if package_name else []
    full = prefix + parts
    if not full:
        return None
    return ".".join(full)
