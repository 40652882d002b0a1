"""Infrastructure layer: type resolution and module scanning."""

from classfilter.infrastructure.resolvers import ImportlibTypeResolver, MappingTypeResolver
from classfilter.infrastructure.scanning import ScanConfig, ScanEntry, module_name, scan

__all__ = [
    "ImportlibTypeResolver",
    "MappingTypeResolver",
    "ScanConfig",
    "ScanEntry",
    "module_name",
    "scan",
]
