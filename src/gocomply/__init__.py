"""gocomply - License text collection for Go module dependencies.

This package locates the repositories of Go modules through the module
discovery protocol and downloads their license files for attribution.
"""

__version__ = "0.1.0"
__author__ = "forkrul"

from gocomply.models import (
    Credentials,
    ModuleLicense,
    ModuleSpec,
    RepositoryLocation,
    ResolverConfig,
    SourceBrowsingInfo,
)

__all__ = [
    "__version__",
    "Credentials",
    "ModuleLicense",
    "ModuleSpec",
    "RepositoryLocation",
    "ResolverConfig",
    "SourceBrowsingInfo",
]
