"""
Resource pipeline: per-tool services built from a declarative catalogue.
"""
from .models import ResourceKind, ResourceResponse, ResourceSpec, SourceKind
from .service import ResourceService
from .registry import (
    RESOURCE_SPECS,
    build_services,
    get_spec,
    list_tools,
    resolve_tool,
)

__all__ = [
    # Models
    "ResourceKind",
    "ResourceResponse",
    "ResourceSpec",
    "SourceKind",
    # Service
    "ResourceService",
    # Registry
    "RESOURCE_SPECS",
    "build_services",
    "get_spec",
    "list_tools",
    "resolve_tool",
]
