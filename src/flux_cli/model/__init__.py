"""Data models for flux-cli."""

from .config import GlobalOptions
from .kinds import RESOURCE_TYPES, SOURCE_TYPES
from .kubernetes import K8sResource, ResourceType
from .report import ResourceStatus

__all__ = [
    "GlobalOptions",
    "K8sResource",
    "RESOURCE_TYPES",
    "ResourceStatus",
    "ResourceType",
    "SOURCE_TYPES",
]
