"""Base exporter class."""

import sys
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TextIO

from ..model.kubernetes import K8sResource, ResourceType


class Exporter(ABC):
    """Base class for resource exporters."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    @abstractmethod
    def write(self, document: Dict[str, Any]):
        """Write one document to the stream."""
        pass

    def export_resource(self, resource: K8sResource, resource_type: ResourceType):
        self.write(self.clean_resource(resource, resource_type))

    def export_secret(self, secret: K8sResource):
        self.write(self.clean_secret(secret))

    def clean_resource(
        self, resource: K8sResource, resource_type: ResourceType
    ) -> Dict[str, Any]:
        """Reduce a custom resource to its declarative fields.

        The apiVersion is the one the CLI was built against, not the stored one.
        """
        metadata: Dict[str, Any] = {"name": resource.name, "namespace": resource.namespace}
        if resource.labels:
            metadata["labels"] = resource.labels
        if resource.annotations:
            metadata["annotations"] = resource.annotations

        return {
            "apiVersion": resource_type.api_version,
            "kind": resource_type.kind,
            "metadata": metadata,
            "spec": resource.spec or {},
        }

    def clean_secret(self, secret: K8sResource) -> Dict[str, Any]:
        """Reduce a Secret to name, namespace, data and type."""
        data: Dict[str, Any] = {
            "apiVersion": "v1",
            "kind": "Secret",
            "metadata": {"name": secret.name, "namespace": secret.namespace},
        }

        if secret.data:
            data["data"] = secret.data

        if secret.type:
            data["type"] = secret.type

        return data
