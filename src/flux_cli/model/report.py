"""Status report models."""

from typing import Optional

from pydantic import BaseModel

from .kubernetes import K8sResource, ResourceType

READY_CONDITION = "Ready"


class ResourceStatus(BaseModel):
    """One row of `get` output."""

    name: str
    namespace: str = ""
    ready: str = "Unknown"
    message: str = "waiting to be reconciled"
    revision: Optional[str] = None
    suspended: bool = False

    @classmethod
    def from_resource(
        cls, resource: K8sResource, resource_type: ResourceType
    ) -> "ResourceStatus":
        """Summarize a resource's Ready condition, revision and suspend flag."""
        row = cls(
            name=resource.name,
            namespace=resource.namespace or "",
            suspended=resource.suspended,
        )

        condition = resource.get_condition(READY_CONDITION)
        if condition:
            row.ready = condition.get("status", "Unknown")
            row.message = condition.get("message", "")

        if resource_type.revision_path:
            revision = resource.status_field(resource_type.revision_path)
            row.revision = str(revision) if revision is not None else ""

        return row
