"""Kubernetes resource models."""

from typing import Dict, Any, Optional, Tuple
from pydantic import BaseModel


class ResourceType(BaseModel):
    """A custom resource kind known to the CLI."""

    kind: str
    plural: str
    api_group: str
    version: str
    suspendable: bool = True
    has_credentials: bool = False
    revision_path: Optional[Tuple[str, ...]] = None
    noun: str = ""

    @property
    def api_version(self) -> str:
        """Get the group/version string used in exported documents."""
        return f"{self.api_group}/{self.version}"

    @property
    def resource(self) -> str:
        """Get the fully qualified resource name kubectl understands."""
        return f"{self.plural}.{self.api_group}"

    @property
    def display_name(self) -> str:
        """Get the human readable noun used in status lines."""
        return self.noun or self.kind.lower()


class K8sResource(BaseModel):
    """Kubernetes resource."""

    api_version: str = ""
    kind: str
    metadata: Dict[str, Any]
    spec: Optional[Dict[str, Any]] = None
    status: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, Any]] = None  # For Secrets
    type: Optional[str] = None  # For Secrets

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> "K8sResource":
        """Build a resource from a kubectl JSON object."""
        return cls(
            api_version=item.get("apiVersion", ""),
            kind=item.get("kind", ""),
            metadata=item.get("metadata") or {},
            spec=item.get("spec"),
            status=item.get("status"),
            data=item.get("data"),
            type=item.get("type"),
        )

    @property
    def name(self) -> str:
        """Get resource name."""
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> Optional[str]:
        """Get resource namespace."""
        return self.metadata.get("namespace")

    @property
    def labels(self) -> Dict[str, str]:
        """Get resource labels."""
        return self.metadata.get("labels") or {}

    @property
    def annotations(self) -> Dict[str, str]:
        """Get resource annotations."""
        return self.metadata.get("annotations") or {}

    @property
    def generation(self) -> int:
        return self.metadata.get("generation", 0)

    @property
    def suspended(self) -> bool:
        """Check if reconciliation is suspended."""
        return bool((self.spec or {}).get("suspend", False))

    @property
    def secret_ref(self) -> Optional[str]:
        """Return the name of the referenced credentials Secret, if any."""
        ref = (self.spec or {}).get("secretRef")
        if ref and ref.get("name"):
            return ref["name"]
        return None

    def get_condition(self, condition_type: str) -> Optional[Dict[str, Any]]:
        """Find a status condition by type."""
        for condition in (self.status or {}).get("conditions") or []:
            if condition.get("type") == condition_type:
                return condition
        return None

    def status_field(self, path: Tuple[str, ...]) -> Optional[Any]:
        """Walk a path of keys below .status."""
        value: Any = self.status or {}
        for key in path:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        return value
