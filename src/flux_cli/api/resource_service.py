"""Resource API service for the toolkit's custom resources."""

import time
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..errors import ReconciliationError, WaitTimeoutError
from ..exporters import Exporter
from ..k8s import K8sClient, K8sError
from ..model.kinds import RECONCILE_ANNOTATION
from ..model.kubernetes import K8sResource, ResourceType
from ..model.report import READY_CONDITION, ResourceStatus
from ..utils.logger import get_logger

logger = get_logger(__name__)

SECRET_RESOURCE = "secrets"


class ResourceService:
    """High-level operations on one namespace of custom resources."""

    poll_interval = 2.0
    min_request_timeout = 1.0

    def __init__(self, client: K8sClient, namespace: str, timeout: float = 300.0):
        self.client = client
        self.namespace = namespace
        self.timeout = timeout

    def list_resources(
        self, resource_type: ResourceType, all_namespaces: bool = False
    ) -> List[K8sResource]:
        """List objects of a kind in the namespace, or across all namespaces."""
        logger.debug(f"Listing {resource_type.resource} in {self.namespace}")
        items = self.client.list_objects(
            resource_type.resource, namespace=self.namespace, all_namespaces=all_namespaces
        )
        return [K8sResource.from_dict(item) for item in items]

    def get_resource(self, resource_type: ResourceType, name: str) -> K8sResource:
        """Get one object of a kind by name."""
        item = self.client.get_object(resource_type.resource, name, self.namespace)
        return K8sResource.from_dict(item)

    def statuses(
        self, resource_type: ResourceType, resources: List[K8sResource]
    ) -> List[ResourceStatus]:
        return [ResourceStatus.from_resource(r, resource_type) for r in resources]

    def get_secret(self, name: str, namespace: str) -> K8sResource:
        """Fetch a Secret, wrapping failures with the secret's name."""
        try:
            item = self.client.get_object(SECRET_RESOURCE, name, namespace)
        except K8sError as e:
            raise type(e)(f"failed to retrieve secret {name}, error: {e}", e.reason) from e
        return K8sResource.from_dict(item)

    def export(
        self,
        resource_type: ResourceType,
        resources: List[K8sResource],
        exporter: Exporter,
        with_credentials: bool = False,
    ):
        """Write each resource, followed by its credentials Secret when requested.

        Documents are written as they are produced, so a failure part way
        through leaves the earlier documents in the stream.
        """
        for resource in resources:
            exporter.export_resource(resource, resource_type)
            if with_credentials and resource.secret_ref:
                secret = self.get_secret(resource.secret_ref, resource.namespace or self.namespace)
                exporter.export_secret(secret)

    def suspend(self, resource_type: ResourceType, name: str) -> K8sResource:
        """Set spec.suspend to true."""
        return self._set_suspend(resource_type, name, True)

    def resume(self, resource_type: ResourceType, name: str) -> K8sResource:
        """Set spec.suspend to false."""
        return self._set_suspend(resource_type, name, False)

    def _set_suspend(self, resource_type: ResourceType, name: str, suspend: bool) -> K8sResource:
        item = self.client.patch_object(
            resource_type.resource, name, self.namespace, {"spec": {"suspend": suspend}}
        )
        logger.info(f"Set suspend={suspend} on {resource_type.kind} {self.namespace}/{name}")
        return K8sResource.from_dict(item)

    def request_reconcile(self, resource_type: ResourceType, name: str) -> str:
        """Annotate an object so its controller reconciles it now.

        Returns the requested-at value that the controller echoes back once handled.
        """
        requested_at = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
        patch = {"metadata": {"annotations": {RECONCILE_ANNOTATION: requested_at}}}
        self.client.patch_object(resource_type.resource, name, self.namespace, patch)
        return requested_at

    def wait_for_ready(
        self,
        resource_type: ResourceType,
        name: str,
        requested_at: Optional[str] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> K8sResource:
        """Poll until the object is Ready for its current generation.

        With ``requested_at`` the controller must also have handled that
        reconcile request. A False Ready condition on a handled generation
        fails immediately.
        """
        deadline = clock() + self.timeout

        while True:
            # Each poll may only use what is left of the overall deadline
            remaining = max(deadline - clock(), self.min_request_timeout)
            item = self.client.get_object(
                resource_type.resource, name, self.namespace, timeout=remaining
            )
            resource = K8sResource.from_dict(item)
            if self._is_current(resource, requested_at):
                condition = resource.get_condition(READY_CONDITION)
                if condition and condition.get("status") == "True":
                    return resource
                if condition and condition.get("status") == "False":
                    raise ReconciliationError(condition.get("message") or "reconciliation failed")

            if clock() >= deadline:
                raise WaitTimeoutError(
                    f"timed out waiting for {resource_type.kind} "
                    f"{self.namespace}/{name} reconciliation"
                )
            sleep(self.poll_interval)

    @staticmethod
    def _is_current(resource: K8sResource, requested_at: Optional[str]) -> bool:
        status = resource.status or {}
        if requested_at and status.get("lastHandledReconcileAt") != requested_at:
            return False
        return status.get("observedGeneration", -1) >= resource.generation
