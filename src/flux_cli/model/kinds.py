"""Registry of the toolkit's custom resource kinds."""

from typing import Dict, List

from .kubernetes import ResourceType

SOURCE_GROUP = "source.toolkit.fluxcd.io"
KUSTOMIZE_GROUP = "kustomize.toolkit.fluxcd.io"
HELM_GROUP = "helm.toolkit.fluxcd.io"
NOTIFICATION_GROUP = "notification.toolkit.fluxcd.io"

# Annotation that asks a controller to reconcile out of schedule
RECONCILE_ANNOTATION = "reconcile.fluxcd.io/requestedAt"

ARTIFACT_REVISION = ("artifact", "revision")
APPLIED_REVISION = ("lastAppliedRevision",)

GIT_REPOSITORY = ResourceType(
    kind="GitRepository",
    plural="gitrepositories",
    api_group=SOURCE_GROUP,
    version="v1beta1",
    has_credentials=True,
    revision_path=ARTIFACT_REVISION,
    noun="source git",
)

HELM_REPOSITORY = ResourceType(
    kind="HelmRepository",
    plural="helmrepositories",
    api_group=SOURCE_GROUP,
    version="v1beta1",
    has_credentials=True,
    revision_path=ARTIFACT_REVISION,
    noun="source helm",
)

BUCKET = ResourceType(
    kind="Bucket",
    plural="buckets",
    api_group=SOURCE_GROUP,
    version="v1beta1",
    has_credentials=True,
    revision_path=ARTIFACT_REVISION,
    noun="source bucket",
)

HELM_CHART = ResourceType(
    kind="HelmChart",
    plural="helmcharts",
    api_group=SOURCE_GROUP,
    version="v1beta1",
    revision_path=ARTIFACT_REVISION,
    noun="source chart",
)

KUSTOMIZATION = ResourceType(
    kind="Kustomization",
    plural="kustomizations",
    api_group=KUSTOMIZE_GROUP,
    version="v1beta1",
    revision_path=APPLIED_REVISION,
    noun="kustomization",
)

HELM_RELEASE = ResourceType(
    kind="HelmRelease",
    plural="helmreleases",
    api_group=HELM_GROUP,
    version="v2beta1",
    revision_path=APPLIED_REVISION,
    noun="helmrelease",
)

ALERT = ResourceType(
    kind="Alert",
    plural="alerts",
    api_group=NOTIFICATION_GROUP,
    version="v1beta1",
    noun="alert",
)

PROVIDER = ResourceType(
    kind="Provider",
    plural="providers",
    api_group=NOTIFICATION_GROUP,
    version="v1beta1",
    suspendable=False,
    noun="alert-provider",
)

RECEIVER = ResourceType(
    kind="Receiver",
    plural="receivers",
    api_group=NOTIFICATION_GROUP,
    version="v1beta1",
    noun="receiver",
)

SOURCE_TYPES: List[ResourceType] = [GIT_REPOSITORY, HELM_REPOSITORY, BUCKET, HELM_CHART]

RESOURCE_TYPES: Dict[str, ResourceType] = {
    resource_type.kind: resource_type
    for resource_type in SOURCE_TYPES
    + [KUSTOMIZATION, HELM_RELEASE, ALERT, PROVIDER, RECEIVER]
}

