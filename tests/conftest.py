"""Test configuration and fixtures."""

import copy
from typing import Any, Dict
from unittest.mock import Mock

import pytest

from flux_cli.api import ResourceService
from flux_cli.k8s import K8sClient

GIT_REPOSITORY = {
    "apiVersion": "source.toolkit.fluxcd.io/v1beta1",
    "kind": "GitRepository",
    "metadata": {
        "name": "podinfo",
        "namespace": "flux-system",
        "uid": "0a1b2c3d",
        "resourceVersion": "12345",
        "generation": 2,
        "creationTimestamp": "2021-01-01T00:00:00Z",
        "labels": {"app": "podinfo"},
        "annotations": {},
        "managedFields": [{"manager": "kubectl"}],
    },
    "spec": {
        "interval": "1m0s",
        "ref": {"branch": "master"},
        "secretRef": {"name": "podinfo-auth"},
        "timeout": "20s",
        "url": "ssh://git@github.com/stefanprodan/podinfo",
    },
    "status": {
        "observedGeneration": 2,
        "artifact": {"revision": "master/6b7aab8a10d6ee8b895b0a5048f4ab0966ed29ff"},
        "conditions": [
            {
                "type": "Ready",
                "status": "True",
                "reason": "GitOperationSucceed",
                "message": "Fetched revision: master/6b7aab8a10d6ee8b895b0a5048f4ab0966ed29ff",
            }
        ],
    },
}

SECRET = {
    "apiVersion": "v1",
    "kind": "Secret",
    "metadata": {
        "name": "podinfo-auth",
        "namespace": "flux-system",
        "uid": "ffff",
        "resourceVersion": "42",
        "labels": {"owner": "someone"},
    },
    "data": {"identity": "cHJpdmF0ZQ==", "identity.pub": "cHVibGlj", "known_hosts": "aG9zdHM="},
    "type": "Opaque",
}

KUSTOMIZATION = {
    "apiVersion": "kustomize.toolkit.fluxcd.io/v1beta1",
    "kind": "Kustomization",
    "metadata": {
        "name": "apps",
        "namespace": "flux-system",
        "generation": 3,
        "annotations": {"team": "platform"},
    },
    "spec": {
        "interval": "10m0s",
        "path": "./apps",
        "prune": True,
        "sourceRef": {"kind": "GitRepository", "name": "podinfo"},
        "suspend": True,
    },
    "status": {
        "observedGeneration": 2,
        "lastAppliedRevision": "master/6b7aab8a",
        "conditions": [
            {"type": "Ready", "status": "False", "message": "kustomize build failed"}
        ],
    },
}


def make_object(template: Dict[str, Any], **metadata: Any) -> Dict[str, Any]:
    """Copy a sample object, overriding metadata fields."""
    obj = copy.deepcopy(template)
    obj["metadata"].update(metadata)
    return obj


@pytest.fixture
def git_repository():
    return copy.deepcopy(GIT_REPOSITORY)


@pytest.fixture
def secret():
    return copy.deepcopy(SECRET)


@pytest.fixture
def kustomization():
    return copy.deepcopy(KUSTOMIZATION)


@pytest.fixture
def mock_k8s_client():
    """Mock kubectl client for service tests."""
    client = Mock(spec=K8sClient)
    client.list_objects = Mock(return_value=[])
    client.get_object = Mock(return_value={})
    client.patch_object = Mock(return_value={})
    return client


@pytest.fixture
def service(mock_k8s_client):
    return ResourceService(mock_k8s_client, "flux-system", timeout=10.0)
