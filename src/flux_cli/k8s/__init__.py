"""Kubernetes interaction module."""

from .client import (
    AuthorizationError,
    K8sClient,
    K8sError,
    RequestTimeoutError,
    ResourceNotFoundError,
)

__all__ = [
    "AuthorizationError",
    "K8sClient",
    "K8sError",
    "RequestTimeoutError",
    "ResourceNotFoundError",
]
