"""Test Kubernetes client functionality."""

import json
import logging
import subprocess

import pytest
from unittest.mock import patch, MagicMock

from flux_cli.k8s.client import (
    AuthorizationError,
    K8sClient,
    K8sError,
    RequestTimeoutError,
    ResourceNotFoundError,
    classify_error,
)

RESOURCE = "gitrepositories.source.toolkit.fluxcd.io"


class TestK8sClient:
    @patch("subprocess.run")
    def test_kubectl_verification_success(self, mock_run):
        """Test successful kubectl verification."""
        mock_run.return_value = MagicMock(
            stdout='{"clientVersion": {"major": "1", "minor": "20"}}', stderr="", returncode=0
        )

        # Should not raise an exception
        client = K8sClient()
        assert client is not None

    @patch("subprocess.run")
    def test_kubectl_verification_failure(self, mock_run):
        """Test kubectl verification failure."""
        mock_run.side_effect = FileNotFoundError()

        with pytest.raises(K8sError, match="kubectl command not found"):
            K8sClient()

    @patch("subprocess.run")
    def test_build_command_basic(self, mock_run):
        """Test building basic kubectl command."""
        mock_run.return_value = MagicMock(stdout="{}", stderr="", returncode=0)
        client = K8sClient()
        cmd = client._build_command(["get", "pods"])
        assert cmd == ["kubectl", "get", "pods"]

    @patch("subprocess.run")
    def test_build_command_with_global_flags(self, mock_run):
        """Test building command with kubeconfig, context and timeout."""
        mock_run.return_value = MagicMock(stdout="{}", stderr="", returncode=0)
        client = K8sClient(context="kind-dev", kubeconfig="/tmp/config", timeout=90.0)
        cmd = client._build_command(["get", "pods"])
        assert cmd == [
            "kubectl",
            "--kubeconfig",
            "/tmp/config",
            "--context",
            "kind-dev",
            "--request-timeout=90s",
            "get",
            "pods",
        ]

    @patch("subprocess.run")
    def test_build_command_with_namespace(self, mock_run):
        """Test building command with a default namespace."""
        mock_run.return_value = MagicMock(stdout="{}", stderr="", returncode=0)
        client = K8sClient(namespace="test-namespace")
        cmd = client._build_command(["get", "pods"])
        assert cmd == ["kubectl", "get", "pods", "-n", "test-namespace"]

    @patch("subprocess.run")
    def test_explicit_namespace_wins(self, mock_run):
        mock_run.return_value = MagicMock(stdout="{}", stderr="", returncode=0)
        client = K8sClient(namespace="default")
        cmd = client._build_command(["get", "pods", "-n", "flux-system"])
        assert cmd == ["kubectl", "get", "pods", "-n", "flux-system"]

    @patch("subprocess.run")
    def test_execute_success(self, mock_run):
        """Test successful command execution."""
        mock_run.return_value = MagicMock(stdout='{"items": []}', stderr="", returncode=0)

        client = K8sClient()
        success, output = client.execute(["get", "pods", "-o", "json"])

        assert success is True
        assert output == '{"items": []}'

    @patch("subprocess.run")
    def test_execute_failure(self, mock_run):
        """Test failed command execution."""
        mock_run.side_effect = subprocess.CalledProcessError(1, "kubectl", stderr="Error message")

        client = K8sClient()
        success, output = client.execute(["get", "pods"])

        assert success is False
        assert "Error message" in output

    @patch("subprocess.run")
    def test_execute_deadline(self, mock_run):
        """A subprocess deadline surfaces as a request timeout."""
        mock_run.side_effect = [
            MagicMock(stdout="{}", stderr="", returncode=0),
            subprocess.TimeoutExpired("kubectl", 5),
        ]

        client = K8sClient(timeout=5.0)
        with pytest.raises(RequestTimeoutError, match="within 5s"):
            client.execute(["get", "pods"])

        assert mock_run.call_args.kwargs["timeout"] == 5.0

    @patch("subprocess.run")
    def test_failure_is_not_logged_above_debug(self, mock_run, caplog):
        """Failed commands leave stderr to the CLI's own failure line."""
        mock_run.side_effect = [
            MagicMock(stdout="{}", stderr="", returncode=0),
            subprocess.CalledProcessError(1, "kubectl", stderr="Error from server (NotFound): x"),
        ]

        client = K8sClient()
        package_logger = logging.getLogger("flux_cli")
        package_logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.DEBUG, logger="flux_cli"):
                client.execute(["get", "pods"])
        finally:
            package_logger.removeHandler(caplog.handler)

        assert "Command failed" in caplog.text
        assert all(r.levelname == "DEBUG" for r in caplog.records)


class TestK8sClientObjects:
    @patch("subprocess.run")
    def test_get_object(self, mock_run, git_repository):
        mock_run.return_value = MagicMock(stdout=json.dumps(git_repository), stderr="", returncode=0)

        client = K8sClient()
        obj = client.get_object(RESOURCE, "podinfo", "flux-system")

        assert obj["metadata"]["name"] == "podinfo"
        assert mock_run.call_args.args[0] == [
            "kubectl", "get", RESOURCE, "podinfo", "-n", "flux-system", "-o", "json",
        ]

    @patch("subprocess.run")
    def test_get_object_timeout_override(self, mock_run, git_repository):
        """A per-call timeout replaces the client's request timeout."""
        mock_run.return_value = MagicMock(stdout=json.dumps(git_repository), stderr="", returncode=0)

        client = K8sClient(timeout=300.0)
        client.get_object(RESOURCE, "podinfo", "flux-system", timeout=3.0)

        assert mock_run.call_args.args[0][:2] == ["kubectl", "--request-timeout=3s"]
        assert mock_run.call_args.kwargs["timeout"] == 3.0

    @patch("subprocess.run")
    def test_list_objects_in_namespace(self, mock_run, git_repository):
        mock_run.return_value = MagicMock(
            stdout=json.dumps({"items": [git_repository]}), stderr="", returncode=0
        )

        client = K8sClient()
        items = client.list_objects(RESOURCE, namespace="apps")

        assert [i["metadata"]["name"] for i in items] == ["podinfo"]
        assert mock_run.call_args.args[0] == ["kubectl", "get", RESOURCE, "-n", "apps", "-o", "json"]

    @patch("subprocess.run")
    def test_list_objects_all_namespaces(self, mock_run):
        mock_run.return_value = MagicMock(stdout='{"items": null}', stderr="", returncode=0)

        client = K8sClient(namespace="ignored")
        items = client.list_objects(RESOURCE, namespace="apps", all_namespaces=True)

        assert items == []
        assert mock_run.call_args.args[0] == [
            "kubectl", "get", RESOURCE, "--all-namespaces", "-o", "json",
        ]

    @patch("subprocess.run")
    def test_patch_object_sends_merge_patch(self, mock_run):
        mock_run.return_value = MagicMock(stdout="{}", stderr="", returncode=0)

        client = K8sClient()
        client.patch_object(RESOURCE, "podinfo", "flux-system", {"spec": {"suspend": True}})

        assert mock_run.call_args.args[0] == [
            "kubectl", "patch", RESOURCE, "podinfo", "-n", "flux-system",
            "--type", "merge", "-p", '{"spec": {"suspend": true}}', "-o", "json",
        ]

    @patch("subprocess.run")
    def test_get_object_not_found(self, mock_run):
        stderr = (
            'Error from server (NotFound): gitrepositories.source.toolkit.fluxcd.io "nope" not found\n'
        )
        mock_run.side_effect = [
            MagicMock(stdout="{}", stderr="", returncode=0),
            subprocess.CalledProcessError(1, "kubectl", stderr=stderr),
        ]

        client = K8sClient()
        with pytest.raises(ResourceNotFoundError) as excinfo:
            client.get_object(RESOURCE, "nope", "flux-system")

        assert str(excinfo.value) == 'gitrepositories.source.toolkit.fluxcd.io "nope" not found'

    @patch("subprocess.run")
    def test_invalid_json_output(self, mock_run):
        mock_run.return_value = MagicMock(stdout="not json", stderr="", returncode=0)

        client = K8sClient()
        with pytest.raises(K8sError, match="failed to parse"):
            client.get_object(RESOURCE, "podinfo", "flux-system")


class TestClassifyError:
    def test_unauthorized(self):
        error = classify_error("error: You must be logged in to the server (Unauthorized)")
        assert isinstance(error, AuthorizationError)
        assert str(error) == "You must be logged in to the server (Unauthorized)"

    def test_forbidden(self):
        error = classify_error('Error from server (Forbidden): secrets "x" is forbidden')
        assert isinstance(error, AuthorizationError)
        assert error.reason == "Forbidden"

    def test_timeout(self):
        error = classify_error(
            "Unable to connect to the server: net/http: request canceled (Client.Timeout exceeded)"
        )
        assert isinstance(error, RequestTimeoutError)

    def test_other(self):
        error = classify_error("Error from server (BadRequest): invalid patch")
        assert type(error) is K8sError
        assert error.reason == "BadRequest"
        assert str(error) == "invalid patch"

    def test_server_reason_is_kept_when_message_mentions_timeout(self):
        error = classify_error(
            'Error from server (Invalid): Kustomization.kustomize.toolkit.fluxcd.io "apps" '
            "is invalid: spec.timeout: Invalid value"
        )
        assert type(error) is K8sError
        assert error.reason == "Invalid"

    def test_server_timeout_reason(self):
        error = classify_error("Error from server (Timeout): the server was unable to respond")
        assert isinstance(error, RequestTimeoutError)
        assert error.reason == "Timeout"
