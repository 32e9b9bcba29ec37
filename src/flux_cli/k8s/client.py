"""Kubernetes client wrapper."""

import subprocess
import json
import re
from pathlib import Path
from typing import List, Tuple, Optional, Dict, Any

from ..errors import FluxCliError
from ..utils.duration import format_duration
from ..utils.logger import get_logger

logger = get_logger(__name__)

_SERVER_ERROR = re.compile(r"^Error from server \((?P<reason>[A-Za-z]+)\):\s*")
_TIMEOUT_MARKERS = ("Timeout", "timeout", "deadline exceeded", "timed out")


class K8sError(FluxCliError):
    """An API call failed."""

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason


class ResourceNotFoundError(K8sError):
    """The requested object does not exist."""


class AuthorizationError(K8sError):
    """The credentials were rejected or lack permission."""


class RequestTimeoutError(K8sError):
    """The API call did not complete in time."""


def classify_error(stderr: str) -> K8sError:
    """Turn kubectl stderr into a typed error carrying the server's message."""
    text = stderr.strip()
    reason = None

    match = _SERVER_ERROR.match(text)
    if match:
        reason = match.group("reason")
        text = text[match.end():]
    elif text.startswith("error: "):
        text = text[len("error: "):]

    if reason == "NotFound":
        return ResourceNotFoundError(text, reason)
    if reason in ("Unauthorized", "Forbidden") or "(Unauthorized)" in text:
        return AuthorizationError(text, reason or "Unauthorized")
    if reason == "Timeout" or (
        reason is None and any(marker in text for marker in _TIMEOUT_MARKERS)
    ):
        return RequestTimeoutError(text, reason or "Timeout")
    return K8sError(text, reason)


class K8sClient:
    """Wrapper for kubectl commands."""

    def __init__(
        self,
        context: Optional[str] = None,
        namespace: Optional[str] = None,
        kubeconfig: Optional[Path] = None,
        timeout: Optional[float] = None,
    ):
        self.context = context
        self.namespace = namespace
        self.kubeconfig = kubeconfig
        self.timeout = timeout
        self._verify_kubectl()

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise K8sError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str], timeout: Optional[float] = None) -> List[str]:
        """Build kubectl command with kubeconfig, context, timeout and namespace."""
        cmd = ["kubectl"]
        timeout = self.timeout if timeout is None else timeout

        if self.kubeconfig:
            cmd.extend(["--kubeconfig", str(self.kubeconfig)])

        if self.context:
            cmd.extend(["--context", self.context])

        if timeout:
            cmd.append(f"--request-timeout={format_duration(timeout)}")

        cmd.extend(args)

        if self.namespace and "--all-namespaces" not in args and "-n" not in args:
            cmd.extend(["-n", self.namespace])

        return cmd

    def execute(self, args: List[str], timeout: Optional[float] = None) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output.

        ``timeout`` overrides the client's request timeout for this call.
        """
        timeout = self.timeout if timeout is None else timeout
        cmd = self._build_command(args, timeout)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, check=True, timeout=timeout or None
            )
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.debug(f"Command failed: {e.stderr}")
            return False, e.stderr
        except subprocess.TimeoutExpired:
            raise RequestTimeoutError(
                f"request did not complete within {format_duration(timeout)}", "Timeout"
            )

    def _execute_json(self, args: List[str], timeout: Optional[float] = None) -> Dict[str, Any]:
        """Execute a command that prints a JSON object, raising on failure."""
        success, output = self.execute(args + ["-o", "json"], timeout=timeout)
        if not success:
            raise classify_error(output)
        try:
            return json.loads(output)
        except json.JSONDecodeError:
            logger.error("Failed to parse JSON output")
            raise K8sError("failed to parse kubectl output as JSON")

    def get_object(
        self, resource: str, name: str, namespace: str, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        """Get a single object by name."""
        return self._execute_json(["get", resource, name, "-n", namespace], timeout=timeout)

    def list_objects(
        self,
        resource: str,
        namespace: Optional[str] = None,
        all_namespaces: bool = False,
    ) -> List[Dict[str, Any]]:
        """List objects in a namespace, or across all namespaces."""
        args = ["get", resource]
        if all_namespaces:
            args.append("--all-namespaces")
        elif namespace:
            args.extend(["-n", namespace])

        data = self._execute_json(args)
        return data.get("items") or []

    def patch_object(
        self, resource: str, name: str, namespace: str, patch: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Apply a JSON merge patch to an object and return the result."""
        logger.debug(f"Patching {resource}/{name} in {namespace}: {patch}")
        return self._execute_json(
            ["patch", resource, name, "-n", namespace, "--type", "merge", "-p", json.dumps(patch)]
        )
