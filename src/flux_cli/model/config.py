"""Global command-line options."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel

DEFAULT_NAMESPACE = "flux-system"
DEFAULT_TIMEOUT = "5m0s"


class GlobalOptions(BaseModel):
    """Options shared by every command, set on the root callback."""

    kubeconfig: Optional[Path] = None
    context: Optional[str] = None
    namespace: str = DEFAULT_NAMESPACE
    timeout: float = 300.0
    verbose: bool = False
