"""YAML exporter."""

from typing import Dict, Any

import yaml

from ..utils.logger import get_logger
from .base import Exporter

logger = get_logger(__name__)


class YamlExporter(Exporter):
    """Export resources as a multi-document YAML stream."""

    def write(self, document: Dict[str, Any]):
        """Write a document preceded by a separator line."""
        self.stream.write("---\n")
        yaml.safe_dump(
            document,
            self.stream,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
        )
        self.stream.flush()

        metadata = document.get("metadata", {})
        logger.debug(
            f"Exported {document.get('kind')} {metadata.get('namespace')}/{metadata.get('name')}"
        )
