"""Resource exporters."""

from .base import Exporter
from .yaml_exporter import YamlExporter

__all__ = ["Exporter", "YamlExporter"]
