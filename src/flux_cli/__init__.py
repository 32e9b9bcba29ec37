"""Command-line client for the GitOps toolkit's custom resources."""

__version__ = "0.8.0"
