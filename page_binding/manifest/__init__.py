"""Manifest — schema + résolution."""
from .schema import ManifestPage, ManifestBlockConfig, ResolvedBlock, ResolvedPage
from .parser import ManifestResolver, resolve_manifest

__all__ = [
    "ManifestPage",
    "ManifestBlockConfig",
    "ResolvedBlock",
    "ResolvedPage",
    "ManifestResolver",
    "resolve_manifest",
]
