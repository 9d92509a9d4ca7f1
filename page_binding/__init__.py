"""
page_binding v0.1 — Binding de données pour blocs de page.

Usage (texte):
    >>> from page_binding import resolve_bindings
    >>> resolve_bindings("Bonjour {{user.name}}", {"user": {"name": "Ana"}})
    'Bonjour Ana'

Usage (itération):
    >>> from page_binding import Scope, iterate
    >>> scopes = iterate(Scope({"items": ["a", "b"]}), "items", "render")
    >>> [s["index"] for s in scopes]
    [0, 1]

Usage (manifest):
    >>> from page_binding import ManifestPage, resolve_manifest, StaticDataSource
    >>> page = resolve_manifest(ManifestPage(**data), StaticDataSource(), mode="render")
"""

# ── core ────────────────────────────────────────────────────────────────────
from .core import (
    get_by_path,
    render_value,
    resolve_single_binding,
    resolve_bindings,
    has_bindings,
    extract_binding_variables,
    extract_field_paths,
    resolve_props,
    Scope,
    EMPTY_SCOPE,
    ScopeProvider,
    ScopeStack,
    create_child_scope,
    IterationOptions,
    DataBinding,
    iterate,
    bind_scopes,
    find_array_variable,
    ELLIPSIS,
    PaginationMetadata,
    PaginatedResult,
    PaginationControls,
    paginate,
    page_range,
    pagination_controls,
)

# ── sources ─────────────────────────────────────────────────────────────────
from .sources import StaticDataSource, MOCK_EXTERNAL_DATA, BINDABLE_COLLECTIONS

# ── blocs ───────────────────────────────────────────────────────────────────
from .blocks import BaseBlock, BlockStructure, BlockSeed, BlockUnion, BLOCK_REGISTRY

# ── manifest ────────────────────────────────────────────────────────────────
from .manifest import (
    ManifestPage, ManifestBlockConfig, ResolvedBlock, ResolvedPage,
    ManifestResolver, resolve_manifest,
)

__version__ = "0.1.0"

__all__ = [
    # core
    "get_by_path", "render_value", "resolve_single_binding", "resolve_bindings",
    "has_bindings", "extract_binding_variables", "extract_field_paths", "resolve_props",
    "Scope", "EMPTY_SCOPE", "ScopeProvider", "ScopeStack", "create_child_scope",
    "IterationOptions", "DataBinding", "iterate", "bind_scopes", "find_array_variable",
    "ELLIPSIS", "PaginationMetadata", "PaginatedResult", "PaginationControls",
    "paginate", "page_range", "pagination_controls",
    # sources
    "StaticDataSource", "MOCK_EXTERNAL_DATA", "BINDABLE_COLLECTIONS",
    # blocs
    "BaseBlock", "BlockStructure", "BlockSeed", "BlockUnion", "BLOCK_REGISTRY",
    # manifest
    "ManifestPage", "ManifestBlockConfig", "ResolvedBlock", "ResolvedPage",
    "ManifestResolver", "resolve_manifest",
]
