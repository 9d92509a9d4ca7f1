"""Core module pour page_binding — moteur de binding, scopes, itération, pagination."""
from .paths import get_by_path
from .bindings import (
    BINDING_PATTERN,
    render_value,
    resolve_single_binding,
    resolve_bindings,
    has_bindings,
    extract_binding_variables,
    extract_field_paths,
    resolve_props,
)
from .scope import Scope, EMPTY_SCOPE, ScopeProvider, ScopeStack, create_child_scope
from .iteration import (
    IterationMode,
    IterationOptions,
    DataMode,
    DataBinding,
    iterate,
    bind_scopes,
    find_array_variable,
)
from .pagination import (
    ELLIPSIS,
    PaginationMetadata,
    PaginatedResult,
    PaginationControls,
    paginate,
    page_range,
    pagination_controls,
)

__all__ = [
    "get_by_path",
    "BINDING_PATTERN",
    "render_value",
    "resolve_single_binding",
    "resolve_bindings",
    "has_bindings",
    "extract_binding_variables",
    "extract_field_paths",
    "resolve_props",
    "Scope",
    "EMPTY_SCOPE",
    "ScopeProvider",
    "ScopeStack",
    "create_child_scope",
    "IterationMode",
    "IterationOptions",
    "DataMode",
    "DataBinding",
    "iterate",
    "bind_scopes",
    "find_array_variable",
    "ELLIPSIS",
    "PaginationMetadata",
    "PaginatedResult",
    "PaginationControls",
    "paginate",
    "page_range",
    "pagination_controls",
]
