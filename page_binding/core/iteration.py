"""
Itération — répétition d'un sous-arbre de blocs pour chaque élément d'un tableau.

Mode "edit"   : un seul élément d'aperçu (preview_index, sinon 0)
Mode "render" : un scope par élément, tronqué à max_items si > 0
Chaque scope dérivé expose l'élément sous le nom déclaré + index + total.
"""
import logging
from collections.abc import Mapping
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .bindings import INDEX_VARIABLE
from .scope import Scope, create_child_scope

log = logging.getLogger(__name__)

TOTAL_VARIABLE = "total"

IterationMode = Literal["edit", "render"]
DataMode = Literal["none", "auto", "single", "list"]

_ITERATION_MODES = ("edit", "render")


class IterationOptions(BaseModel):
    """Options d'itération. max_items = 0 → illimité."""
    max_items: int = 0
    preview_index: int = 0


class DataBinding(BaseModel):
    """
    Configuration de binding d'un bloc hôte (Flex, Grid…).

    Exemple :
    {"mode": "list", "source": "externalData.products", "as": "product",
     "preview_index": 0, "max_items": 3}
    """
    model_config = ConfigDict(populate_by_name=True)

    mode: DataMode = "none"
    source: str = ""
    as_: str = Field(default="", alias="as")
    preview_index: int = 0
    max_items: int = 0

    @property
    def enabled(self) -> bool:
        return self.mode != "none" and bool(self.source) and bool(self.as_)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _preview_slot(items: Any, preview_index: int) -> int:
    if 0 <= preview_index < len(items):
        return preview_index
    return 0


def iterate(
    scope: Mapping,
    array_variable: str,
    mode: IterationMode = "render",
    options: Optional[IterationOptions] = None,
    **overrides: Any,
) -> List[Scope]:
    """
    Produit les scopes dérivés pour la variable tableau `array_variable`.

    Variable absente ou non-tableau → [scope] (passage direct, aucun enfant sauté).
    Edit   → exactement 1 scope (élément d'aperçu, total = longueur complète).
    Render → 1 scope par élément ; index = position d'origine, total = longueur d'origine.
    """
    if mode not in _ITERATION_MODES:
        raise ValueError(f"Mode d'itération inconnu : {mode!r}. Attendu : {list(_ITERATION_MODES)}")

    opts = options or IterationOptions()
    if overrides:
        opts = opts.model_copy(update=overrides)

    items = scope.get(array_variable)
    if not _is_array(items):
        log.debug("Variable %r absente ou non-tableau — passage direct", array_variable)
        return [scope if isinstance(scope, Scope) else Scope(scope)]

    total = len(items)

    if mode == "edit":
        idx = _preview_slot(items, opts.preview_index)
        element = items[idx] if total else None
        return [_item_scope(scope, array_variable, element, idx, total)]

    limit = total if opts.max_items <= 0 else min(opts.max_items, total)
    return [
        _item_scope(scope, array_variable, items[idx], idx, total)
        for idx in range(limit)
    ]


def _item_scope(scope: Mapping, name: str, element: Any, index: int, total: int) -> Scope:
    return create_child_scope(scope, {
        name:           element,
        INDEX_VARIABLE: index,
        TOTAL_VARIABLE: total,
    })


def find_array_variable(scope: Mapping) -> Optional[str]:
    """Première variable du scope contenant un tableau (hors "index")."""
    for name, value in scope.items():
        if name != INDEX_VARIABLE and _is_array(value):
            return name
    return None


def _effective_mode(value: Any, mode: DataMode) -> str:
    if mode == "auto":
        return "list" if _is_array(value) else "single"
    if mode == "list" and not _is_array(value):
        return "single"
    return mode


def bind_scopes(
    binding: Optional[DataBinding],
    scope: Mapping,
    value: Any,
    iteration_mode: IterationMode = "render",
) -> List[Scope]:
    """
    Scopes d'un bloc hôte pour la valeur liée `value` (déjà lue dans la source).

    Binding absent / désactivé, ou valeur None → [scope]
    single → 1 scope {as: value}
    list   → iterate() sur la valeur
    """
    base = scope if isinstance(scope, Scope) else Scope(scope)
    if binding is None or not binding.enabled or value is None:
        return [base]

    effective = _effective_mode(value, binding.mode)
    if effective == "single":
        return [create_child_scope(base, {binding.as_: value})]

    holder = create_child_scope(base, {binding.as_: value})
    return iterate(
        holder,
        binding.as_,
        iteration_mode,
        IterationOptions(max_items=binding.max_items, preview_index=binding.preview_index),
    )
