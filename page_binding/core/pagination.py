"""
Pagination — découpage d'une liste en pages + plage de numéros pour l'UI.

paginate(items, page, page_size) → PaginatedResult(data, pagination)
page_range(current, total, siblings) → [1, None, 9, 10, 11, None, 20]
None = ellipse (ELLIPSIS), sérialisée en null côté JSON.
"""
import math
from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ELLIPSIS = None

# Au-delà de ce nombre de pages, la plage est compactée avec des ellipses
_MAX_FULL_RANGE = 7

PAGINATION_VARIABLE = "pagination"


class PaginationMetadata(BaseModel):
    """Métadonnées dérivées (jamais persistées) — alias camelCase côté scope/JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_page: int = 1
    page_size: int = 10
    total_pages: int = 0
    total_items: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False

    def to_scope(self) -> dict:
        """Forme placée dans le scope sous la clé "pagination"."""
        return self.model_dump(by_alias=True)


class PaginatedResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: List[Any] = Field(default_factory=list)
    pagination: PaginationMetadata = Field(default_factory=PaginationMetadata)


def paginate(all_items: Any, page: int = 1, page_size: int = 10) -> PaginatedResult:
    """
    Retourne la tranche correspondant à `page` (1-indexée, bornée).

    None → résultat vide ; objet seul (non-liste) → 1 élément sur 1 page.
    page_size < 1 → 1.
    """
    if all_items is None:
        return PaginatedResult(pagination=PaginationMetadata(page_size=max(page_size, 1)))

    if not isinstance(all_items, (list, tuple)):
        return PaginatedResult(
            data=[all_items],
            pagination=PaginationMetadata(
                current_page=1, page_size=1, total_pages=1, total_items=1,
            ),
        )

    page_size = max(page_size, 1)
    total_items = len(all_items)
    total_pages = math.ceil(total_items / page_size)
    current_page = min(max(page, 1), max(total_pages, 1))
    start = (current_page - 1) * page_size

    return PaginatedResult(
        data=list(all_items[start:start + page_size]),
        pagination=PaginationMetadata(
            current_page=current_page,
            page_size=page_size,
            total_pages=total_pages,
            total_items=total_items,
            has_next_page=current_page < total_pages,
            has_prev_page=current_page > 1,
        ),
    )


def page_range(current_page: int, total_pages: int, sibling_count: int = 1) -> List[Optional[int]]:
    """
    Numéros de pages à afficher, ELLIPSIS là où des pages sont masquées.
    Au-delà de 7 pages (plus si sibling_count > 1), la première et la dernière
    restent toujours visibles.
    """
    sibling_count = max(sibling_count, 0)
    edge_count = 3 + 2 * sibling_count

    # Un bord + ellipse + dernière page ne tient pas : tout afficher
    if total_pages <= max(_MAX_FULL_RANGE, edge_count + 2):
        return list(range(1, total_pages + 1))

    left_sibling = max(current_page - sibling_count, 1)
    right_sibling = min(current_page + sibling_count, total_pages)

    show_left = left_sibling > 2
    show_right = right_sibling < total_pages - 1

    if not show_left and not show_right:
        return list(range(1, total_pages + 1))

    if not show_left:
        return list(range(1, edge_count + 1)) + [ELLIPSIS, total_pages]

    if not show_right:
        return [1, ELLIPSIS] + list(range(total_pages - edge_count + 1, total_pages + 1))

    return [1, ELLIPSIS] + list(range(left_sibling, right_sibling + 1)) + [ELLIPSIS, total_pages]


class PaginationControls(BaseModel):
    """État calculé d'un bloc de pagination."""
    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    previous_page: int
    next_page: int
    pages: List[Optional[int]] = Field(default_factory=list)
    visible: bool = False


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 1:
        return default
    return int(value)


def pagination_controls(scope: Mapping, sibling_count: int = 1) -> PaginationControls:
    """
    Lit scope["pagination"] (posé par une source paginée) et calcule les contrôles.
    Pas de métadonnées → page 1 sur 1, contrôles masqués.
    """
    meta = scope.get(PAGINATION_VARIABLE)
    if isinstance(meta, PaginationMetadata):
        meta = meta.to_scope()
    if not isinstance(meta, Mapping):
        meta = {}

    current_page = _as_int(meta.get("currentPage"), 1)
    total_pages = _as_int(meta.get("totalPages"), 1)
    has_next = meta.get("hasNextPage")
    has_prev = meta.get("hasPrevPage")
    has_next = current_page < total_pages if has_next is None else bool(has_next)
    has_prev = current_page > 1 if has_prev is None else bool(has_prev)

    return PaginationControls(
        current_page=current_page,
        total_pages=total_pages,
        has_next_page=has_next,
        has_prev_page=has_prev,
        previous_page=max(1, current_page - 1),
        next_page=min(total_pages, current_page + 1),
        pages=page_range(current_page, total_pages, sibling_count),
        visible=total_pages > 1,
    )
