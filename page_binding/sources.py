"""
Sources de données — collaborateur fourni au moteur de binding.

La source reçoit un chemin ("externalData.products", "user.name") et renvoie
un objet, une liste ou None. Elle ne lève jamais : une donnée absente = None.
Aucun accès réseau ici : les données sont déjà matérialisées en mémoire.
"""
import copy
import logging
from collections.abc import Mapping
from typing import Any, Optional

from .core.paths import get_by_path
from .core.pagination import PaginatedResult, paginate

log = logging.getLogger(__name__)

EXTERNAL_DATA_PREFIX = "externalData."

# Données de démonstration : utilisées tant qu'aucune source réelle n'est branchée
MOCK_EXTERNAL_DATA: dict = {
    "products": [
        {"id": 1, "name": "Product 1", "price": 99.99,  "image": "https://picsum.photos/seed/p1/400/300"},
        {"id": 2, "name": "Product 2", "price": 149.99, "image": "https://picsum.photos/seed/p2/400/300"},
        {"id": 3, "name": "Product 3", "price": 199.99, "image": "https://picsum.photos/seed/p3/400/300"},
        {"id": 4, "name": "Product 4", "price": 249.99, "image": "https://picsum.photos/seed/p4/400/300"},
    ],
    "user": {
        "name":  "John Doe",
        "email": "john@example.com",
    },
    "categories": [
        {"id": 1, "name": "Electronics",   "icon": "📱"},
        {"id": 2, "name": "Clothing",      "icon": "👕"},
        {"id": 3, "name": "Home & Garden", "icon": "🏠"},
    ],
}

# Collections proposées dans le sélecteur de binding des blocs conteneurs
BINDABLE_COLLECTIONS = [
    {"slug": "products", "label": "Products"},
]


def clean_source_path(source: str) -> str:
    """"externalData.products" → "products"."""
    if source.startswith(EXTERNAL_DATA_PREFIX):
        return source[len(EXTERNAL_DATA_PREFIX):]
    return source


class StaticDataSource:
    """
    Source en mémoire.

    Usage:
        >>> source = StaticDataSource({"products": [...]})
        >>> source.get("externalData.products")
        [...]
    """

    def __init__(self, data: Optional[Mapping] = None):
        self.data = data if data is not None else copy.deepcopy(MOCK_EXTERNAL_DATA)

    def get(self, source_path: Optional[str]) -> Any:
        """Valeur au chemin donné ; chemin vide → toutes les données ; absent → None."""
        path = clean_source_path(source_path or "")
        if not path:
            return self.data
        value = get_by_path(self.data, path)
        if value is None:
            log.debug("Source %r : aucune donnée", source_path)
        return value

    def fetch_page(self, slug: str, page: int = 1, page_size: int = 10) -> PaginatedResult:
        """
        Page `page` de la collection `slug`.
        Collection inconnue → résultat vide (page 1 sur 0).
        """
        collection = self.get(slug)
        if collection is None:
            log.warning("Aucune donnée pour la collection %r", slug)
        return paginate(collection, page=page, page_size=page_size)


def mock_source() -> StaticDataSource:
    return StaticDataSource(copy.deepcopy(MOCK_EXTERNAL_DATA))
