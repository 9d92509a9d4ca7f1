"""
Résolution de chemins pointés dans des données imbriquées.

"user.address.city" → data["user"]["address"]["city"]
"items.0.name"      → data["items"][0]["name"]
Données manquantes → None (jamais d'exception)
"""
from collections.abc import Mapping
from typing import Any


def _is_index(segment: str) -> bool:
    return segment.isdigit() and segment.isascii()


def get_by_path(root: Any, path: str) -> Any:
    """
    Lit une valeur dans une structure dict/list via un chemin pointé.

    Un segment numérique indexe une liste ; hors limites → None.
    Une clé absente, un None intermédiaire ou une valeur scalaire → None.
    Chemin vide → root tel quel.
    """
    if not path:
        return root

    current = root
    for segment in path.split("."):
        if current is None:
            return None
        if isinstance(current, (list, tuple)):
            if not _is_index(segment):
                return None
            idx = int(segment)
            if idx >= len(current):
                return None
            current = current[idx]
        elif isinstance(current, Mapping):
            current = current.get(segment)
        else:
            return None
    return current
