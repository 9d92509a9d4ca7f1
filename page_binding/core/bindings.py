"""
Expressions de binding {{variable.chemin}} — résolution contre un scope.

"Bonjour {{user.name}}"   + {"user": {"name": "Ana"}} → "Bonjour Ana"
"Élément {{index}}"       + {"index": 2}              → "Élément 2"
"{{inconnu}}"             + {}                        → ""

Aucune syntaxe d'échappement pour un "{{" littéral : tout jeton est résolu.
"""
import logging
import re
from collections.abc import Mapping
from typing import Any, Iterable, List

from pydantic import BaseModel
from pydantic_core import to_json

from .paths import get_by_path

log = logging.getLogger(__name__)

BINDING_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

INDEX_VARIABLE = "index"


def render_value(value: Any) -> str:
    """
    Conversion canonique valeur → texte.
    None → "" ; bool → "true"/"false" ; dict/list/modèle → JSON compact ;
    float entier → sans décimale (100.0 → "100") ; autres primitives → str().
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(value)
    if isinstance(value, (dict, list, tuple, BaseModel)):
        return to_json(value, serialize_unknown=True).decode("utf-8")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _split_expression(expression: str) -> tuple:
    """"user.address.city" → ("user", "address.city") ; "user" → ("user", "")."""
    name, _, field_path = expression.partition(".")
    return name, field_path


def resolve_single_binding(expression: str, scope: Mapping) -> str:
    """Résout le contenu d'un jeton (sans les accolades) contre le scope."""
    expr = expression.strip()

    if expr == INDEX_VARIABLE:
        return render_value(scope.get(INDEX_VARIABLE))

    name, field_path = _split_expression(expr)
    variable = scope.get(name)
    if variable is None:
        log.debug("Variable absente du scope : %r", name)
        return ""

    return render_value(get_by_path(variable, field_path))


def resolve_bindings(template: Any, scope: Mapping) -> str:
    """
    Remplace chaque jeton {{...}} du template par sa valeur dans le scope.
    Un template sans "{{" est retourné tel quel ; None → "".
    """
    if template is None:
        return ""
    if not isinstance(template, str) or "{{" not in template:
        return template

    return BINDING_PATTERN.sub(lambda m: resolve_single_binding(m.group(1), scope), template)


def has_bindings(value: Any) -> bool:
    """True si la chaîne contient au moins un jeton {{...}}."""
    if not isinstance(value, str) or "{{" not in value:
        return False
    return BINDING_PATTERN.search(value) is not None


def extract_binding_variables(template: Any) -> List[str]:
    """Noms de variables racine référencés, sans doublon, dans l'ordre d'apparition."""
    if not isinstance(template, str) or "{{" not in template:
        return []

    names: List[str] = []
    for match in BINDING_PATTERN.finditer(template):
        name, _ = _split_expression(match.group(1).strip())
        if name not in names:
            names.append(name)
    return names


def extract_field_paths(template: Any) -> List[str]:
    """Chemins complets des jetons, dans l'ordre, doublons conservés."""
    if not isinstance(template, str) or "{{" not in template:
        return []
    return [m.group(1).strip() for m in BINDING_PATTERN.finditer(template)]


def resolve_props(props: Any, scope: Mapping, skip: Iterable[str] = ("id",)) -> Any:
    """
    Parcourt récursivement un dict/list/str et résout les bindings.
    Les clés de premier niveau listées dans `skip` sont conservées telles quelles.
    """
    if isinstance(props, Mapping):
        skipped = set(skip)
        return {
            k: v if k in skipped else resolve_props(v, scope, skip=())
            for k, v in props.items()
        }
    return _resolve_value(props, scope)


def _resolve_value(value: Any, scope: Mapping) -> Any:
    if isinstance(value, str):
        return resolve_bindings(value, scope) if has_bindings(value) else value
    if isinstance(value, Mapping):
        return {k: _resolve_value(v, scope) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_value(v, scope) for v in value]
    return value
