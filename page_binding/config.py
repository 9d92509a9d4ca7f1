"""
Paramètres page_binding — lus dans l'environnement.

PAGE_BINDING_PAGE_SIZE     taille de page par défaut (10)
PAGE_BINDING_SIBLING_COUNT pages voisines affichées autour de la page courante (1)
PAGE_BINDING_LOG_LEVEL     niveau de log de l'app FastAPI (INFO)
"""
import logging
import os

log = logging.getLogger(__name__)


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("%s=%r invalide — défaut %d utilisé", name, raw, default)
        return default
    return value if value >= minimum else default


def default_page_size() -> int:
    return _env_int("PAGE_BINDING_PAGE_SIZE", 10, minimum=1)


def default_sibling_count() -> int:
    return _env_int("PAGE_BINDING_SIBLING_COUNT", 1)


def log_level() -> str:
    level = os.getenv("PAGE_BINDING_LOG_LEVEL", "INFO").upper()
    return level if level in logging.getLevelNamesMapping() else "INFO"
