"""
Blocs de base pour page_binding.
Structure (mise en page, jamais résolue) / Seed (contenu, bindings {{...}} résolus).
"""
from typing import ClassVar, Optional
from pydantic import BaseModel


class BlockStructure(BaseModel):
    """Structure visuelle d'un bloc (layout, variants, options d'affichage)."""
    pass


class BlockSeed(BaseModel):
    """Contenu d'un bloc (textes, URLs). Les chaînes peuvent contenir des {{bindings}}."""
    pass


class BaseBlock(BaseModel):
    """Bloc de base (classe parente de tous les blocs)."""
    block_type: str
    css_class: Optional[str] = None
    id: Optional[str] = None

    # Bloc pouvant recevoir des enfants dans le manifest
    is_container: ClassVar[bool] = False
