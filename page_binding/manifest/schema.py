"""
Schéma du manifest JSON — arbre de blocs avec bindings de données.
ManifestPage → resolve_manifest() → ResolvedPage (seeds résolus, itérations dépliées)

Exemple minimal :
{
  "title": "Catalogue {{user.name}}",
  "blocks": [
    {
      "block_type": "grid_block",
      "structure": {"columns": 3},
      "data": {"mode": "list", "source": "externalData.products", "as": "product"},
      "children": [
        {"block_type": "card_block",
         "seed": {"title": "{{product.name}}", "description": "{{product.price}} €"}}
      ]
    }
  ],
  "variables": {"site": "ACME"}
}
"""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from ..core.iteration import DataBinding
from ..core.pagination import PaginationControls
from ..blocks import BlockUnion, PaginatedDataBinding


class ManifestBlockConfig(BaseModel):
    """Configuration d'un bloc dans le manifest (récursive via children)."""
    block_type: str
    structure: Dict[str, Any] = Field(default_factory=dict)
    seed: Dict[str, Any] = Field(default_factory=dict)
    data: Optional[DataBinding] = None
    paginated_data: Optional[PaginatedDataBinding] = None
    children: List["ManifestBlockConfig"] = Field(default_factory=list)
    css_class: Optional[str] = None
    id: Optional[str] = None


class ManifestPage(BaseModel):
    page_type: str = "page"
    title: str = ""
    blocks: List[ManifestBlockConfig] = Field(default_factory=list)
    variables: Dict[str, Any] = Field(
        default_factory=dict,
        description="Variables du scope racine, visibles par tous les blocs",
    )
    meta: Dict[str, Any] = Field(default_factory=dict)


class ResolvedBlock(BaseModel):
    """Instance de bloc prête à rendre : seed résolu, une instance par itération."""
    key: str
    block: BlockUnion
    index: Optional[int] = None
    children: List["ResolvedBlock"] = Field(default_factory=list)
    controls: Optional[PaginationControls] = None


class ResolvedPage(BaseModel):
    page_type: str = "page"
    title: str = ""
    mode: Literal["edit", "render"] = "render"
    blocks: List[ResolvedBlock] = Field(default_factory=list)


ManifestBlockConfig.model_rebuild()
ResolvedBlock.model_rebuild()
