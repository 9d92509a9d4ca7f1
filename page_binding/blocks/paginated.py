"""
Bloc PaginatedData — expose une collection paginée dans le scope.

Scope enfant : {as: données de la page, "pagination": {currentPage, totalPages, ...}}
La page courante vient de la requête (paramètre page du rendu).
"""
from typing import ClassVar, Literal
from pydantic import BaseModel, ConfigDict, Field
from .base import BaseBlock, BlockStructure, BlockSeed


class PaginatedDataBinding(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = ""
    as_: str = Field(default="", alias="as")
    enable_pagination: bool = False
    page_size: int = Field(default=10, ge=1, le=100)

    @property
    def enabled(self) -> bool:
        return bool(self.source) and bool(self.as_)


class PaginatedDataBlock(BaseBlock):
    block_type: Literal["paginated_data_block"] = "paginated_data_block"
    is_container: ClassVar[bool] = True
    structure: BlockStructure = BlockStructure()
    seed: BlockSeed = BlockSeed()
    paginated_data: PaginatedDataBinding = PaginatedDataBinding()
