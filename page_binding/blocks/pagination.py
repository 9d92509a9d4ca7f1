"""Bloc Pagination — lit scope["pagination"] et calcule la plage de pages."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockStructure, BlockSeed


class PaginationStructure(BlockStructure):
    mode: Literal["server", "client"] = "server"
    sibling_count: int = Field(default=1, ge=0, le=3)
    show_first_last: bool = False
    align: Literal["start", "center", "end"] = "center"


class PaginationSeed(BlockSeed):
    previous_label: str = "Previous"
    next_label: str = "Next"
    first_label: str = "First"
    last_label: str = "Last"


class PaginationBlock(BaseBlock):
    block_type: Literal["pagination_block"] = "pagination_block"
    structure: PaginationStructure = PaginationStructure()
    seed: PaginationSeed = PaginationSeed()
