"""
Blocs — exports publics + BlockUnion discriminé + registry block_type → classe.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, BlockStructure, BlockSeed
from .text import HeadingBlock, HeadingStructure, HeadingSeed, TextBlock, TextStructure, TextSeed
from .card import CardBlock, CardStructure, CardSeed
from .button import ButtonBlock, ButtonStructure, ButtonSeed
from .layout import FlexBlock, FlexStructure, GridBlock, GridStructure
from .repeater import RepeaterBlock, RepeaterStructure
from .paginated import PaginatedDataBlock, PaginatedDataBinding
from .pagination import PaginationBlock, PaginationStructure, PaginationSeed

# Union discriminée par block_type, utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        HeadingBlock,
        TextBlock,
        CardBlock,
        ButtonBlock,
        FlexBlock,
        GridBlock,
        RepeaterBlock,
        PaginatedDataBlock,
        PaginationBlock,
    ],
    Field(discriminator="block_type"),
]

BLOCK_REGISTRY: dict = {
    "heading_block":        HeadingBlock,
    "text_block":           TextBlock,
    "card_block":           CardBlock,
    "button_block":         ButtonBlock,
    "flex_block":           FlexBlock,
    "grid_block":           GridBlock,
    "repeater_block":       RepeaterBlock,
    "paginated_data_block": PaginatedDataBlock,
    "pagination_block":     PaginationBlock,
}

__all__ = [
    # Base
    "BaseBlock", "BlockStructure", "BlockSeed",
    # Texte
    "HeadingBlock", "HeadingStructure", "HeadingSeed",
    "TextBlock", "TextStructure", "TextSeed",
    # Card / Button
    "CardBlock", "CardStructure", "CardSeed",
    "ButtonBlock", "ButtonStructure", "ButtonSeed",
    # Conteneurs
    "FlexBlock", "FlexStructure", "GridBlock", "GridStructure",
    "RepeaterBlock", "RepeaterStructure",
    "PaginatedDataBlock", "PaginatedDataBinding",
    # Pagination
    "PaginationBlock", "PaginationStructure", "PaginationSeed",
    # Union / registry
    "BlockUnion", "BLOCK_REGISTRY",
]
