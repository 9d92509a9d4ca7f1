"""Bloc Card — image + titre + description + lien."""
from typing import Literal, Optional
from .base import BaseBlock, BlockStructure, BlockSeed


class CardStructure(BlockStructure):
    variant: Literal["default", "outlined", "elevated"] = "default"
    image_position: Literal["top", "left", "none"] = "top"


class CardSeed(BlockSeed):
    title: str = ""
    description: str = ""
    image_url: Optional[str] = None
    href: Optional[str] = None
    badge: Optional[str] = None


class CardBlock(BaseBlock):
    block_type: Literal["card_block"] = "card_block"
    structure: CardStructure = CardStructure()
    seed: CardSeed = CardSeed()
