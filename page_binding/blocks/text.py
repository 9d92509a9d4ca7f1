"""Blocs texte — titre et paragraphe."""
from typing import Literal
from .base import BaseBlock, BlockStructure, BlockSeed


class HeadingStructure(BlockStructure):
    level: Literal[1, 2, 3, 4, 5, 6] = 2
    align: Literal["left", "center", "right"] = "left"


class HeadingSeed(BlockSeed):
    text: str = ""


class HeadingBlock(BaseBlock):
    block_type: Literal["heading_block"] = "heading_block"
    structure: HeadingStructure = HeadingStructure()
    seed: HeadingSeed = HeadingSeed()


class TextStructure(BlockStructure):
    align: Literal["left", "center", "right", "justify"] = "left"
    size: Literal["sm", "base", "lg"] = "base"


class TextSeed(BlockSeed):
    text: str = ""


class TextBlock(BaseBlock):
    block_type: Literal["text_block"] = "text_block"
    structure: TextStructure = TextStructure()
    seed: TextSeed = TextSeed()
