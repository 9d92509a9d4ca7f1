"""Bloc Button — libellé + lien."""
from typing import Literal
from .base import BaseBlock, BlockStructure, BlockSeed


class ButtonStructure(BlockStructure):
    variant: Literal["default", "outline", "ghost", "link"] = "default"
    size: Literal["sm", "default", "lg"] = "default"


class ButtonSeed(BlockSeed):
    label: str = "Button"
    href: str = "#"


class ButtonBlock(BaseBlock):
    block_type: Literal["button_block"] = "button_block"
    structure: ButtonStructure = ButtonStructure()
    seed: ButtonSeed = ButtonSeed()
