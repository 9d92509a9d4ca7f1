"""
Bloc Repeater — répète ses enfants pour chaque élément du premier tableau du scope.
Sans tableau dans le scope (ou loop_data désactivé) : enfants rendus une fois.
"""
from typing import ClassVar, Literal
from .base import BaseBlock, BlockStructure, BlockSeed


class RepeaterStructure(BlockStructure):
    loop_data: bool = True
    max_items: int = 0


class RepeaterBlock(BaseBlock):
    block_type: Literal["repeater_block"] = "repeater_block"
    is_container: ClassVar[bool] = True
    structure: RepeaterStructure = RepeaterStructure()
    seed: BlockSeed = BlockSeed()
