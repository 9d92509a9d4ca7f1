"""
Blocs conteneurs Flex / Grid — acceptent des enfants et un binding de données.
Avec data.mode = "list", le bloc entier est répété pour chaque élément.
"""
from typing import ClassVar, Literal
from ..core.iteration import DataBinding
from .base import BaseBlock, BlockStructure, BlockSeed


class FlexStructure(BlockStructure):
    direction: Literal["row", "column"] = "row"
    justify: Literal["start", "center", "end", "between"] = "start"
    gap: int = 16
    wrap: bool = False


class FlexBlock(BaseBlock):
    block_type: Literal["flex_block"] = "flex_block"
    is_container: ClassVar[bool] = True
    structure: FlexStructure = FlexStructure()
    seed: BlockSeed = BlockSeed()
    data: DataBinding = DataBinding()


class GridStructure(BlockStructure):
    columns: int = 3
    gap: int = 16


class GridBlock(BaseBlock):
    block_type: Literal["grid_block"] = "grid_block"
    is_container: ClassVar[bool] = True
    structure: GridStructure = GridStructure()
    seed: BlockSeed = BlockSeed()
    data: DataBinding = DataBinding()
