from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstMixins import PlaceProjections
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceSubsliceAst(Ast, PlaceProjections):
    """
    The PlaceSubsliceAst node takes a sub-slice of a place, "x[1:3]". Both bounds are required; a negative upper bound
    counts from the end, as in "x[1:-3]".

    Attributes:
        place: The sliced place.
        bracket_l_token: The "[" token.
        from_offset: The lower bound.
        colon_token: The ":" token.
        to_offset: The upper bound.
        bracket_r_token: The "]" token.
    """

    place: "PlaceAst"
    bracket_l_token: "TokenAst"
    from_offset: "NumberLiteralAst"
    colon_token: "TokenAst"
    to_offset: "NumberLiteralAst"
    bracket_r_token: "TokenAst"

    @property
    def from_end(self) -> bool:
        return self.to_offset.sign is not None

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceSubsliceAst.
        s = ""
        s += f"{self.place.print(printer)}{self.bracket_l_token.print(printer)}{self.from_offset.print(printer)}"
        s += f"{self.colon_token.print(printer)}{self.to_offset.print(printer)}{self.bracket_r_token.print(printer)}"
        return s


__all__ = ["PlaceSubsliceAst"]
