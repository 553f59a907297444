from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstMixins import PlaceProjections
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceIndexAst(Ast, PlaceProjections):
    """
    The PlaceIndexAst node indexes a place by the value held in another place, "x[y]".

    Attributes:
        place: The indexed place.
        bracket_l_token: The "[" token.
        index: The place holding the index.
        bracket_r_token: The "]" token.
    """

    place: "PlaceAst"
    bracket_l_token: "TokenAst"
    index: "PlaceAst"
    bracket_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceIndexAst.
        s = ""
        s += f"{self.place.print(printer)}{self.bracket_l_token.print(printer)}{self.index.print(printer)}"
        s += f"{self.bracket_r_token.print(printer)}"
        return s


__all__ = ["PlaceIndexAst"]
