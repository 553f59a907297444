from dataclasses import dataclass
from typing import List

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstMixins import PlaceProjections
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceParenAst(Ast, PlaceProjections):
    """
    The PlaceParenAst node groups a place, as in "(*x.0)". Grouping adds no projection of its own.

    Attributes:
        paren_l_token: The "(" token.
        place: The grouped place.
        paren_r_token: The ")" token.
    """

    paren_l_token: "TokenAst"
    place: "PlaceAst"
    paren_r_token: "TokenAst"

    def projections(self) -> List["PlaceAst"]:
        return self.place.projections()

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceParenAst.
        s = ""
        s += f"{self.paren_l_token.print(printer)}{self.place.print(printer)}{self.paren_r_token.print(printer)}"
        return s


__all__ = ["PlaceParenAst"]
