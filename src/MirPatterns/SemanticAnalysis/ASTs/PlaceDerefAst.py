from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstMixins import PlaceProjections
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceDerefAst(Ast, PlaceProjections):
    """
    The PlaceDerefAst node dereferences a whole place: "*x.0" is the deref of "x.0".

    Attributes:
        star_token: The "*" token.
        place: The dereferenced place.
    """

    star_token: "TokenAst"
    place: "PlaceAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceDerefAst.
        s = ""
        s += f"{self.star_token.print(printer)}{self.place.print(printer)}"
        return s


__all__ = ["PlaceDerefAst"]
