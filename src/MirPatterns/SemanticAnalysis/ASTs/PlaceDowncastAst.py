from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstMixins import PlaceProjections
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceDowncastAst(Ast, PlaceProjections):
    """
    The PlaceDowncastAst node views an enum place as one of its variants, "(x as Some)". It is only written inside
    parentheses, and is usually followed by a field projection: "(x as Some).0".

    Attributes:
        paren_l_token: The "(" token.
        place: The enum place being downcast.
        as_keyword: The "as" keyword.
        variant: The variant name.
        paren_r_token: The ")" token.
    """

    paren_l_token: "TokenAst"
    place: "PlaceAst"
    as_keyword: "TokenAst"
    variant: "IdentifierAst"
    paren_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceDowncastAst.
        s = ""
        s += f"{self.paren_l_token.print(printer)}{self.place.print(printer)} {self.as_keyword.print(printer)} "
        s += f"{self.variant.print(printer)}{self.paren_r_token.print(printer)}"
        return s


__all__ = ["PlaceDowncastAst"]
