from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class RvalueRefAst(Ast):
    """
    The RvalueRefAst node borrows a place, "&x" or "&mut y".

    Attributes:
        borrow_token: The "&" token.
        mut_keyword: The optional "mut" keyword.
        place: The borrowed place.
    """

    borrow_token: "TokenAst"
    mut_keyword: Optional["TokenAst"]
    place: "PlaceAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueRefAst.
        s = ""
        s += f"{self.borrow_token.print(printer)}"
        s += f"{self.mut_keyword.print(printer)} " if self.mut_keyword else ""
        s += f"{self.place.print(printer)}"
        return s


__all__ = ["RvalueRefAst"]
