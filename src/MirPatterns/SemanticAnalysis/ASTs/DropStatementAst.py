from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class DropStatementAst(Ast):
    """
    The DropStatementAst node runs the destructor of a place, "drop(y[x]);".

    Attributes:
        drop_keyword: The "drop" word.
        paren_l_token: The "(" token.
        place: The dropped place.
        paren_r_token: The ")" token.
        semicolon_token: The ";" token, absent when the statement is a switch arm body.
    """

    drop_keyword: "TokenAst"
    paren_l_token: "TokenAst"
    place: "PlaceAst"
    paren_r_token: "TokenAst"
    semicolon_token: Optional["TokenAst"]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the DropStatementAst.
        s = ""
        s += f"{self.drop_keyword.print(printer)}{self.paren_l_token.print(printer)}{self.place.print(printer)}"
        s += f"{self.paren_r_token.print(printer)}"
        s += f"{self.semicolon_token.print(printer)}" if self.semicolon_token else ""
        return s


__all__ = ["DropStatementAst"]
