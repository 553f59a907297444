from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class AssignStatementAst(Ast):
    """
    The AssignStatementAst node writes a value or a call result into a place, "x0 = move x2;".

    Attributes:
        place: The assigned place.
        assign_token: The "=" token.
        value: The assigned rvalue or call.
        semicolon_token: The ";" token, absent when the statement is a switch arm body.
    """

    place: "PlaceAst"
    assign_token: "TokenAst"
    value: "RvalueOrCallAst"
    semicolon_token: Optional["TokenAst"]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the AssignStatementAst.
        s = ""
        s += f"{self.place.print(printer)} {self.assign_token.print(printer)} {self.value.print(printer)}"
        s += f"{self.semicolon_token.print(printer)}" if self.semicolon_token else ""
        return s


__all__ = ["AssignStatementAst"]
