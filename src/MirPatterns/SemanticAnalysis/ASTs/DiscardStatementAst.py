from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class DiscardStatementAst(Ast):
    """
    The DiscardStatementAst node calls a function and ignores its result, "_ = drop_in_place(copy elem_ptr);".

    Attributes:
        underscore_token: The "_" token.
        assign_token: The "=" token.
        call: The call whose result is discarded.
        semicolon_token: The ";" token, absent when the statement is a switch arm body.
    """

    underscore_token: "TokenAst"
    assign_token: "TokenAst"
    call: "CallAst"
    semicolon_token: Optional["TokenAst"]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the DiscardStatementAst.
        s = ""
        s += f"{self.underscore_token.print(printer)} {self.assign_token.print(printer)} {self.call.print(printer)}"
        s += f"{self.semicolon_token.print(printer)}" if self.semicolon_token else ""
        return s


__all__ = ["DiscardStatementAst"]
