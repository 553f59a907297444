from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class CallStatementAst(Ast):
    call: "CallAst"
    semicolon_token: Optional["TokenAst"]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the CallStatementAst.
        s = ""
        s += f"{self.call.print(printer)}"
        s += f"{self.semicolon_token.print(printer)}" if self.semicolon_token else ""
        return s


__all__ = ["CallStatementAst"]
