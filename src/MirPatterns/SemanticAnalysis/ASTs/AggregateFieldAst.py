from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class AggregateFieldAst(Ast):
    identifier: "IdentifierAst"
    colon_token: "TokenAst"
    operand: "OperandAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the AggregateFieldAst.
        s = ""
        s += f"{self.identifier.print(printer)}{self.colon_token.print(printer)} {self.operand.print(printer)}"
        return s


__all__ = ["AggregateFieldAst"]
