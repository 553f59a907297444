from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class RvalueUseAst(Ast):
    operand: "OperandAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueUseAst.
        return self.operand.print(printer)


__all__ = ["RvalueUseAst"]
