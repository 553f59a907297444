from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class BreakAst(Ast):
    break_keyword: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the BreakAst.
        return self.break_keyword.print(printer)


__all__ = ["BreakAst"]
