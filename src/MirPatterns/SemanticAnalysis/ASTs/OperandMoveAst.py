from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class OperandMoveAst(Ast):
    move_keyword: "TokenAst"
    place: "PlaceAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the OperandMoveAst.
        s = ""
        s += f"{self.move_keyword.print(printer)} {self.place.print(printer)}"
        return s


__all__ = ["OperandMoveAst"]
