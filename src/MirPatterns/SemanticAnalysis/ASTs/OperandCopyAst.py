from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class OperandCopyAst(Ast):
    """
    The OperandCopyAst node reads a place by copy, "copy x".

    Attributes:
        copy_keyword: The "copy" word.
        place: The place being copied.
    """

    copy_keyword: "TokenAst"
    place: "PlaceAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the OperandCopyAst.
        s = ""
        s += f"{self.copy_keyword.print(printer)} {self.place.print(printer)}"
        return s


__all__ = ["OperandCopyAst"]
