from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class LoopAst(Ast):
    loop_keyword: "TokenAst"
    block: "BlockAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the LoopAst.
        s = ""
        s += f"{self.loop_keyword.print(printer)} {self.block.print(printer)}"
        return s


__all__ = ["LoopAst"]
