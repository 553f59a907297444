from dataclasses import dataclass
from typing import List, Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class RvalueTupleAst(Ast):
    paren_l_token: "TokenAst"
    operands: List["OperandAst"]
    trailing_comma: Optional["TokenAst"]
    paren_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueTupleAst.
        s = ""
        s += f"{self.paren_l_token.print(printer)}{Seq(self.operands).print(printer, ", ")}"
        s += f"{self.trailing_comma.print(printer)}" if self.trailing_comma else ""
        s += f"{self.paren_r_token.print(printer)}"
        return s


__all__ = ["RvalueTupleAst"]
