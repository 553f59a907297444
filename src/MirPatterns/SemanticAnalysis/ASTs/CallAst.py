from dataclasses import dataclass
from typing import List

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class CallAst(Ast):
    """
    The CallAst node is a function call, "std::mem::take(move y)". It is shared by call statements and the right hand
    side of assignments and let declarations.

    Attributes:
        callee: The path of the called function, plain or qualified.
        paren_l_token: The "(" token.
        arguments: The argument operands, possibly empty.
        paren_r_token: The ")" token.
    """

    callee: "TypePathAst"
    paren_l_token: "TokenAst"
    arguments: List["OperandAst"]
    paren_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the CallAst.
        s = ""
        s += f"{self.callee.print(printer)}{self.paren_l_token.print(printer)}{Seq(self.arguments).print(printer, ", ")}"
        s += f"{self.paren_r_token.print(printer)}"
        return s


__all__ = ["CallAst"]
