from dataclasses import dataclass
from typing import List

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class BlockAst(Ast):
    """
    The BlockAst node is a braced list of statements, used as a loop body and as a switch arm body. It may be empty.

    Attributes:
        brace_l_token: The "{" token.
        statements: The statements in the block, in source order.
        brace_r_token: The "}" token.
    """

    brace_l_token: "TokenAst"
    statements: List["StatementAst"]
    brace_r_token: "TokenAst"

    @ast_printer_method_indent
    def print(self, printer: AstPrinter) -> str:
        # Print the BlockAst, with one statement per line.
        s = ""
        s += f"{self.brace_l_token.print(printer)}"
        s += f"\n{Seq(self.statements).print(printer, "\n")}\n" if self.statements else ""
        s += f"{self.brace_r_token.print(printer)}"
        return s


__all__ = ["BlockAst"]
