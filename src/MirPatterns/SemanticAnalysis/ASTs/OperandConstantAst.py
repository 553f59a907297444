from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class OperandConstantAst(Ast):
    """
    The OperandConstantAst node is a literal constant, "const 0_usize" or "const true".

    Attributes:
        const_keyword: The "const" keyword.
        literal: The integer or boolean literal.
    """

    const_keyword: "TokenAst"
    literal: "LiteralAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the OperandConstantAst.
        s = ""
        s += f"{self.const_keyword.print(printer)} {self.literal.print(printer)}"
        return s


__all__ = ["OperandConstantAst"]
