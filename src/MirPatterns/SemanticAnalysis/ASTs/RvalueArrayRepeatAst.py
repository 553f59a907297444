from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class RvalueArrayRepeatAst(Ast):
    """
    The RvalueArrayRepeatAst node builds an array by repeating one operand, "[const 0; 5]".

    Attributes:
        bracket_l_token: The "[" token.
        operand: The repeated operand.
        semicolon_token: The ";" token.
        count: The number of repetitions.
        bracket_r_token: The "]" token.
    """

    bracket_l_token: "TokenAst"
    operand: "OperandAst"
    semicolon_token: "TokenAst"
    count: "NumberLiteralAst"
    bracket_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueArrayRepeatAst.
        s = ""
        s += f"{self.bracket_l_token.print(printer)}{self.operand.print(printer)}{self.semicolon_token.print(printer)} "
        s += f"{self.count.print(printer)}{self.bracket_r_token.print(printer)}"
        return s


__all__ = ["RvalueArrayRepeatAst"]
