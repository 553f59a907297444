from dataclasses import dataclass
from typing import List, Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class RvalueArrayAst(Ast):
    """
    The RvalueArrayAst node builds an array from a list of operands, "[const 0, const 1]".

    Attributes:
        bracket_l_token: The "[" token.
        operands: The array elements.
        trailing_comma: The optional "," after the last element.
        bracket_r_token: The "]" token.
    """

    bracket_l_token: "TokenAst"
    operands: List["OperandAst"]
    trailing_comma: Optional["TokenAst"]
    bracket_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueArrayAst.
        s = ""
        s += f"{self.bracket_l_token.print(printer)}{Seq(self.operands).print(printer, ", ")}"
        s += f"{self.trailing_comma.print(printer)}" if self.trailing_comma else ""
        s += f"{self.bracket_r_token.print(printer)}"
        return s


__all__ = ["RvalueArrayAst"]
