from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class RvalueCastAst(Ast):
    """
    The RvalueCastAst node converts an operand to another type, "copy x as isize (IntToInt)". The parenthesised cast
    kind is mandatory.

    Attributes:
        operand: The operand being cast.
        as_keyword: The "as" keyword.
        type: The target type.
        paren_l_token: The "(" token before the cast kind.
        cast_kind: The cast kind.
        paren_r_token: The ")" token after the cast kind.
    """

    operand: "OperandAst"
    as_keyword: "TokenAst"
    type: "TypeAst"
    paren_l_token: "TokenAst"
    cast_kind: "CastKindAst"
    paren_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueCastAst.
        s = ""
        s += f"{self.operand.print(printer)} {self.as_keyword.print(printer)} {self.type.print(printer)} "
        s += f"{self.paren_l_token.print(printer)}{self.cast_kind.print(printer)}{self.paren_r_token.print(printer)}"
        return s


__all__ = ["RvalueCastAst"]
