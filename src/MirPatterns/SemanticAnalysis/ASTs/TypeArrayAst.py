from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class TypeArrayAst(Ast):
    """
    The TypeArrayAst node represents a fixed-length array type, "[T; N]".

    Attributes:
        bracket_l_token: The "[" token.
        element_type: The element type.
        semicolon_token: The ";" token.
        length: The array length.
        bracket_r_token: The "]" token.
    """

    bracket_l_token: "TokenAst"
    element_type: "TypeAst"
    semicolon_token: "TokenAst"
    length: "NumberLiteralAst"
    bracket_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the TypeArrayAst.
        s = ""
        s += f"{self.bracket_l_token.print(printer)}{self.element_type.print(printer)}{self.semicolon_token.print(printer)} "
        s += f"{self.length.print(printer)}{self.bracket_r_token.print(printer)}"
        return s


__all__ = ["TypeArrayAst"]
