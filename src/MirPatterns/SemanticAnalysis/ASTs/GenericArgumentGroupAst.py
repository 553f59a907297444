from dataclasses import dataclass
from typing import List

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class GenericArgumentGroupAst(Ast):
    """
    The GenericArgumentGroupAst node represents the "<...>" type arguments attached to a path segment, as in "Vec<T>".

    Attributes:
        bracket_l_token: The "<" token.
        arguments: The type arguments, which may themselves carry generic arguments.
        bracket_r_token: The ">" token.
    """

    bracket_l_token: "TokenAst"
    arguments: List["TypeAst"]
    bracket_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the GenericArgumentGroupAst.
        s = ""
        s += f"{self.bracket_l_token.print(printer)}{Seq(self.arguments).print(printer, ", ")}{self.bracket_r_token.print(printer)}"
        return s


__all__ = ["GenericArgumentGroupAst"]
