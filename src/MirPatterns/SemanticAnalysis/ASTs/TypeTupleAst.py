from dataclasses import dataclass
from typing import List, Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class TypeTupleAst(Ast):
    """
    The TypeTupleAst node represents a tuple type, "(A, B)". The unit type is the empty tuple "()", and a single element
    tuple keeps its trailing comma, "(A,)".

    Attributes:
        paren_l_token: The "(" token.
        types: The element types.
        trailing_comma: The optional "," after the last element.
        paren_r_token: The ")" token.
    """

    paren_l_token: "TokenAst"
    types: List["TypeAst"]
    trailing_comma: Optional["TokenAst"]
    paren_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the TypeTupleAst.
        s = ""
        s += f"{self.paren_l_token.print(printer)}{Seq(self.types).print(printer, ", ")}"
        s += f"{self.trailing_comma.print(printer)}" if self.trailing_comma else ""
        s += f"{self.paren_r_token.print(printer)}"
        return s


__all__ = ["TypeTupleAst"]
