from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class TypeRefAst(Ast):
    """
    The TypeRefAst node represents a reference type, "&T" or "&mut T".

    Attributes:
        borrow_token: The "&" token.
        mut_keyword: The optional "mut" keyword.
        type: The referenced type.
    """

    borrow_token: "TokenAst"
    mut_keyword: Optional["TokenAst"]
    type: "TypeAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the TypeRefAst.
        s = ""
        s += f"{self.borrow_token.print(printer)}"
        s += f"{self.mut_keyword.print(printer)} " if self.mut_keyword else ""
        s += f"{self.type.print(printer)}"
        return s


__all__ = ["TypeRefAst"]
