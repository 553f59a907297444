from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PathCrateAst(Ast):
    """
    The PathCrateAst node is the "$crate::" marker that makes a path relative to the crate defining the pattern.

    Attributes:
        dollar_token: The "$" token.
        crate_keyword: The "crate" keyword.
        separator_token: The "::" that must follow.
    """

    dollar_token: "TokenAst"
    crate_keyword: "TokenAst"
    separator_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PathCrateAst.
        s = ""
        s += f"{self.dollar_token.print(printer)}{self.crate_keyword.print(printer)}{self.separator_token.print(printer)}"
        return s


__all__ = ["PathCrateAst"]
