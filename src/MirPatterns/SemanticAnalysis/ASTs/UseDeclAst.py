from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class UseDeclAst(Ast):
    """
    The UseDeclAst node imports a path for readability, "use std::ffi::CString;". It has no effect on parsing.

    Attributes:
        use_keyword: The "use" keyword.
        path: The imported path.
        semicolon_token: The ";" token.
    """

    use_keyword: "TokenAst"
    path: "PathAst"
    semicolon_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the UseDeclAst.
        s = ""
        s += f"{self.use_keyword.print(printer)} {self.path.print(printer)}{self.semicolon_token.print(printer)}"
        return s


__all__ = ["UseDeclAst"]
