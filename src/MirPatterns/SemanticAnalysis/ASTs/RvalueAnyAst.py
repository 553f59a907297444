from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class RvalueAnyAst(Ast):
    """
    The RvalueAnyAst node is the "_" wildcard, which matches any value: "let from_slice: SliceT = _;".

    Attributes:
        underscore_token: The "_" token.
    """

    underscore_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueAnyAst.
        return self.underscore_token.print(printer)


__all__ = ["RvalueAnyAst"]
