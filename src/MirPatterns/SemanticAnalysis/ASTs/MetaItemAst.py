from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class MetaItemAst(Ast):
    """
    The MetaItemAst node declares one metavariable, "$T:ty".

    Attributes:
        variable: The metavariable being declared.
        colon_token: The ":" token.
        kind: The metavariable kind. Only "ty" is supported.
    """

    variable: "MetaVariableAst"
    colon_token: "TokenAst"
    kind: "IdentifierAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the MetaItemAst.
        s = ""
        s += f"{self.variable.print(printer)}{self.colon_token.print(printer)}{self.kind.print(printer)}"
        return s


__all__ = ["MetaItemAst"]
