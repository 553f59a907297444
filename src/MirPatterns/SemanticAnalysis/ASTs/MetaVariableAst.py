from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class MetaVariableAst(Ast):
    """
    The MetaVariableAst node is a "$Name" placeholder, standing in for a type that the matching engine binds. It is
    referenced by name only.

    Attributes:
        dollar_token: The "$" token.
        identifier: The name of the metavariable, without the "$".
    """

    dollar_token: "TokenAst"
    identifier: "IdentifierAst"

    @property
    def name(self) -> str:
        return self.identifier.value

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the MetaVariableAst.
        s = ""
        s += f"{self.dollar_token.print(printer)}{self.identifier.print(printer)}"
        return s


__all__ = ["MetaVariableAst"]
