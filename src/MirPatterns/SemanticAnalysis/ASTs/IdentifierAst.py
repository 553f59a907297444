from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class IdentifierAst(Ast):
    """
    The IdentifierAst node represents an identifier: a local, a path segment, a field, a cast kind or a declared name.
    Keywords are never identifiers.

    Attributes:
        value: The value of the identifier.
    """

    value: str

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the IdentifierAst.
        s = ""
        s += f"{self.value}"
        return s

    def __json__(self) -> str:
        # Return the value of the identifier.
        return self.value


__all__ = ["IdentifierAst"]
