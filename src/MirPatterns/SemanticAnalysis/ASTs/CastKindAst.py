from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class CastKindAst(Ast):
    """
    The CastKindAst node names the kind of a cast, such as "PtrToPtr" or "IntToInt". Any identifier is accepted; the
    matching engine decides what it means.

    Attributes:
        identifier: The cast kind name.
    """

    identifier: "IdentifierAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the CastKindAst.
        return self.identifier.print(printer)


__all__ = ["CastKindAst"]
