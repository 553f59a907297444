from __future__ import annotations
from dataclasses import dataclass
from typing import List

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceLocalAst(Ast):
    """
    The PlaceLocalAst node is the root of every place: a local variable, or the "self" keyword.

    Attributes:
        identifier: The IdentifierAst of the local, or the TokenAst of the "self" keyword.
    """

    identifier: "IdentifierAst | TokenAst"

    @property
    def name(self) -> str:
        return str(self.identifier)

    def local(self) -> PlaceLocalAst:
        return self

    def projections(self) -> List["PlaceAst"]:
        return []

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceLocalAst.
        return self.identifier.print(printer)


__all__ = ["PlaceLocalAst"]
