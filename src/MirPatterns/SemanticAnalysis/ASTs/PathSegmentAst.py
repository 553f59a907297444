from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PathSegmentAst(Ast):
    """
    The PathSegmentAst node is one "::"-separated element of a path. The name is either an identifier or a type
    metavariable, and the keyword "crate" is never accepted here.

    Attributes:
        identifier: The segment name.
        generic_arguments: The optional "<...>" arguments.
    """

    identifier: "IdentifierAst | MetaVariableAst"
    generic_arguments: Optional["GenericArgumentGroupAst"]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PathSegmentAst.
        s = ""
        s += f"{self.identifier.print(printer)}"
        s += f"{self.generic_arguments.print(printer)}" if self.generic_arguments else ""
        return s


__all__ = ["PathSegmentAst"]
