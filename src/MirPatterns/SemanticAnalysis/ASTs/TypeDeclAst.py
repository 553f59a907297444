from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class TypeDeclAst(Ast):
    """
    The TypeDeclAst node is a type alias local to a pattern, "type SliceT = [$T];". The declared name never carries
    generic parameters.

    Attributes:
        type_keyword: The "type" keyword.
        name: The alias being declared.
        assign_token: The "=" token.
        type: The aliased type.
        semicolon_token: The ";" token.
    """

    type_keyword: "TokenAst"
    name: "IdentifierAst"
    assign_token: "TokenAst"
    type: "TypeAst"
    semicolon_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the TypeDeclAst.
        s = ""
        s += f"{self.type_keyword.print(printer)} {self.name.print(printer)} {self.assign_token.print(printer)} "
        s += f"{self.type.print(printer)}{self.semicolon_token.print(printer)}"
        return s


__all__ = ["TypeDeclAst"]
