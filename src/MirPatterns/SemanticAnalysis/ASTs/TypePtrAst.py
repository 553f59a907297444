from dataclasses import dataclass

from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class TypePtrAst(Ast):
    """
    The TypePtrAst node represents a raw pointer type, "*const T" or "*mut T".

    Attributes:
        star_token: The "*" token.
        mutability_keyword: The "const" or "mut" keyword.
        type: The pointee type.
    """

    star_token: "TokenAst"
    mutability_keyword: "TokenAst"
    type: "TypeAst"

    @property
    def is_mutable(self) -> bool:
        return self.mutability_keyword.token_type == TokenType.KwMut

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the TypePtrAst.
        s = ""
        s += f"{self.star_token.print(printer)}{self.mutability_keyword.print(printer)} {self.type.print(printer)}"
        return s


__all__ = ["TypePtrAst"]
