from dataclasses import dataclass

from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class RvalueRawRefAst(Ast):
    """
    The RvalueRawRefAst node takes a raw pointer to a place without going through a reference, "&raw const *x".

    Attributes:
        borrow_token: The "&" token.
        raw_keyword: The "raw" word.
        mutability_keyword: The "const" or "mut" keyword.
        place: The place being pointed to.
    """

    borrow_token: "TokenAst"
    raw_keyword: "TokenAst"
    mutability_keyword: "TokenAst"
    place: "PlaceAst"

    @property
    def is_mutable(self) -> bool:
        return self.mutability_keyword.token_type == TokenType.KwMut

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueRawRefAst.
        s = ""
        s += f"{self.borrow_token.print(printer)}{self.raw_keyword.print(printer)} {self.mutability_keyword.print(printer)} "
        s += f"{self.place.print(printer)}"
        return s


__all__ = ["RvalueRawRefAst"]
