from dataclasses import dataclass

from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class BooleanLiteralAst(Ast):
    """
    The BooleanLiteralAst node represents a boolean literal, either "true" or "false".

    Attributes:
        value_token: The "true" or "false" keyword token.
    """

    value_token: "TokenAst"

    @property
    def value(self) -> bool:
        return self.value_token.token_type == TokenType.KwTrue

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the BooleanLiteralAst.
        return self.value_token.print(printer)


__all__ = ["BooleanLiteralAst"]
