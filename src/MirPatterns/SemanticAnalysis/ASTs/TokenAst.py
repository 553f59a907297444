from __future__ import annotations
from dataclasses import dataclass

from MirPatterns.LexicalAnalysis.Tokens import Token, TokenType
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class TokenAst(Ast):
    """
    The TokenAst node represents a single token, which has been parsed by the parser. It is one of the lowest level ASTs
    alongside the IdentifierAst and the literal ASTs. Contextual words such as "copy" or "switchInt" are stored as
    TokenAsts wrapping an identifier token.

    Attributes:
        token: The Token instance that was parsed.
    """

    token: Token

    @property
    def token_type(self) -> TokenType:
        return self.token.token_type

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the token metadata only; the enclosing AST is responsible for the spacing.
        return self.token.token_metadata


__all__ = ["TokenAst"]
