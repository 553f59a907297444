from dataclasses import dataclass
from typing import Optional

from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstMixins import PlaceProjections
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceFieldAst(Ast, PlaceProjections):
    """
    The PlaceFieldAst node projects a field out of a place, either by name ("x.mem") or by position ("x.0").

    Attributes:
        place: The projected place.
        dot_token: The "." token.
        field: The IdentifierAst of a named field, or the TokenAst of a positional one.
    """

    place: "PlaceAst"
    dot_token: "TokenAst"
    field: "IdentifierAst | TokenAst"

    @property
    def index(self) -> Optional[int]:
        from MirPatterns.SemanticAnalysis.ASTs import TokenAst
        if isinstance(self.field, TokenAst) and self.field.token_type == TokenType.LxDecInteger:
            return int(self.field.token.token_metadata.replace("_", ""))
        return None

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceFieldAst.
        s = ""
        s += f"{self.place.print(printer)}{self.dot_token.print(printer)}{self.field.print(printer)}"
        return s


__all__ = ["PlaceFieldAst"]
