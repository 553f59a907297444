from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstMixins import PlaceProjections
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class PlaceConstIndexAst(Ast, PlaceProjections):
    """
    The PlaceConstIndexAst node indexes a place at a constant offset, "x[2 of 3]", with the minimum length the place
    is known to have. A negative offset counts from the end: "x[-3 of 4]".

    Attributes:
        place: The indexed place.
        bracket_l_token: The "[" token.
        offset: The signed offset, kept exactly as written.
        of_keyword: The "of" word.
        min_length: The minimum length.
        bracket_r_token: The "]" token.
    """

    place: "PlaceAst"
    bracket_l_token: "TokenAst"
    offset: "NumberLiteralAst"
    of_keyword: "TokenAst"
    min_length: "NumberLiteralAst"
    bracket_r_token: "TokenAst"

    @property
    def from_end(self) -> bool:
        return self.offset.sign is not None

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PlaceConstIndexAst.
        s = ""
        s += f"{self.place.print(printer)}{self.bracket_l_token.print(printer)}{self.offset.print(printer)} "
        s += f"{self.of_keyword.print(printer)} {self.min_length.print(printer)}{self.bracket_r_token.print(printer)}"
        return s


__all__ = ["PlaceConstIndexAst"]
