from dataclasses import dataclass
from typing import List, Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class MetaDeclAst(Ast):
    """
    The MetaDeclAst node declares the metavariables of a pattern: "meta!($T:ty);", "meta![$T:ty, $U:ty];" or
    "meta! { $T:ty }". The trailing ";" is required after parentheses and brackets, and optional after braces.

    Attributes:
        meta_keyword: The "meta" word.
        exclamation_token: The "!" token.
        delimiter_l_token: The opening "(", "[" or "{".
        items: The declared metavariables.
        trailing_comma: The optional "," after the last item.
        delimiter_r_token: The matching closing delimiter.
        semicolon_token: The optional ";".
    """

    meta_keyword: "TokenAst"
    exclamation_token: "TokenAst"
    delimiter_l_token: "TokenAst"
    items: List["MetaItemAst"]
    trailing_comma: Optional["TokenAst"]
    delimiter_r_token: "TokenAst"
    semicolon_token: Optional["TokenAst"]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the MetaDeclAst.
        s = ""
        s += f"{self.meta_keyword.print(printer)}{self.exclamation_token.print(printer)}{self.delimiter_l_token.print(printer)}"
        s += f"{Seq(self.items).print(printer, ", ")}"
        s += f"{self.trailing_comma.print(printer)}" if self.trailing_comma else ""
        s += f"{self.delimiter_r_token.print(printer)}"
        s += f"{self.semicolon_token.print(printer)}" if self.semicolon_token else ""
        return s


__all__ = ["MetaDeclAst"]
