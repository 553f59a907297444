from dataclasses import dataclass
from typing import List, Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class QualifiedPathAst(Ast):
    """
    The QualifiedPathAst node is a path rooted at an explicit type, "<Type as Trait>::item" or "<Type>::item". The base
    type may itself be a qualified path, so "< <CStr>::from_bytes_with_nul_unchecked>::___rt_impl" nests one inside
    the other.

    Attributes:
        bracket_l_token: The "<" token.
        self_type: The type the path is rooted at.
        as_keyword: The optional "as" keyword, present when a trait is named.
        trait: The optional trait path.
        bracket_r_token: The ">" token.
        segments: The segments following the ">", each preceded by "::".
    """

    bracket_l_token: "TokenAst"
    self_type: "TypeAst"
    as_keyword: Optional["TokenAst"]
    trait: Optional["PathAst"]
    bracket_r_token: "TokenAst"
    segments: List["PathSegmentAst"]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the QualifiedPathAst.
        s = ""
        s += f"{self.bracket_l_token.print(printer)}{self.self_type.print(printer)}"
        s += f" {self.as_keyword.print(printer)} {self.trait.print(printer)}" if self.trait else ""
        s += f"{self.bracket_r_token.print(printer)}"
        s += Seq(self.segments).map(lambda segment: f"::{segment.print(printer)}").join()
        return s


__all__ = ["QualifiedPathAst"]
