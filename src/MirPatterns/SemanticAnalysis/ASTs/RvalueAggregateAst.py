from dataclasses import dataclass
from typing import List, Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class RvalueAggregateAst(Ast):
    """
    The RvalueAggregateAst node builds a struct from named fields, "Test { x: const 0 }".

    Attributes:
        path: The struct path.
        brace_l_token: The "{" token.
        fields: The named field initializers, in source order.
        trailing_comma: The optional "," after the last field.
        brace_r_token: The "}" token.
    """

    path: "TypePathAst"
    brace_l_token: "TokenAst"
    fields: List["AggregateFieldAst"]
    trailing_comma: Optional["TokenAst"]
    brace_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueAggregateAst.
        s = ""
        s += f"{self.path.print(printer)} {self.brace_l_token.print(printer)}"
        s += f" {Seq(self.fields).print(printer, ", ")}" if self.fields else ""
        s += f"{self.trailing_comma.print(printer)}" if self.trailing_comma else ""
        s += f" {self.brace_r_token.print(printer)}"
        return s


__all__ = ["RvalueAggregateAst"]
