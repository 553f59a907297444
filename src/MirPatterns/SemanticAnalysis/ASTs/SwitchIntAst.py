from dataclasses import dataclass
from typing import List

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class SwitchIntAst(Ast):
    """
    The SwitchIntAst node branches on an integer or boolean discriminant, "switchInt(move cmp) { false => break, ... }".

    Attributes:
        switch_keyword: The "switchInt" word.
        paren_l_token: The "(" token.
        discriminant: The operand being switched on.
        paren_r_token: The ")" token.
        brace_l_token: The "{" token.
        arms: The arms, in source order.
        brace_r_token: The "}" token.
    """

    switch_keyword: "TokenAst"
    paren_l_token: "TokenAst"
    discriminant: "OperandAst"
    paren_r_token: "TokenAst"
    brace_l_token: "TokenAst"
    arms: List["SwitchIntArmAst"]
    brace_r_token: "TokenAst"

    @ast_printer_method_indent
    def print(self, printer: AstPrinter) -> str:
        # Print the SwitchIntAst, with one arm per line.
        s = ""
        s += f"{self.switch_keyword.print(printer)}{self.paren_l_token.print(printer)}{self.discriminant.print(printer)}"
        s += f"{self.paren_r_token.print(printer)} {self.brace_l_token.print(printer)}"
        s += f"\n{Seq(self.arms).print(printer, "\n")}\n" if self.arms else ""
        s += f"{self.brace_r_token.print(printer)}"
        return s


__all__ = ["SwitchIntAst"]
