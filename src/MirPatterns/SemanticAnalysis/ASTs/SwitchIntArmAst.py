from dataclasses import dataclass
from typing import Optional

from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class SwitchIntArmAst(Ast):
    """
    The SwitchIntArmAst node is one arm of a switchInt, "0_isize => _0 = [...]". The "_" key is the otherwise arm.

    Attributes:
        key: The integer literal, boolean literal, or "_" token the discriminant is compared against.
        arrow_token: The "=>" token.
        body: A "break", a block, or a single statement without its ";".
        comma_token: The optional "," following the arm.
    """

    key: "NumberLiteralAst | BooleanLiteralAst | TokenAst"
    arrow_token: "TokenAst"
    body: "BreakAst | BlockAst | StatementAst"
    comma_token: Optional["TokenAst"]

    @property
    def is_otherwise(self) -> bool:
        from MirPatterns.SemanticAnalysis.ASTs import TokenAst
        return isinstance(self.key, TokenAst) and self.key.token_type == TokenType.TkUnderscore

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the SwitchIntArmAst.
        s = ""
        s += f"{self.key.print(printer)} {self.arrow_token.print(printer)} {self.body.print(printer)}"
        s += f"{self.comma_token.print(printer)}" if self.comma_token else ""
        return s


__all__ = ["SwitchIntArmAst"]
