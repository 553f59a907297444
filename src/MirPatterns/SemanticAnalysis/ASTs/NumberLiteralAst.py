import re
from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *

_SUFFIX = re.compile(r"_?([iu](8|16|32|64|128|size))$")


@dataclass(frozen=True)
class NumberLiteralAst(Ast):
    """
    The NumberLiteralAst node represents a decimal integer, optionally negative and optionally suffixed with its integer
    type ("0_usize", "-3", "3_u32"). The source text is kept verbatim, so "0_usize" prints back as "0_usize".

    Attributes:
        sign: The optional "-" token.
        integer: The integer token, including any "_" separators and the type suffix.
    """

    sign: Optional["TokenAst"]
    integer: "TokenAst"

    @property
    def suffix(self) -> Optional[str]:
        matched = _SUFFIX.search(self.integer.token.token_metadata)
        return matched.group(1) if matched else None

    @property
    def value(self) -> int:
        digits = _SUFFIX.sub("", self.integer.token.token_metadata).replace("_", "")
        return -int(digits) if self.sign else int(digits)

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the NumberLiteralAst.
        s = ""
        s += f"{self.sign.print(printer)}" if self.sign else ""
        s += f"{self.integer.print(printer)}"
        return s


__all__ = ["NumberLiteralAst"]
