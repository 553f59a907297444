from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class RvalueRawPtrAst(Ast):
    """
    The RvalueRawPtrAst node assembles a (possibly wide) raw pointer from a data pointer and its metadata,
    "*const [i32] from (ptr, meta)".

    Attributes:
        star_token: The "*" token.
        mutability_keyword: The "const" or "mut" keyword.
        type: The pointee type.
        from_keyword: The "from" word.
        paren_l_token: The "(" token.
        data: The data pointer operand.
        comma_token: The "," token.
        meta: The metadata operand.
        paren_r_token: The ")" token.
    """

    star_token: "TokenAst"
    mutability_keyword: "TokenAst"
    type: "TypeAst"
    from_keyword: "TokenAst"
    paren_l_token: "TokenAst"
    data: "OperandAst"
    comma_token: "TokenAst"
    meta: "OperandAst"
    paren_r_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the RvalueRawPtrAst.
        s = ""
        s += f"{self.star_token.print(printer)}{self.mutability_keyword.print(printer)} {self.type.print(printer)} "
        s += f"{self.from_keyword.print(printer)} {self.paren_l_token.print(printer)}{self.data.print(printer)}"
        s += f"{self.comma_token.print(printer)} {self.meta.print(printer)}{self.paren_r_token.print(printer)}"
        return s


__all__ = ["RvalueRawPtrAst"]
