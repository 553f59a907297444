from dataclasses import dataclass
from typing import Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class LetDeclAst(Ast):
    """
    The LetDeclAst node declares a pattern local with its type, and optionally the value it is initialized with:
    "let s: i32;" or "let to_len: usize = Mul(from_len, ty_size);".

    Attributes:
        let_keyword: The "let" keyword.
        name: The declared local.
        colon_token: The ":" token.
        type: The type of the local.
        assign_token: The optional "=" token.
        value: The optional initializer.
        semicolon_token: The ";" token.
    """

    let_keyword: "TokenAst"
    name: "IdentifierAst"
    colon_token: "TokenAst"
    type: "TypeAst"
    assign_token: Optional["TokenAst"]
    value: Optional["RvalueOrCallAst"]
    semicolon_token: "TokenAst"

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the LetDeclAst.
        s = ""
        s += f"{self.let_keyword.print(printer)} {self.name.print(printer)}{self.colon_token.print(printer)} {self.type.print(printer)}"
        s += f" {self.assign_token.print(printer)} {self.value.print(printer)}" if self.value else ""
        s += f"{self.semicolon_token.print(printer)}"
        return s


__all__ = ["LetDeclAst"]
