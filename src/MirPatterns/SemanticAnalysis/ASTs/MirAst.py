from dataclasses import dataclass
from typing import List

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class MirAst(Ast):
    """
    The MirAst node is a complete pattern unit. Its sections always appear in the same order: metavariable
    declarations, use imports, type declarations, let declarations, then statements. Every section may be empty.

    Attributes:
        metas: The "meta!" declarations.
        uses: The "use" imports.
        type_decls: The "type" declarations.
        let_decls: The "let" declarations.
        statements: The body statements.
    """

    metas: List["MetaDeclAst"]
    uses: List["UseDeclAst"]
    type_decls: List["TypeDeclAst"]
    let_decls: List["LetDeclAst"]
    statements: List["StatementAst"]

    @property
    def meta_variables(self) -> List[str]:
        # The declared metavariable names, in declaration order.
        return Seq(self.metas).flat_map(lambda meta: meta.items).map(lambda item: item.variable.name).unique_items().value

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the MirAst, one declaration or statement per line.
        sections = [self.metas, self.uses, self.type_decls, self.let_decls, self.statements]
        return Seq(sections).filter(bool).map(lambda section: Seq(section).print(printer, "\n")).join("\n")


__all__ = ["MirAst"]
