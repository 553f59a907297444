from __future__ import annotations
from dataclasses import dataclass

from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *


@dataclass(frozen=True)
class Ast:
    pos: int

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        raise NotImplementedError(f"{type(self).__name__} cannot be printed.")

    def __str__(self):
        printer = AstPrinter()
        return self.print(printer)


__all__ = ["Ast"]
