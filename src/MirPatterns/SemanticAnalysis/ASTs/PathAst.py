from dataclasses import dataclass
from typing import List, Optional

from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs.Meta.AstPrinter import *
from MirPatterns.Utils.Sequence import Seq


@dataclass(frozen=True)
class PathAst(Ast):
    """
    The PathAst node is a plain path such as "std::mem::take" or "$crate::ffi::sqlite3session_attach". There is always
    at least one segment.

    Attributes:
        crate: The optional "$crate::" marker.
        segments: The path segments, in source order.
    """

    crate: Optional["PathCrateAst"]
    segments: List["PathSegmentAst"]

    @property
    def is_crate_relative(self) -> bool:
        return self.crate is not None

    @property
    def last_segment(self) -> "PathSegmentAst":
        return self.segments[-1]

    @ast_printer_method
    def print(self, printer: AstPrinter) -> str:
        # Print the PathAst.
        s = ""
        s += f"{self.crate.print(printer)}" if self.crate else ""
        s += f"{Seq(self.segments).print(printer, "::")}"
        return s


__all__ = ["PathAst"]
