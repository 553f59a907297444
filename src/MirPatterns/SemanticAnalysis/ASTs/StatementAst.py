from MirPatterns.SemanticAnalysis.ASTs import (
    AssignStatementAst, CallStatementAst, DiscardStatementAst, DropStatementAst, LoopAst, SwitchIntAst)

type StatementAst = LoopAst | SwitchIntAst | DiscardStatementAst | DropStatementAst | AssignStatementAst | CallStatementAst

__all__ = ["StatementAst"]
