from MirPatterns.SemanticAnalysis.ASTs import OperandConstantAst, OperandCopyAst, OperandMoveAst, TypePathAst

type OperandAst = OperandCopyAst | OperandMoveAst | OperandConstantAst | TypePathAst

__all__ = ["OperandAst"]
