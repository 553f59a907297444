from MirPatterns.SemanticAnalysis.ASTs import PathAst, QualifiedPathAst

type TypePathAst = QualifiedPathAst | PathAst

__all__ = ["TypePathAst"]
