from MirPatterns.SemanticAnalysis.ASTs import BooleanLiteralAst, NumberLiteralAst

type LiteralAst = BooleanLiteralAst | NumberLiteralAst

__all__ = ["LiteralAst"]
