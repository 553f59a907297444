from MirPatterns.SemanticAnalysis.ASTs import CallAst, RvalueAst

type RvalueOrCallAst = RvalueAst | CallAst

__all__ = ["RvalueOrCallAst"]
