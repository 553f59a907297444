from MirPatterns.SemanticAnalysis.ASTs import (
    RvalueAggregateAst, RvalueAnyAst, RvalueArrayAst, RvalueArrayRepeatAst, RvalueCastAst, RvalueRawPtrAst,
    RvalueRawRefAst, RvalueRefAst, RvalueTupleAst, RvalueUseAst)

type RvalueAst = RvalueAnyAst | RvalueUseAst | RvalueCastAst | RvalueRefAst | RvalueRawRefAst | RvalueArrayRepeatAst | RvalueArrayAst | RvalueTupleAst | RvalueAggregateAst | RvalueRawPtrAst

__all__ = ["RvalueAst"]
