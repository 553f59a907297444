from MirPatterns.SemanticAnalysis.ASTs import (
    TypeArrayAst, TypePathAst, TypePtrAst, TypeRefAst, TypeSliceAst, TypeTupleAst)

type TypeAst = TypePtrAst | TypeRefAst | TypeArrayAst | TypeSliceAst | TypeTupleAst | TypePathAst

__all__ = ["TypeAst"]
