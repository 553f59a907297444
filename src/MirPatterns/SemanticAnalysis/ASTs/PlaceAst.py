from MirPatterns.SemanticAnalysis.ASTs import (
    PlaceConstIndexAst, PlaceDerefAst, PlaceDowncastAst, PlaceFieldAst, PlaceIndexAst, PlaceLocalAst, PlaceParenAst,
    PlaceSubsliceAst)

type PlaceAst = PlaceLocalAst | PlaceParenAst | PlaceDowncastAst | PlaceDerefAst | PlaceFieldAst | PlaceIndexAst | PlaceConstIndexAst | PlaceSubsliceAst

__all__ = ["PlaceAst"]
