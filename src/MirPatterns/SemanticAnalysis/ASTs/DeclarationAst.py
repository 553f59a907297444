from MirPatterns.SemanticAnalysis.ASTs import LetDeclAst, TypeDeclAst, UseDeclAst

type DeclarationAst = UseDeclAst | TypeDeclAst | LetDeclAst

__all__ = ["DeclarationAst"]
