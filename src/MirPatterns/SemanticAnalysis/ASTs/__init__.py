from MirPatterns.SemanticAnalysis.ASTs.TokenAst import *
from MirPatterns.SemanticAnalysis.ASTs.IdentifierAst import *
from MirPatterns.SemanticAnalysis.ASTs.MetaVariableAst import *
from MirPatterns.SemanticAnalysis.ASTs.NumberLiteralAst import *
from MirPatterns.SemanticAnalysis.ASTs.BooleanLiteralAst import *
from MirPatterns.SemanticAnalysis.ASTs.LiteralAst import *
from MirPatterns.SemanticAnalysis.ASTs.GenericArgumentGroupAst import *
from MirPatterns.SemanticAnalysis.ASTs.PathSegmentAst import *
from MirPatterns.SemanticAnalysis.ASTs.PathCrateAst import *
from MirPatterns.SemanticAnalysis.ASTs.PathAst import *
from MirPatterns.SemanticAnalysis.ASTs.QualifiedPathAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypePathAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypePtrAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypeRefAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypeSliceAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypeArrayAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypeTupleAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypeAst import *
from MirPatterns.SemanticAnalysis.ASTs.TypeDeclAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceLocalAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceParenAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceDowncastAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceDerefAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceFieldAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceIndexAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceConstIndexAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceSubsliceAst import *
from MirPatterns.SemanticAnalysis.ASTs.PlaceAst import *
from MirPatterns.SemanticAnalysis.ASTs.OperandCopyAst import *
from MirPatterns.SemanticAnalysis.ASTs.OperandMoveAst import *
from MirPatterns.SemanticAnalysis.ASTs.OperandConstantAst import *
from MirPatterns.SemanticAnalysis.ASTs.OperandAst import *
from MirPatterns.SemanticAnalysis.ASTs.CastKindAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueAnyAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueUseAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueCastAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueRefAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueRawRefAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueArrayRepeatAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueArrayAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueTupleAst import *
from MirPatterns.SemanticAnalysis.ASTs.AggregateFieldAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueAggregateAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueRawPtrAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueAst import *
from MirPatterns.SemanticAnalysis.ASTs.CallAst import *
from MirPatterns.SemanticAnalysis.ASTs.RvalueOrCallAst import *
from MirPatterns.SemanticAnalysis.ASTs.AssignStatementAst import *
from MirPatterns.SemanticAnalysis.ASTs.CallStatementAst import *
from MirPatterns.SemanticAnalysis.ASTs.DropStatementAst import *
from MirPatterns.SemanticAnalysis.ASTs.DiscardStatementAst import *
from MirPatterns.SemanticAnalysis.ASTs.BreakAst import *
from MirPatterns.SemanticAnalysis.ASTs.BlockAst import *
from MirPatterns.SemanticAnalysis.ASTs.SwitchIntArmAst import *
from MirPatterns.SemanticAnalysis.ASTs.SwitchIntAst import *
from MirPatterns.SemanticAnalysis.ASTs.LoopAst import *
from MirPatterns.SemanticAnalysis.ASTs.StatementAst import *
from MirPatterns.SemanticAnalysis.ASTs.MetaItemAst import *
from MirPatterns.SemanticAnalysis.ASTs.MetaDeclAst import *
from MirPatterns.SemanticAnalysis.ASTs.UseDeclAst import *
from MirPatterns.SemanticAnalysis.ASTs.LetDeclAst import *
from MirPatterns.SemanticAnalysis.ASTs.DeclarationAst import *
from MirPatterns.SemanticAnalysis.ASTs.MirAst import *
