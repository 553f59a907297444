from __future__ import annotations

import contextlib
import functools
from typing import Callable, Iterator, List, Optional

from ordered_set import OrderedSet

from MirPatterns.LexicalAnalysis.Tokens import Token, TokenType
from MirPatterns.SyntacticAnalysis.ParserRuleHandler import ParserRuleHandler
from MirPatterns.SyntacticAnalysis.ParserError import ParserError, ParserErrors, furthest_error

from MirPatterns.Utils.ErrorFormatter import ErrorFormatter
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SemanticAnalysis.ASTs import *


# Decorator that wraps the function in a ParserRuleHandler
def parser_rule(func) -> Callable[..., ParserRuleHandler]:
    @functools.wraps(func)
    def wrapper(self, *args) -> ParserRuleHandler:
        return ParserRuleHandler(self, functools.partial(func, self, *args))
    return wrapper


class Parser:
    _tokens: List[Token]
    _index: int
    _err_fmt: ErrorFormatter
    _errors: List[ParserError]
    _meta_vars: Optional[OrderedSet[str]]

    def __init__(self, tokens: List[Token], file_name: str = "<pattern>") -> None:
        self._tokens = tokens
        self._index = 0
        self._err_fmt = ErrorFormatter(self._tokens, file_name)
        self._errors = []
        self._meta_vars = None

    def current_pos(self) -> int:
        # Positions always refer to significant tokens, never to whitespace.
        self._skip_whitespace()
        return self._index

    def current_tok(self) -> Token:
        return self._tokens[self._index]

    def peek_token(self, token_type: TokenType) -> bool:
        return self._tokens[self.current_pos()].token_type == token_type

    def _at_eof(self) -> bool:
        return self.peek_token(TokenType.TkEOF)

    def _peek_characters(self, characters: str) -> bool:
        token = self._tokens[self.current_pos()]
        return token.token_type == TokenType.LxIdentifier and token.token_metadata == characters

    def _skip_whitespace(self) -> None:
        while self._tokens[self._index].token_type in [TokenType.TkNewLine, TokenType.TkWhitespace]:
            self._index += 1

    @contextlib.contextmanager
    def committed(self) -> Iterator[None]:
        # Any error raised in this block is final: no enclosing alternative or optional rule may recover from it.
        try:
            yield
        except ParserError as e:
            e.committed = True
            raise

    def format_error(self, error: ParserError) -> str:
        return self._err_fmt.error(error.pos, message=error.message, tag_message=error.error_type.name.lower())

    # ===== PARSING =====

    def parse(self, rule: str = "mir", *args) -> Ast:
        """
        Parse the whole token stream as the given production, and check that nothing is left over. Any production with
        a parse_<rule> method can be used, which is how fragments such as a single type or place are parsed.
        """

        self._index = 0
        self._errors = []
        self._meta_vars = None
        ast = getattr(self, f"parse_{rule}")(*args).parse_once()

        if not self._at_eof():
            # Leftover input: a speculative attempt that got further than the leftover token explains it better.
            leftover = self.current_pos()
            furthest = furthest_error(self._errors)
            if furthest is not None and furthest.pos > leftover:
                raise furthest
            raise ParserErrors.UNEXPECTED_TOKEN(leftover)

        return ast

    # ===== PATTERN UNITS =====

    @parser_rule
    def parse_mir(self) -> MirAst:
        self._meta_vars = OrderedSet()

        c1 = self.current_pos()
        p1 = self.parse_meta().parse_zero_or_more()
        p2 = self.parse_use_decl().parse_zero_or_more()
        p3 = self.parse_type_decl().parse_zero_or_more()
        p4 = self.parse_let_decl().parse_zero_or_more()
        p5 = self.parse_statement(True).parse_zero_or_more()
        self._check_declaration_order()
        return MirAst(c1, p1, p2, p3, p4, p5)

    def _check_declaration_order(self) -> None:
        # A declaration that stopped the statement list was written after a later section.
        c1 = self.current_pos()
        match self.current_tok().token_type:
            case TokenType.KwUse | TokenType.KwType | TokenType.KwLet:
                raise ParserErrors.DECLARATION_OUT_OF_ORDER(c1, self.current_tok().token_metadata)
            case TokenType.LxIdentifier if self.current_tok().token_metadata == "meta":
                self._index += 1
                is_meta = self.peek_token(TokenType.TkExclamation)
                self._index = c1
                if is_meta:
                    raise ParserErrors.DECLARATION_OUT_OF_ORDER(c1, "meta!")

    # ===== DECLARATIONS =====

    @parser_rule
    def parse_meta(self) -> MetaDeclAst:
        c1 = self.current_pos()
        p1 = self.parse_characters("meta").parse_once()
        p2 = self.parse_token(TokenType.TkExclamation).parse_once()
        with self.committed():
            p3 = self.parse_meta_delimiter().parse_once()
            p4 = self.parse_meta_item().parse_zero_or_more(TokenType.TkComma)
            p5 = self.parse_token(TokenType.TkComma).parse_optional() if p4 else None
            p6 = self.parse_token(_closing_delimiter(p3.token_type)).parse_once()
            p7 = self.parse_token(TokenType.TkSemicolon)
            p7 = p7.parse_optional() if p3.token_type == TokenType.TkBraceL else p7.parse_once()
        return MetaDeclAst(c1, p1, p2, p3, p4, p5, p6, p7)

    @parser_rule
    def parse_meta_delimiter(self) -> TokenAst:
        p1 = self.parse_token(TokenType.TkParenL).for_alt()
        p2 = self.parse_token(TokenType.TkBrackL).for_alt()
        p3 = self.parse_token(TokenType.TkBraceL).for_alt()
        p4 = (p1 | p2 | p3).parse_once()
        return p4

    @parser_rule
    def parse_meta_item(self) -> MetaItemAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkDollar).parse_once()
        p2 = self.parse_identifier().parse_once()
        p3 = self.parse_token(TokenType.TkColon).parse_once()
        p4 = self.parse_identifier().parse_once()

        # Metavariables are only tracked inside a pattern unit.
        if self._meta_vars is not None:
            with self.committed():
                if p4.value != "ty":
                    raise ParserErrors.UNSUPPORTED_METAVARIABLE_KIND(p4.pos, p4.value)
                if p2.value in self._meta_vars:
                    raise ParserErrors.DUPLICATE_METAVARIABLE(c1, p2.value)
            self._meta_vars.add(p2.value)

        return MetaItemAst(c1, MetaVariableAst(c1, p1, p2), p3, p4)

    @parser_rule
    def parse_declaration(self) -> DeclarationAst:
        p1 = self.parse_use_decl().for_alt()
        p2 = self.parse_type_decl().for_alt()
        p3 = self.parse_let_decl().for_alt()
        p4 = (p1 | p2 | p3).parse_once()
        return p4

    @parser_rule
    def parse_use_decl(self) -> UseDeclAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwUse).parse_once()
        with self.committed():
            p2 = self.parse_path().parse_once()
            p3 = self.parse_token(TokenType.TkSemicolon).parse_once()
        return UseDeclAst(c1, p1, p2, p3)

    @parser_rule
    def parse_type_decl(self) -> TypeDeclAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwType).parse_once()
        with self.committed():
            p2 = self.parse_identifier().parse_once()
            if self.peek_token(TokenType.TkLt):
                raise ParserErrors.TYPE_DECLARATION_WITH_GENERICS(self.current_pos())
            p3 = self.parse_token(TokenType.TkAssign).parse_once()
            p4 = self.parse_type().parse_once()
            p5 = self.parse_token(TokenType.TkSemicolon).parse_once()
        return TypeDeclAst(c1, p1, p2, p3, p4, p5)

    @parser_rule
    def parse_let_decl(self) -> LetDeclAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwLet).parse_once()
        with self.committed():
            p2 = self.parse_identifier().parse_once()
            p3 = self.parse_token(TokenType.TkColon).parse_once()
            p4 = self.parse_type().parse_once()
            p5 = self.parse_token(TokenType.TkAssign).parse_optional()
            p6 = self.parse_rvalue_or_call().parse_once() if p5 else None
            p7 = self.parse_token(TokenType.TkSemicolon).parse_once()
        return LetDeclAst(c1, p1, p2, p3, p4, p5, p6, p7)

    # ===== STATEMENTS =====

    @parser_rule
    def parse_statement(self, terminated: bool = True) -> StatementAst:
        p1 = self.parse_loop().for_alt()
        p2 = self.parse_switch_int().for_alt()
        p3 = self.parse_statement_discard(terminated).for_alt()
        p4 = self.parse_statement_drop(terminated).for_alt()
        p5 = self.parse_statement_assign(terminated).for_alt()
        p6 = self.parse_statement_call(terminated).for_alt()
        p7 = (p1 | p2 | p3 | p4 | p5 | p6).parse_once()
        return p7

    @parser_rule
    def parse_statement_discard(self, terminated: bool = True) -> DiscardStatementAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkUnderscore).parse_once()
        p2 = self.parse_token(TokenType.TkAssign).parse_once()
        with self.committed():
            p3 = self.parse_call().parse_once()
            p4 = self.parse_statement_terminator(terminated).parse_once()
        return DiscardStatementAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_statement_drop(self, terminated: bool = True) -> DropStatementAst:
        # Not committed: "drop(move x)" is still a valid call statement.
        c1 = self.current_pos()
        p1 = self.parse_characters("drop").parse_once()
        p2 = self.parse_token(TokenType.TkParenL).parse_once()
        p3 = self.parse_place().parse_once()
        p4 = self.parse_token(TokenType.TkParenR).parse_once()
        p5 = self.parse_statement_terminator(terminated).parse_once()
        return DropStatementAst(c1, p1, p2, p3, p4, p5)

    @parser_rule
    def parse_statement_assign(self, terminated: bool = True) -> AssignStatementAst:
        c1 = self.current_pos()
        p1 = self.parse_place().parse_once()
        p2 = self.parse_token(TokenType.TkAssign).parse_once()
        with self.committed():
            p3 = self.parse_rvalue_or_call().parse_once()
            p4 = self.parse_statement_terminator(terminated).parse_once()
        return AssignStatementAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_statement_call(self, terminated: bool = True) -> CallStatementAst:
        c1 = self.current_pos()
        p1 = self.parse_call().parse_once()
        with self.committed():
            p2 = self.parse_statement_terminator(terminated).parse_once()
        return CallStatementAst(c1, p1, p2)

    @parser_rule
    def parse_statement_terminator(self, terminated: bool) -> Optional[TokenAst]:
        p1 = self.parse_token(TokenType.TkSemicolon).parse_once() if terminated else None
        return p1

    @parser_rule
    def parse_call(self) -> CallAst:
        c1 = self.current_pos()
        p1 = self.parse_type_path().parse_once()
        p2 = self.parse_token(TokenType.TkParenL).parse_once()
        with self.committed():
            p3 = self.parse_operand().parse_zero_or_more(TokenType.TkComma)
            p4 = self.parse_token(TokenType.TkParenR).parse_once()
        return CallAst(c1, p1, p2, p3, p4)

    # ===== CONTROL FLOW =====

    @parser_rule
    def parse_block(self) -> BlockAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBraceL).parse_once()
        p2 = self.parse_statement(True).parse_zero_or_more()
        p3 = self.parse_token(TokenType.TkBraceR).parse_once()
        return BlockAst(c1, p1, p2, p3)

    @parser_rule
    def parse_loop(self) -> LoopAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwLoop).parse_once()
        with self.committed():
            p2 = self.parse_block().parse_once()
        return LoopAst(c1, p1, p2)

    @parser_rule
    def parse_switch_int(self) -> SwitchIntAst:
        c1 = self.current_pos()
        p1 = self.parse_characters("switchInt").parse_once()
        with self.committed():
            p2 = self.parse_token(TokenType.TkParenL).parse_once()
            p3 = self.parse_operand().parse_once()
            p4 = self.parse_token(TokenType.TkParenR).parse_once()
            p5 = self.parse_token(TokenType.TkBraceL).parse_once()
            p6 = self.parse_switch_int_arm().parse_zero_or_more()
            p7 = self.parse_token(TokenType.TkBraceR).parse_once()

            # At most one arm may be the wildcard.
            wildcards = [arm for arm in p6 if arm.is_otherwise]
            if len(wildcards) > 1:
                raise ParserErrors.DUPLICATE_WILDCARD_ARM(wildcards[1].pos)
        return SwitchIntAst(c1, p1, p2, p3, p4, p5, p6, p7)

    @parser_rule
    def parse_switch_int_arm(self) -> SwitchIntArmAst:
        c1 = self.current_pos()
        p1 = self.parse_switch_int_key().parse_once()
        p2 = self.parse_token(TokenType.TkFatArrow).parse_once()
        with self.committed():
            p3 = self.parse_switch_int_body().parse_once()
            p4 = self.parse_token(TokenType.TkComma).parse_optional()

            # Only a brace-terminated body (block, loop or nested switchInt) may be followed directly by the next arm.
            if p4 is None and not isinstance(p3, (BlockAst, LoopAst, SwitchIntAst)) and not self.peek_token(TokenType.TkBraceR):
                raise ParserErrors.EXPECTED_TOKEN(self.current_pos(), TokenType.TkComma.describe(), self._at_eof())
        return SwitchIntArmAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_switch_int_key(self) -> NumberLiteralAst | BooleanLiteralAst | TokenAst:
        p1 = self.parse_token(TokenType.TkUnderscore).for_alt()
        p2 = self.parse_literal_number_signed().for_alt()
        p3 = self.parse_literal_boolean().for_alt()
        p4 = (p1 | p2 | p3).parse_once()
        return p4

    @parser_rule
    def parse_switch_int_body(self) -> BreakAst | BlockAst | StatementAst:
        p1 = self.parse_break().for_alt()
        p2 = self.parse_block().for_alt()
        p3 = self.parse_statement(False).for_alt()
        p4 = (p1 | p2 | p3).parse_once()
        return p4

    @parser_rule
    def parse_break(self) -> BreakAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwBreak).parse_once()
        return BreakAst(c1, p1)

    # ===== RVALUES =====

    @parser_rule
    def parse_rvalue_or_call(self) -> RvalueOrCallAst:
        # "copy" is not reserved, but a leading "copy" always starts an operand, never a callee or struct path.
        if self._peek_characters("copy"):
            p1 = self.parse_rvalue_cast().for_alt()
            p2 = self.parse_operand().and_then(lambda operand: RvalueUseAst(operand.pos, operand)).for_alt()
            p3 = (p1 | p2).parse_once()
            return p3

        p1  = self.parse_rvalue_any().for_alt()
        p2  = self.parse_rvalue_raw_ref().for_alt()
        p3  = self.parse_rvalue_ref().for_alt()
        p4  = self.parse_rvalue_array_repeat().for_alt()
        p5  = self.parse_rvalue_array().for_alt()
        p6  = self.parse_rvalue_tuple().for_alt()
        p7  = self.parse_rvalue_raw_ptr().for_alt()
        p8  = self.parse_rvalue_cast().for_alt()
        p9  = self.parse_call().for_alt()
        p10 = self.parse_rvalue_aggregate().for_alt()
        p11 = self.parse_operand().and_then(lambda operand: RvalueUseAst(operand.pos, operand)).for_alt()
        p12 = (p1 | p2 | p3 | p4 | p5 | p6 | p7 | p8 | p9 | p10 | p11).parse_once()
        return p12

    @parser_rule
    def parse_rvalue_any(self) -> RvalueAnyAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkUnderscore).parse_once()
        return RvalueAnyAst(c1, p1)

    @parser_rule
    def parse_rvalue_raw_ref(self) -> RvalueRawRefAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBorrow).parse_once()
        p2 = self.parse_characters("raw").parse_once()
        p3 = self.parse_mutability().parse_once()
        with self.committed():
            p4 = self.parse_place().parse_once()
        return RvalueRawRefAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_rvalue_ref(self) -> RvalueRefAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBorrow).parse_once()
        with self.committed():
            p2 = self.parse_token(TokenType.KwMut).parse_optional()
            p3 = self.parse_place().parse_once()
        return RvalueRefAst(c1, p1, p2, p3)

    @parser_rule
    def parse_rvalue_array_repeat(self) -> RvalueArrayRepeatAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBrackL).parse_once()
        p2 = self.parse_operand().parse_once()
        p3 = self.parse_token(TokenType.TkSemicolon).parse_once()
        with self.committed():
            p4 = self.parse_literal_number().parse_once()
            p5 = self.parse_token(TokenType.TkBrackR).parse_once()
        return RvalueArrayRepeatAst(c1, p1, p2, p3, p4, p5)

    @parser_rule
    def parse_rvalue_array(self) -> RvalueArrayAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBrackL).parse_once()
        with self.committed():
            p2 = self.parse_operand().parse_zero_or_more(TokenType.TkComma)
            p3 = self.parse_token(TokenType.TkComma).parse_optional() if p2 else None
            p4 = self.parse_token(TokenType.TkBrackR).parse_once()
        return RvalueArrayAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_rvalue_tuple(self) -> RvalueTupleAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkParenL).parse_once()
        with self.committed():
            p2 = self.parse_operand().parse_zero_or_more(TokenType.TkComma)
            p3 = self.parse_token(TokenType.TkComma).parse_optional() if p2 else None
            p4 = self.parse_token(TokenType.TkParenR).parse_once()
        return RvalueTupleAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_rvalue_raw_ptr(self) -> RvalueRawPtrAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkMul).parse_once()
        p2 = self.parse_mutability().parse_once()
        with self.committed():
            p3 = self.parse_type().parse_once()
            p4 = self.parse_characters("from").parse_once()
            p5 = self.parse_token(TokenType.TkParenL).parse_once()
            p6 = self.parse_operand().parse_once()
            p7 = self.parse_token(TokenType.TkComma).parse_once()
            p8 = self.parse_operand().parse_once()
            p9 = self.parse_token(TokenType.TkParenR).parse_once()
        return RvalueRawPtrAst(c1, p1, p2, p3, p4, p5, p6, p7, p8, p9)

    @parser_rule
    def parse_rvalue_cast(self) -> RvalueCastAst:
        c1 = self.current_pos()
        p1 = self.parse_operand().parse_once()
        p2 = self.parse_token(TokenType.KwAs).parse_once()
        with self.committed():
            p3 = self.parse_type().parse_once()
            p4 = self.parse_token(TokenType.TkParenL, "parentheses").parse_once()
            p5 = self.parse_cast_kind().parse_once()
            p6 = self.parse_token(TokenType.TkParenR).parse_once()
        return RvalueCastAst(c1, p1, p2, p3, p4, p5, p6)

    @parser_rule
    def parse_cast_kind(self) -> CastKindAst:
        c1 = self.current_pos()
        p1 = self.parse_identifier().parse_once()
        return CastKindAst(c1, p1)

    @parser_rule
    def parse_rvalue_aggregate(self) -> RvalueAggregateAst:
        c1 = self.current_pos()
        p1 = self.parse_type_path().parse_once()
        p2 = self.parse_token(TokenType.TkBraceL).parse_once()
        with self.committed():
            p3 = self.parse_aggregate_field().parse_zero_or_more(TokenType.TkComma)
            p4 = self.parse_token(TokenType.TkComma).parse_optional() if p3 else None
            p5 = self.parse_token(TokenType.TkBraceR).parse_once()
        return RvalueAggregateAst(c1, p1, p2, p3, p4, p5)

    @parser_rule
    def parse_aggregate_field(self) -> AggregateFieldAst:
        c1 = self.current_pos()
        p1 = self.parse_identifier().parse_once()
        p2 = self.parse_token(TokenType.TkColon).parse_once()
        p3 = self.parse_operand().parse_once()
        return AggregateFieldAst(c1, p1, p2, p3)

    # ===== OPERANDS =====

    @parser_rule
    def parse_operand(self) -> OperandAst:
        p1 = self.parse_operand_copy().for_alt()
        p2 = self.parse_operand_move().for_alt()
        p3 = self.parse_operand_constant().for_alt()
        p4 = self.parse_type_path().for_alt()
        p5 = (p1 | p2 | p3 | p4).parse_once()
        return p5

    @parser_rule
    def parse_operand_copy(self) -> OperandCopyAst:
        c1 = self.current_pos()
        p1 = self.parse_characters("copy").parse_once()
        with self.committed():
            p2 = self.parse_place().parse_once()
        return OperandCopyAst(c1, p1, p2)

    @parser_rule
    def parse_operand_move(self) -> OperandMoveAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwMove).parse_once()
        with self.committed():
            p2 = self.parse_place().parse_once()
        return OperandMoveAst(c1, p1, p2)

    @parser_rule
    def parse_operand_constant(self) -> OperandConstantAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwConst).parse_once()
        with self.committed():
            p2 = self.parse_literal().parse_once()
        return OperandConstantAst(c1, p1, p2)

    # ===== PLACES =====

    @parser_rule
    def parse_place(self) -> PlaceAst:
        p1 = self.parse_place_base().parse_once()
        p2 = self.parse_place_projection().parse_zero_or_more()
        return functools.reduce(lambda place, projection: projection(place.pos, place), p2, p1)

    @parser_rule
    def parse_place_base(self) -> PlaceAst:
        p1 = self.parse_place_paren().for_alt()
        p2 = self.parse_place_deref().for_alt()
        p3 = self.parse_place_local().for_alt()
        p4 = (p1 | p2 | p3).parse_once()
        return p4

    @parser_rule
    def parse_place_paren(self) -> PlaceParenAst | PlaceDowncastAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkParenL).parse_once()
        with self.committed():
            p2 = self.parse_place().parse_once()
            p3 = self.parse_token(TokenType.KwAs).parse_optional()
            p4 = self.parse_identifier().parse_once() if p3 else None
            p5 = self.parse_token(TokenType.TkParenR).parse_once()
        return PlaceDowncastAst(c1, p1, p2, p3, p4, p5) if p3 else PlaceParenAst(c1, p1, p2, p5)

    @parser_rule
    def parse_place_deref(self) -> PlaceDerefAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkMul).parse_once()
        with self.committed():
            p2 = self.parse_place().parse_once()
        return PlaceDerefAst(c1, p1, p2)

    @parser_rule
    def parse_place_local(self) -> PlaceLocalAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwSelf).for_alt()
        p2 = self.parse_identifier().for_alt()
        p3 = (p1 | p2).parse_once()
        return PlaceLocalAst(c1, p3)

    @parser_rule
    def parse_place_projection(self) -> Callable[[int, PlaceAst], PlaceAst]:
        # Projections are returned unapplied, and folded onto the base place by parse_place.
        p1 = self.parse_place_field().for_alt()
        p2 = self.parse_place_bracket().for_alt()
        p3 = (p1 | p2).parse_once()
        return p3

    @parser_rule
    def parse_place_field(self) -> Callable[[int, PlaceAst], PlaceFieldAst]:
        p1 = self.parse_token(TokenType.TkDot).parse_once()
        with self.committed():
            p2 = self.parse_place_field_name().parse_once()
        return functools.partial(PlaceFieldAst, dot_token=p1, field=p2)

    @parser_rule
    def parse_place_field_name(self) -> IdentifierAst | TokenAst:
        # Anything that is neither a name, a keyword nor an index is reported as a missing field name.
        token = self._tokens[self.current_pos()]
        if token.token_type not in [TokenType.LxIdentifier, TokenType.LxDecInteger] and not token.token_type.name.startswith("Kw"):
            raise ParserErrors.EXPECTED_TOKEN(self.current_pos(), TokenType.LxIdentifier.describe(), self._at_eof())

        p1 = self.parse_identifier().for_alt()
        p2 = self.parse_token(TokenType.LxDecInteger).for_alt()
        p3 = (p1 | p2).parse_once()
        return p3

    @parser_rule
    def parse_place_bracket(self) -> Callable[[int, PlaceAst], PlaceAst]:
        p1 = self.parse_token(TokenType.TkBrackL).parse_once()
        with self.committed():
            p2 = self.parse_place_const_index().for_alt()
            p3 = self.parse_place_subslice().for_alt()
            p4 = self.parse_place_index().for_alt()
            p5 = (p2 | p3 | p4).parse_once()
            p6 = self.parse_token(TokenType.TkBrackR).parse_once()
        return functools.partial(p5, bracket_l_token=p1, bracket_r_token=p6)

    @parser_rule
    def parse_place_const_index(self) -> Callable[..., PlaceConstIndexAst]:
        p1 = self.parse_literal_number_signed().parse_once()
        p2 = self.parse_characters("of").parse_once()
        p3 = self.parse_literal_number().parse_once()
        return functools.partial(PlaceConstIndexAst, offset=p1, of_keyword=p2, min_length=p3)

    @parser_rule
    def parse_place_subslice(self) -> Callable[..., PlaceSubsliceAst]:
        p1 = self.parse_literal_number_signed().parse_once()
        p2 = self.parse_token(TokenType.TkColon).parse_once()
        p3 = self.parse_literal_number_signed().parse_once()
        return functools.partial(PlaceSubsliceAst, from_offset=p1, colon_token=p2, to_offset=p3)

    @parser_rule
    def parse_place_index(self) -> Callable[..., PlaceIndexAst]:
        p1 = self.parse_place().parse_once()
        return functools.partial(PlaceIndexAst, index=p1)

    # ===== TYPES =====

    @parser_rule
    def parse_type(self) -> TypeAst:
        p1 = self.parse_type_ptr().for_alt()
        p2 = self.parse_type_ref().for_alt()
        p3 = self.parse_type_array().for_alt()
        p4 = self.parse_type_slice().for_alt()
        p5 = self.parse_type_tuple().for_alt()
        p6 = self.parse_type_path().for_alt()
        p7 = (p1 | p2 | p3 | p4 | p5 | p6).parse_once()
        return p7

    @parser_rule
    def parse_type_ptr(self) -> TypePtrAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkMul).parse_once()
        with self.committed():
            p2 = self.parse_mutability().parse_once()
            p3 = self.parse_type().parse_once()
        return TypePtrAst(c1, p1, p2, p3)

    @parser_rule
    def parse_type_ref(self) -> TypeRefAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBorrow).parse_once()
        with self.committed():
            p2 = self.parse_token(TokenType.KwMut).parse_optional()
            p3 = self.parse_type().parse_once()
        return TypeRefAst(c1, p1, p2, p3)

    @parser_rule
    def parse_type_array(self) -> TypeArrayAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBrackL).parse_once()
        p2 = self.parse_type().parse_once()
        p3 = self.parse_token(TokenType.TkSemicolon).parse_once()
        with self.committed():
            p4 = self.parse_literal_number().parse_once()
            p5 = self.parse_token(TokenType.TkBrackR).parse_once()
        return TypeArrayAst(c1, p1, p2, p3, p4, p5)

    @parser_rule
    def parse_type_slice(self) -> TypeSliceAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkBrackL).parse_once()
        p2 = self.parse_type().parse_once()
        p3 = self.parse_token(TokenType.TkBrackR).parse_once()
        return TypeSliceAst(c1, p1, p2, p3)

    @parser_rule
    def parse_type_tuple(self) -> TypeTupleAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkParenL).parse_once()
        with self.committed():
            p2 = self.parse_type().parse_zero_or_more(TokenType.TkComma)
            p3 = self.parse_token(TokenType.TkComma).parse_optional() if p2 else None
            p4 = self.parse_token(TokenType.TkParenR).parse_once()
        return TypeTupleAst(c1, p1, p2, p3, p4)

    @parser_rule
    def parse_mutability(self) -> TokenAst:
        p1 = self.parse_token(TokenType.KwConst).for_alt()
        p2 = self.parse_token(TokenType.KwMut).for_alt()
        p3 = (p1 | p2).parse_once()
        return p3

    # ===== PATHS =====

    @parser_rule
    def parse_type_path(self) -> TypePathAst:
        p1 = self.parse_qualified_path().for_alt()
        p2 = self.parse_path().for_alt()
        p3 = (p1 | p2).parse_once()
        return p3

    @parser_rule
    def parse_qualified_path(self) -> QualifiedPathAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkLt).parse_once()
        with self.committed():
            p2 = self.parse_type().parse_once()
            p3 = self.parse_token(TokenType.KwAs).parse_optional()
            p4 = self.parse_path().parse_once() if p3 else None
            p5 = self.parse_token(TokenType.TkGt).parse_once()
        p6 = self.parse_qualified_path_segment().parse_zero_or_more()
        return QualifiedPathAst(c1, p1, p2, p3, p4, p5, p6)

    @parser_rule
    def parse_qualified_path_segment(self) -> PathSegmentAst:
        p1 = self.parse_token(TokenType.TkDblColon).parse_once()
        p2 = self.parse_path_segment().parse_once()
        return p2

    @parser_rule
    def parse_path(self) -> PathAst:
        c1 = self.current_pos()
        p1 = self.parse_path_crate().parse_optional()
        p2 = self.parse_path_segment().parse_one_or_more(TokenType.TkDblColon)
        return PathAst(c1, p1, p2)

    @parser_rule
    def parse_path_crate(self) -> PathCrateAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkDollar).parse_once()
        p2 = self.parse_token(TokenType.KwCrate).parse_once()
        with self.committed():
            if not self.peek_token(TokenType.TkDblColon):
                raise ParserErrors.CRATE_WITHOUT_SEPARATOR(self.current_pos())
            p3 = self.parse_token(TokenType.TkDblColon).parse_once()
        return PathCrateAst(c1, p1, p2, p3)

    @parser_rule
    def parse_path_segment(self) -> PathSegmentAst:
        c1 = self.current_pos()
        p1 = self.parse_path_segment_name().parse_once()
        p2 = self.parse_generic_arguments().parse_optional()
        return PathSegmentAst(c1, p1, p2)

    @parser_rule
    def parse_path_segment_name(self) -> IdentifierAst | MetaVariableAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkDollar).parse_optional()
        p2 = self.parse_identifier().parse_once()
        if not p1:
            return p2

        # Inside a pattern unit, every metavariable must have been declared by a "meta!" block.
        if self._meta_vars is not None and p2.value not in self._meta_vars:
            with self.committed():
                raise ParserErrors.UNKNOWN_METAVARIABLE(c1, p2.value)
        return MetaVariableAst(c1, p1, p2)

    @parser_rule
    def parse_generic_arguments(self) -> GenericArgumentGroupAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkLt).parse_once()
        with self.committed():
            p2 = self.parse_type().parse_one_or_more(TokenType.TkComma)
            p3 = self.parse_token(TokenType.TkGt).parse_once()
        return GenericArgumentGroupAst(c1, p1, p2, p3)

    # ===== LITERALS =====

    @parser_rule
    def parse_literal(self) -> LiteralAst:
        p1 = self.parse_literal_number_signed().for_alt()
        p2 = self.parse_literal_boolean().for_alt()
        p3 = (p1 | p2).parse_once()
        return p3

    @parser_rule
    def parse_literal_number(self) -> NumberLiteralAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.LxDecInteger).parse_once()
        return NumberLiteralAst(c1, None, p1)

    @parser_rule
    def parse_literal_number_signed(self) -> NumberLiteralAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.TkSub).parse_optional()
        p2 = self.parse_token(TokenType.LxDecInteger).parse_once()
        return NumberLiteralAst(c1, p1, p2)

    @parser_rule
    def parse_literal_boolean(self) -> BooleanLiteralAst:
        c1 = self.current_pos()
        p1 = self.parse_token(TokenType.KwTrue).for_alt()
        p2 = self.parse_token(TokenType.KwFalse).for_alt()
        p3 = (p1 | p2).parse_once()
        return BooleanLiteralAst(c1, p3)

    # ===== TOKENS, KEYWORDS, & LEXEMES =====

    @parser_rule
    def parse_identifier(self) -> IdentifierAst:
        c1 = self.current_pos()
        token = self.current_tok()
        if token.token_type.name.startswith("Kw"):
            raise ParserErrors.KEYWORD_AS_IDENTIFIER(c1, token.token_metadata)

        p1 = self.parse_token(TokenType.LxIdentifier).parse_once()
        return IdentifierAst(c1, p1.token.token_metadata)

    @parser_rule
    def parse_characters(self, characters: str) -> TokenAst:
        # Contextual words ("copy", "drop", "of", ...) are ordinary identifiers everywhere else.
        c1 = self.current_pos()
        token = self.current_tok()
        if token.token_type != TokenType.LxIdentifier or token.token_metadata != characters:
            raise ParserErrors.EXPECTED_TOKEN(c1, f"`{characters}`", self._at_eof())

        self._index += 1
        return TokenAst(c1, token)

    @parser_rule
    def parse_token(self, token_type: TokenType, description: Optional[str] = None) -> TokenAst:
        c1 = self.current_pos()
        if self.current_tok().token_type != token_type:
            raise ParserErrors.EXPECTED_TOKEN(c1, description or token_type.describe(), self._at_eof())

        r = TokenAst(c1, self.current_tok())
        self._index += 1
        return r


def _closing_delimiter(token_type: TokenType) -> TokenType:
    return {
        TokenType.TkParenL: TokenType.TkParenR,
        TokenType.TkBrackL: TokenType.TkBrackR,
        TokenType.TkBraceL: TokenType.TkBraceR}[token_type]


__all__ = ["Parser", "parser_rule"]
