from __future__ import annotations
from typing import Callable, List, Optional, TYPE_CHECKING

from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SyntacticAnalysis.ParserError import ParserError

if TYPE_CHECKING:
    from MirPatterns.SyntacticAnalysis.Parser import Parser
    from MirPatterns.SyntacticAnalysis.ParserAlternateRulesHandler import ParserAlternateRulesHandler


class ParserRuleHandler[T]:
    ParserRule = Callable[[], T]

    _rule: ParserRule
    _parser: Parser
    _for_alternate: bool
    _result: Optional[T]

    def __init__(self, parser: Parser, rule: Optional[ParserRule]) -> None:
        self._parser = parser
        self._rule = rule
        self._for_alternate = False
        self._result = None

    def parse_once(self) -> T:
        self._result = self._rule()
        return self._result

    def parse_optional(self, save=True) -> Optional[T]:
        # A committed error is never swallowed; anything else rewinds the parser and is kept for diagnostics.
        parser_index = self._parser._index
        try:
            ast = self._rule()
            if save: self._result = ast
            return ast
        except ParserError as e:
            if e.committed: raise
            self._parser._index = parser_index
            self._parser._errors.append(e)
            return None

    def parse_zero_or_more(self, sep: TokenType = None) -> List[T]:
        # A separator is only consumed if another item follows it, so trailing separators are left for the caller.
        self._result = []
        parser_index = self._parser._index
        while (ast := self.parse_optional(save=False)) is not None:
            self._result.append(ast)
            parser_index = self._parser._index
            if sep and self._parser.parse_token(sep).parse_optional() is None:
                break
        self._parser._index = parser_index
        return self._result

    def parse_one_or_more(self, sep: TokenType = None) -> List[T]:
        # The first item is mandatory, so its own error is the one reported.
        first = self._rule()
        parser_index = self._parser._index
        if sep and self._parser.parse_token(sep).parse_optional() is None:
            self._result = [first]
            return self._result
        rest = self.parse_zero_or_more(sep)
        if not rest:
            self._parser._index = parser_index
        self._result = [first] + rest
        return self._result

    def for_alt(self) -> ParserRuleHandler:
        self._for_alternate = True
        return self

    def and_then(self, wrapper_function) -> ParserRuleHandler:
        new_parser_rule_handler = ParserRuleHandler(self._parser, self._rule)
        new_parser_rule_handler._rule = lambda: wrapper_function(self._rule())
        return new_parser_rule_handler

    def __or__(self, that: ParserRuleHandler) -> ParserAlternateRulesHandler:
        from MirPatterns.SyntacticAnalysis.ParserAlternateRulesHandler import ParserAlternateRulesHandler

        if not (self._for_alternate and that._for_alternate):
            raise TypeError("Cannot use '|' operator on a non-alternate rule.")

        return (ParserAlternateRulesHandler(self._parser).for_alt()
                .add_parser_rule_handler(self)
                .add_parser_rule_handler(that))


__all__ = ["ParserRuleHandler"]
