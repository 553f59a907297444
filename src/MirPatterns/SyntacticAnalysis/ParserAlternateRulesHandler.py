from __future__ import annotations
from typing import List, TYPE_CHECKING

from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SyntacticAnalysis.ParserError import ParserError, ParserErrors, furthest_error
from MirPatterns.SyntacticAnalysis.ParserRuleHandler import ParserRuleHandler

if TYPE_CHECKING:
    from MirPatterns.SyntacticAnalysis.Parser import Parser


class ParserAlternateRulesHandler[T](ParserRuleHandler[T]):
    """
    Tries a list of rules in order, and returns the result of the first one that matches. Each failed alternative
    rewinds the parser to where the alternation started. A committed error stops the search immediately.
    """

    _parser_rule_handlers: List[ParserRuleHandler]

    def __init__(self, parser: Parser) -> None:
        super().__init__(parser, None)
        self._rule = self._parse_alternatives
        self._parser_rule_handlers = []

    def add_parser_rule_handler(self, parser_rule_handler: ParserRuleHandler) -> ParserAlternateRulesHandler:
        self._parser_rule_handlers.append(parser_rule_handler)
        return self

    def _parse_alternatives(self) -> T:
        start = self._parser.current_pos()
        failures = []

        for parser_rule_handler in self._parser_rule_handlers:
            try:
                return parser_rule_handler._rule()
            except ParserError as e:
                if e.committed: raise
                self._parser._index = start
                self._parser._errors.append(e)
                failures.append(e)

        raise self._select_error(start, failures)

    def _select_error(self, start: int, failures: List[ParserError]) -> ParserError:
        # The alternative that got furthest knows best what went wrong.
        furthest = furthest_error(failures)
        if furthest.pos > start:
            return furthest

        # Nothing got past the first token. A keyword used as a name, or an unsupported construct, is still more
        # specific than a generic mismatch.
        if furthest.is_specific:
            return furthest

        if self._parser._tokens[start].token_type == TokenType.TkEOF:
            return ParserErrors.UNEXPECTED_EOF(start)
        return ParserErrors.UNEXPECTED_TOKEN(start)

    def __or__(self, that: ParserRuleHandler) -> ParserAlternateRulesHandler:
        if not (self._for_alternate and that._for_alternate):
            raise TypeError("Cannot use '|' operator on a non-alternate rule.")
        return self.add_parser_rule_handler(that)


__all__ = ["ParserAlternateRulesHandler"]
