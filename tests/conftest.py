from typing import List, Tuple

import pytest

from MirPatterns.Compiler.Compiler import lex_pattern, parse_pattern
from MirPatterns.LexicalAnalysis.Tokens import TokenType
from MirPatterns.SyntacticAnalysis.ParserError import ParserError

_IGNORED = [TokenType.TkWhitespace, TokenType.TkNewLine, TokenType.TkEOF]


def significant_tokens(code: str) -> List[Tuple[TokenType, str]]:
    return [(t.token_type, t.token_metadata) for t in lex_pattern(code) if t.token_type not in _IGNORED]


def assert_round_trip(rule: str, code: str, *args):
    # Printing the tree must give back the same tokens as the source, whatever the whitespace.
    ast = parse_pattern(code, rule, *args)
    printed = str(ast)
    assert significant_tokens(printed) == significant_tokens(code), printed
    return ast


def assert_fails(rule: str, code: str, message: str, *args) -> ParserError:
    with pytest.raises(ParserError) as e:
        parse_pattern(code, rule, *args)
    assert str(e.value) == message
    return e.value
