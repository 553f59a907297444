from MirPatterns.LexicalAnalysis.Lexer import Lexer
from MirPatterns.LexicalAnalysis.Tokens import TokenType

from conftest import significant_tokens


def test_lex_adds_leading_newline_and_eof():
    tokens = Lexer("x").lex()
    assert tokens[0].token_type == TokenType.TkNewLine
    assert tokens[-1].token_type == TokenType.TkEOF
    assert [t.token_type for t in tokens[1:-1]] == [TokenType.LxIdentifier]


def test_lex_keeps_whitespace_tokens():
    tokens = Lexer("a b\nc").lex()
    assert [t.token_type for t in tokens[1:-1]] == [
        TokenType.LxIdentifier, TokenType.TkWhitespace, TokenType.LxIdentifier, TokenType.TkNewLine,
        TokenType.LxIdentifier]


def test_lex_let_declaration():
    assert significant_tokens("let x: u32 = const 0_usize;") == [
        (TokenType.KwLet, "let"),
        (TokenType.LxIdentifier, "x"),
        (TokenType.TkColon, ":"),
        (TokenType.LxIdentifier, "u32"),
        (TokenType.TkAssign, "="),
        (TokenType.KwConst, "const"),
        (TokenType.LxDecInteger, "0_usize"),
        (TokenType.TkSemicolon, ";")]


def test_lex_keywords_need_an_identifier_boundary():
    assert significant_tokens("letter self_ as_ptr crate") == [
        (TokenType.LxIdentifier, "letter"),
        (TokenType.LxIdentifier, "self_"),
        (TokenType.LxIdentifier, "as_ptr"),
        (TokenType.KwCrate, "crate")]


def test_lex_underscore_and_underscore_identifiers():
    assert significant_tokens("_ = _0 ___rt_impl") == [
        (TokenType.TkUnderscore, "_"),
        (TokenType.TkAssign, "="),
        (TokenType.LxIdentifier, "_0"),
        (TokenType.LxIdentifier, "___rt_impl")]


def test_lex_prefers_longest_symbols():
    assert [t for t, _ in significant_tokens("a::b: c => d = e")] == [
        TokenType.LxIdentifier, TokenType.TkDblColon, TokenType.LxIdentifier, TokenType.TkColon,
        TokenType.LxIdentifier, TokenType.TkFatArrow, TokenType.LxIdentifier, TokenType.TkAssign,
        TokenType.LxIdentifier]


def test_lex_numbers_in_projections():
    assert significant_tokens("x.0.1[1:-3]") == [
        (TokenType.LxIdentifier, "x"),
        (TokenType.TkDot, "."),
        (TokenType.LxDecInteger, "0"),
        (TokenType.TkDot, "."),
        (TokenType.LxDecInteger, "1"),
        (TokenType.TkBrackL, "["),
        (TokenType.LxDecInteger, "1"),
        (TokenType.TkColon, ":"),
        (TokenType.TkSub, "-"),
        (TokenType.LxDecInteger, "3"),
        (TokenType.TkBrackR, "]")]


def test_lex_integer_suffixes():
    assert significant_tokens("0_isize 3_u32 1_000 7i64") == [
        (TokenType.LxDecInteger, "0_isize"),
        (TokenType.LxDecInteger, "3_u32"),
        (TokenType.LxDecInteger, "1_000"),
        (TokenType.LxDecInteger, "7i64")]


def test_lex_discards_comments():
    code = "x // a comment\n/* a\nblock */ y"
    assert significant_tokens(code) == [(TokenType.LxIdentifier, "x"), (TokenType.LxIdentifier, "y")]


def test_lex_unknown_character_is_an_error_token():
    assert significant_tokens("x @ y") == [
        (TokenType.LxIdentifier, "x"),
        (TokenType.ERR, "@"),
        (TokenType.LxIdentifier, "y")]


def test_lex_eof_text_is_not_an_eof_token():
    tokens = Lexer("<EOF>").lex()
    assert [t.token_type for t in tokens].count(TokenType.TkEOF) == 1


def test_lex_block_comment_keeps_newlines():
    newlines = [t for t in Lexer("x /* a\nb\n */ y").lex() if t.token_type == TokenType.TkNewLine]
    assert len(newlines) == 3
