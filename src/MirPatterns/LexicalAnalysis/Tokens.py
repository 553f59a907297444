from dataclasses import dataclass
from enum import Enum

import json_fix


class TokenType(Enum):
    # Tokens

    # Brackets (PAREN, BRACK, BRACE, ANGLE)
    TkParenL = "("
    TkParenR = ")"
    TkBrackL = "["
    TkBrackR = "]"
    TkBraceL = "{"
    TkBraceR = "}"
    TkLt = "<"
    TkGt = ">"

    # Other symbols
    TkDblColon = "::"
    TkColon = ":"
    TkFatArrow = "=>"
    TkAssign = "="
    TkComma = ","
    TkSemicolon = ";"
    TkDot = "."
    TkMul = "*"
    TkSub = "-"
    TkBorrow = "&"
    TkExclamation = "!"
    TkDollar = "$"
    TkUnderscore = "_"

    TkEOF = "<EOF>"
    TkWhitespace = " "
    TkNewLine = "\n"

    # Keywords
    # Declarations
    KwType = "type"
    KwLet = "let"
    KwUse = "use"

    # Places, operands and types
    KwAs = "as"
    KwConst = "const"
    KwMut = "mut"
    KwMove = "move"
    KwSelf = "self"
    KwCrate = "crate"

    # Control flow
    KwLoop = "loop"
    KwBreak = "break"

    # Literals
    KwTrue = "true"
    KwFalse = "false"

    # Lexemes
    # Don't change the order of these (regex are matched in this order)
    # Comments come first so "//" is never split, and "_0" must be an identifier not TkUnderscore(_) + integer(0)
    LxSingleLineComment = r"//[^\n]*"
    LxMultiLineComment = r"/\*[\s\S]*?\*/"
    LxIdentifier = r"_[A-Za-z0-9_]+|[A-Za-z][A-Za-z0-9_]*"
    LxDecInteger = r"[0-9]([0-9_]*[0-9])?(_?[iu](8|16|32|64|128|size))?"

    # Unknown token to shift error to ErrFmt
    ERR = "Unknown"
    NO_TOK = ""

    def describe(self) -> str:
        # How the token is named in an "expected ..." diagnostic.
        match self:
            case TokenType.LxIdentifier: return "identifier"
            case TokenType.LxDecInteger: return "integer literal"
            case TokenType.TkEOF: return "end of input"
            case _: return f"`{self.value}`"

    def __json__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    token_metadata: str
    token_type: TokenType

    def __str__(self):
        return self.token_metadata


__all__ = ["TokenType", "Token"]
