import re
from typing import List

from MirPatterns.LexicalAnalysis.Tokens import Token, TokenType


class Lexer:
    _code: str

    def __init__(self, code: str) -> None:
        self._code = code.replace("\r\n", "\n").replace("\t", "    ")

    def lex(self) -> List[Token]:
        current = 0
        output = []

        tokens   = [t for t in TokenType.__members__ if t.startswith("Tk") and t != "TkEOF"]
        keywords = [t for t in TokenType.__members__ if t.startswith("Kw")]
        lexemes  = [t for t in TokenType.__members__ if t.startswith("Lx")]

        tokens.sort(key=lambda t: len(TokenType[t].value), reverse=True)
        keywords.sort(key=lambda t: len(TokenType[t].value), reverse=True)
        patterns = {t: re.compile(TokenType[t].value) for t in lexemes}

        available_tokens = keywords + lexemes + tokens

        while current < len(self._code):
            for token in available_tokens:
                value = TokenType[token].value
                upper = current + len(value)

                # Keywords: Match the keyword, and check that the next character can't continue an identifier.
                if token.startswith("Kw") and self._code[current:upper] == value and not _continues_identifier(self._code[upper:upper + 1]):
                    output.append(Token(value, TokenType[token]))
                    current = upper
                    break

                # Lexemes: Match a lexeme by attempting to get a regex match against the current code. Discard comments,
                # but keep the newlines inside them so line numbers in diagnostics stay correct.
                elif token.startswith("Lx") and (matched := patterns[token].match(self._code, current)):
                    if TokenType[token] not in [TokenType.LxSingleLineComment, TokenType.LxMultiLineComment]:
                        output.append(Token(matched.group(0), TokenType[token]))
                    else:
                        output.extend(Token("\n", TokenType.TkNewLine) for _ in range(matched.group(0).count("\n")))
                    current = matched.end()
                    break

                # Tokens: Match the token and increment the counter by the length of the token.
                elif token.startswith("Tk") and self._code[current:upper] == value:
                    output.append(Token(value, TokenType[token]))
                    current = upper
                    break

            else:
                # Use an error token here, so that the parser reports the character as an unexpected token with the
                # same formatting as any other parse error, rather than raising from the lexer.
                output.append(Token(self._code[current], TokenType.ERR))
                current += 1

        return [Token("\n", TokenType.TkNewLine)] + output + [Token("<EOF>", TokenType.TkEOF)]


def _continues_identifier(character: str) -> bool:
    return character.isalnum() or character == "_"


__all__ = ["Lexer"]
