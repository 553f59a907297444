import os
from typing import List

from colorama import Fore, Style

from MirPatterns.LexicalAnalysis.Tokens import Token, TokenType


class ErrorFormatter:
    _tokens: List[Token]
    _file_path: str

    def __init__(self, tokens: List[Token], file_path: str) -> None:
        self._tokens = tokens
        self._file_path = os.path.basename(file_path) or file_path

    def error(self, start_pos: int, message: str = "", tag_message: str = "") -> str:
        while self._tokens[start_pos].token_type in [TokenType.TkNewLine, TokenType.TkWhitespace]:
            start_pos += 1

        # Get the tokens at the start and end of the line containing the error. Skip the leading newline.
        error_line_start_pos = [i for i, x in enumerate(self._tokens[:start_pos]) if x.token_type == TokenType.TkNewLine][-1] + 1
        error_line_end_pos = ([i for i, x in enumerate(self._tokens[start_pos:]) if x.token_type == TokenType.TkNewLine] or [len(self._tokens) - 1 - start_pos])[0] + start_pos
        error_line_tokens = self._tokens[error_line_start_pos:error_line_end_pos]
        error_line_as_string = "".join([str(token) for token in error_line_tokens])

        # Get the line number of the error. The leading newline token means the first line is line 1.
        error_line_number = len([x for x in self._tokens[:start_pos] if x.token_type == TokenType.TkNewLine])

        # The number of "^" is the length of the token data where the error is. The end of input is a single caret.
        error_token = self._tokens[start_pos]
        carets = "^" * (len(error_token.token_metadata) if error_token.token_type != TokenType.TkEOF else 1)
        carets_line_as_string = " " * sum([len(str(token)) for token in self._tokens[error_line_start_pos:start_pos]]) + carets
        carets_line_as_string += f"{Fore.LIGHTWHITE_EX}{Style.BRIGHT} <- {tag_message}" if tag_message else ""

        left_padding = " " * len(str(error_line_number))
        final_error_message = "\n".join([
            f"{Fore.LIGHTWHITE_EX}{Style.BRIGHT}",
            f"Error in file '{self._file_path}', on line {error_line_number}:",
            f"{Fore.LIGHTWHITE_EX}{left_padding} |",
            f"{Fore.LIGHTRED_EX}{error_line_number} | {error_line_as_string}",
            f"{Fore.LIGHTWHITE_EX}{left_padding} | {Style.NORMAL}{Fore.LIGHTRED_EX}{carets_line_as_string}\n",
            f"{Style.RESET_ALL}{Fore.LIGHTRED_EX}{message}{Style.RESET_ALL}",
        ])

        return final_error_message


__all__ = ["ErrorFormatter"]
