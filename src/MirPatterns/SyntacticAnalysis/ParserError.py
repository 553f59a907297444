from __future__ import annotations

from enum import Enum
from typing import List, Optional


class ParserErrorType(Enum):
    STRUCTURAL = 0
    RESERVED_WORD = 1
    UNSUPPORTED = 2
    END_OF_INPUT = 3


class ParserError(Exception):
    """
    A ParserError is raised by any rule that fails to match. Errors raised while a rule is being tried speculatively
    are caught and rewound by the rule handlers, unless the error is committed: once a construct's unambiguous leading
    tokens have been consumed, any error inside it is marked as committed and propagates straight to the caller.

    Attributes:
        pos: The index of the token the error refers to.
        error_type: The class of error, used to pick the most specific diagnostic between failed alternatives.
        committed: Whether the error was raised after the enclosing construct committed.
    """

    pos: int
    error_type: ParserErrorType
    committed: bool

    def __init__(self, pos: int, message: str, error_type: ParserErrorType = ParserErrorType.STRUCTURAL) -> None:
        super().__init__(message)
        self.pos = pos
        self.error_type = error_type
        self.committed = False

    @property
    def message(self) -> str:
        return self.args[0]

    @property
    def is_specific(self) -> bool:
        # A keyword used as a name, or an unsupported construct, says more than a plain token mismatch.
        return self.error_type in [ParserErrorType.RESERVED_WORD, ParserErrorType.UNSUPPORTED]


def furthest_error(errors: List[ParserError]) -> Optional[ParserError]:
    # Between errors at the same token, a specific error beats a structural one, then the later error wins: it is the
    # one that propagated out of the rule that recorded the earlier ones.
    best = None
    for error in errors:
        if best is None or (error.pos, error.is_specific) >= (best.pos, best.is_specific):
            best = error
    return best


class ParserErrors:
    @staticmethod
    def EXPECTED_TOKEN(pos: int, expected: str, at_eof: bool) -> ParserError:
        if at_eof:
            return ParserError(pos, f"unexpected end of input, expected {expected}", ParserErrorType.END_OF_INPUT)
        return ParserError(pos, f"expected {expected}")

    @staticmethod
    def KEYWORD_AS_IDENTIFIER(pos: int, keyword: str) -> ParserError:
        return ParserError(pos, f"expected identifier, found keyword `{keyword}`", ParserErrorType.RESERVED_WORD)

    @staticmethod
    def UNEXPECTED_TOKEN(pos: int) -> ParserError:
        return ParserError(pos, "unexpected token")

    @staticmethod
    def UNEXPECTED_EOF(pos: int) -> ParserError:
        return ParserError(pos, "unexpected end of input", ParserErrorType.END_OF_INPUT)

    @staticmethod
    def CRATE_WITHOUT_SEPARATOR(pos: int) -> ParserError:
        # "$crate" only ever starts a path, so it is always followed by "::".
        return ParserError(pos, "expected `::`")

    @staticmethod
    def TYPE_DECLARATION_WITH_GENERICS(pos: int) -> ParserError:
        return ParserError(pos, "generics not supported on type declaration", ParserErrorType.UNSUPPORTED)

    @staticmethod
    def UNKNOWN_METAVARIABLE(pos: int, name: str) -> ParserError:
        return ParserError(pos, f"unknown metavariable `${name}`")

    @staticmethod
    def DUPLICATE_METAVARIABLE(pos: int, name: str) -> ParserError:
        return ParserError(pos, f"duplicate metavariable `${name}`")

    @staticmethod
    def UNSUPPORTED_METAVARIABLE_KIND(pos: int, kind: str) -> ParserError:
        return ParserError(pos, f"unsupported metavariable kind `{kind}`, expected `ty`", ParserErrorType.UNSUPPORTED)

    @staticmethod
    def DUPLICATE_WILDCARD_ARM(pos: int) -> ParserError:
        return ParserError(pos, "duplicate wildcard arm `_`")

    @staticmethod
    def DECLARATION_OUT_OF_ORDER(pos: int, keyword: str) -> ParserError:
        return ParserError(
            pos, f"`{keyword}` declaration out of order, expected `meta!`, `use`, `type`, `let`, then statements")


__all__ = ["ParserErrorType", "ParserError", "ParserErrors", "furthest_error"]
