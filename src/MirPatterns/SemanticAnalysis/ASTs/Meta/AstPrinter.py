import functools
from typing import Final


class AstPrinter:
    TAB_SIZE: Final[int] = 4

    def format_block(self, block: str) -> str:
        # Indent every line between the opening and closing lines of a block. Nested blocks have already indented their
        # own interior, so each level only adds one tab.
        lines = block.split("\n")
        if len(lines) <= 2:
            return block

        inner = [" " * AstPrinter.TAB_SIZE + line if line else line for line in lines[1:-1]]
        return "\n".join([lines[0], *inner, lines[-1]])


# Decorators for the printer methods
def ast_printer_method(func, next_indent: bool = False):
    @functools.wraps(func)
    def wrapper(self=None, *args):
        printer = args[0]
        line = func(self, *args)
        return printer.format_block(line) if next_indent else line

    return wrapper


def ast_printer_method_indent(func):
    return ast_printer_method(func, True)


__all__ = [
    "AstPrinter",
    "ast_printer_method",
    "ast_printer_method_indent"]
