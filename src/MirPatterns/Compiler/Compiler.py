import dataclasses
import json
import os
from typing import Dict, List

from MirPatterns.Compiler.ModuleTree import ModuleTree
from MirPatterns.LexicalAnalysis.Lexer import Lexer
from MirPatterns.LexicalAnalysis.Tokens import Token
from MirPatterns.SemanticAnalysis.ASTs import MirAst
from MirPatterns.SemanticAnalysis.ASTs.Meta.Ast import Ast
from MirPatterns.SyntacticAnalysis.Parser import Parser
from MirPatterns.SyntacticAnalysis.ParserError import ParserError


class Compiler:
    """
    Loads every pattern file under a source directory. Each file is lexed and parsed as a pattern unit. In debug mode
    ("d") the tokens and the tree of each file are dumped as JSON under "bin/tokens" and "bin/trees", next to the source
    directory; release mode ("r") writes nothing. The first file that fails to parse aborts the load with the rendered
    diagnostic.
    """

    _src_path: str
    _module_tree: ModuleTree
    _mode: str
    _patterns: Dict[str, MirAst]

    def __init__(self, src_path: str, mode: str = "d") -> None:
        # Save the src path and generate the module tree.
        self._src_path = os.path.normpath(src_path)
        self._module_tree = ModuleTree(self._src_path)
        self._mode = mode
        self._patterns = {}

        # Compile the pattern files.
        self.compile()

    def compile(self) -> Dict[str, MirAst]:
        # Lex every file first, so that an unreadable file is reported before any parse error.
        lexed = []
        for module in self._module_tree:
            with open(module, encoding="utf-8") as file:
                code = file.read()
            tokens = Lexer(code).lex()
            lexed.append(tokens)
            self._write_to_file(module, "tokens", [dataclasses.asdict(token) for token in tokens])

        # Parse every file as a pattern unit.
        for module, tokens in zip(self._module_tree, lexed):
            parser = Parser(tokens, module)
            try:
                ast = parser.parse("mir")
            except ParserError as e:
                raise SystemExit(parser.format_error(e)) from None
            self._patterns[module] = ast
            self._write_to_file(module, "trees", dataclasses.asdict(ast))

        return self._patterns

    @property
    def patterns(self) -> Dict[str, MirAst]:
        return self._patterns

    def _write_to_file(self, file_path: str, section: str, what) -> None:
        if self._mode == "r":
            return

        json_repr = json.dumps(what, indent=4)
        relative_path = os.path.relpath(file_path, self._src_path)
        file_path = os.path.join(os.path.dirname(self._src_path), "bin", section, relative_path)
        file_path = os.path.splitext(file_path)[0] + ".json"

        directory_path = os.path.dirname(file_path)
        os.path.exists(directory_path) or os.makedirs(directory_path)
        with open(file_path, "w") as file:
            file.write(json_repr)


def lex_pattern(code: str) -> List[Token]:
    return Lexer(code).lex()


def parse_pattern(code: str, rule: str = "mir", *args) -> Ast:
    """
    Lex and parse a piece of pattern source in one call. The rule names the production to parse ("mir" for a complete
    pattern unit, or any fragment such as "type", "place" or "statement"), and extra arguments are passed to it. Raises
    a ParserError if the source does not match.
    """

    return Parser(lex_pattern(code)).parse(rule, *args)


__all__ = ["Compiler", "lex_pattern", "parse_pattern"]
