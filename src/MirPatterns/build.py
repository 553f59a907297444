import argparse
import os
import shutil
from typing import List, Optional

import colorama

from MirPatterns.Compiler.Compiler import Compiler

__version__ = "0.1.0"


def __create_parser() -> argparse.ArgumentParser:
    # The main parser and the commands subparser
    parser = argparse.ArgumentParser(prog="mirpat", description="Checker for MIR pattern files", add_help=True)
    command_subparsers = parser.add_subparsers(dest="command", required=True, help="commands")

    # mirpat check
    parser_check = command_subparsers.add_parser("check", help="Parse every pattern file")
    parser_check.add_argument("--src", type=str, help="The pattern directory", default="patterns")
    parser_check_mode_group = parser_check.add_mutually_exclusive_group()
    parser_check_mode_group.add_argument("--release", action="store_true", help="Parse without writing dumps")
    parser_check_mode_group.add_argument("--debug", action="store_true", help="Dump tokens and trees as JSON")

    # mirpat clean
    parser_clean = command_subparsers.add_parser("clean", help="Remove the dumps of a previous debug check")
    parser_clean.add_argument("--src", type=str, help="The pattern directory", default="patterns")

    # mirpat version
    command_subparsers.add_parser("version", help="Show version and exit")

    # Parse the arguments
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = __create_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(f"MIR pattern checker {__version__}")
        return 0

    src = os.path.abspath(args.src)
    if not os.path.isdir(src):
        print(f"No pattern directory found at {src}")
        return 1

    match args.command:
        case "check":
            colorama.init()
            try:
                compiler = Compiler(src, mode="d" if args.debug else "r")
            finally:
                colorama.deinit()
            print(f"Checked {len(compiler.patterns)} pattern file(s) in {src}")

        case "clean":
            bin_path = os.path.join(os.path.dirname(src), "bin")
            if os.path.isdir(bin_path):
                shutil.rmtree(bin_path)
            print(f"Cleaned {bin_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
