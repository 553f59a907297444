from __future__ import annotations
from typing import Iterator, List
import os


class ModuleTree:
    """
    The pattern files under a source directory, in a stable order: subdirectories first, then files, each sorted by
    name. Only files with the pattern extension are included.
    """

    PATTERN_EXTENSION = ".mir"

    _modules: List[str]

    def __init__(self, src_path: str):
        self._modules = [*walk(src_path, ModuleTree.PATTERN_EXTENSION)]

    def __iter__(self) -> Iterator[str]:
        # Iterate over the pattern files
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)


def walk(path: str, extension: str) -> Iterator[str]:
    entries = sorted(os.listdir(path))
    dirs = [entry for entry in entries if os.path.isdir(os.path.join(path, entry))]
    files = [entry for entry in entries if os.path.isfile(os.path.join(path, entry)) and entry.endswith(extension)]

    for dir in dirs:
        subdir_path = os.path.join(path, dir)
        yield from walk(subdir_path, extension)

    for file in files:
        file_path = os.path.join(path, file)
        yield file_path


__all__ = ["ModuleTree"]
