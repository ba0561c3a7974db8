"""
Access to the companion files some generators need (the tool declaration, sub-tool documentation fragments, the list of
embedded assets).

Generators never touch the filesystem directly. They go through a `FileProvider` injected by the caller, which makes
the dependency on external files explicit and allows them to be supplied from memory in tests.
"""

import logging

from abc import ABCMeta, abstractmethod
from pathlib import Path, PurePosixPath
from typing import List, Mapping, Union

from atmfjstc.lib.variant_codegen.errors import ExternalResourceMissingError


LOG = logging.getLogger()


class FileProvider(metaclass=ABCMeta):
    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Reads the entire contents of a text file.

        Raises:
            ExternalResourceMissingError: If the file does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """
        Lists the names of the entries in a directory, in no particular order.

        Raises:
            ExternalResourceMissingError: If the directory does not exist.
        """
        raise NotImplementedError


class DirectoryFileProvider(FileProvider):
    """
    Serves files relative to an explicitly given root directory.
    """

    _root: Path

    def __init__(self, root: Union[str, Path]):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def read_text(self, path: str) -> str:
        full_path = self._root / path
        LOG.debug(f"Reading {full_path}")

        if not full_path.is_file():
            raise ExternalResourceMissingError(str(full_path), 'file')

        return full_path.read_text(encoding='utf-8')

    def list_dir(self, path: str) -> List[str]:
        full_path = self._root / path
        LOG.debug(f"Listing {full_path}")

        if not full_path.is_dir():
            raise ExternalResourceMissingError(str(full_path), 'directory')

        return [entry.name for entry in full_path.iterdir()]


class InMemoryFileProvider(FileProvider):
    """
    Serves files from a mapping of paths (``/``-separated, relative) to contents. Directories exist implicitly, as
    prefixes of the file paths.
    """

    _files: Mapping[PurePosixPath, str]

    def __init__(self, files: Mapping[str, str]):
        self._files = {PurePosixPath(path): content for path, content in files.items()}

    def read_text(self, path: str) -> str:
        content = self._files.get(PurePosixPath(path))
        if content is None:
            raise ExternalResourceMissingError(path, 'file')

        return content

    def list_dir(self, path: str) -> List[str]:
        directory = PurePosixPath(path)
        entries = set()

        for file_path in self._files.keys():
            if directory in file_path.parents:
                entries.add(file_path.relative_to(directory).parts[0])

        if len(entries) == 0:
            raise ExternalResourceMissingError(path, 'directory')

        return list(entries)
