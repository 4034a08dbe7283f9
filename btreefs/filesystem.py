"""Files and directories held in per-directory B-trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .btree import BTree


class NodeType(Enum):
    """Kind of a directory entry."""

    FILE = "file"
    DIRECTORY = "directory"

    @property
    def label(self) -> str:
        return "ARQUIVO" if self is NodeType.FILE else "DIRETÓRIO"


class FileSystemError(Exception):
    """Base class for file system errors."""


class EntryNotFoundError(FileSystemError, LookupError):
    """No entry with the requested name exists."""


class NotATextFileError(FileSystemError):
    """The entry is not a text file."""


class NotADirectoryEntryError(FileSystemError):
    """The entry is not a directory."""


class DirectoryNotEmptyError(FileSystemError):
    """The directory still holds entries."""


class NameExistsError(FileSystemError):
    """An entry with that name already exists."""


EMPTY_DIRECTORY_MESSAGE = "(O diretório está vazio)"


@dataclass
class TextFile:
    """A text file and its content."""

    name: str
    content: str = ""

    @property
    def size(self) -> int:
        """Content length in bytes."""
        return len(self.content.encode("utf-8"))


@dataclass
class Directory:
    """A directory whose entries are kept in a B-tree by name."""

    tree: BTree = field(default_factory=BTree)

    def add(self, entry: DirectoryEntry) -> None:
        """Add *entry*, refusing a name already present."""
        if self.tree.search(entry.name) is not None:
            raise NameExistsError(
                f"O nome '{entry.name}' já existe neste diretório."
            )
        self.tree.insert(entry)

    def lookup(self, name: str) -> Optional[DirectoryEntry]:
        """Return the entry called *name*, or None."""
        return self.tree.search(name)

    def delete_txt_file(self, name: str) -> DirectoryEntry:
        """Remove and return the text file called *name*."""
        entry = self.lookup(name)
        if entry is None:
            raise EntryNotFoundError(f"Arquivo '{name}' não encontrado.")
        if entry.type is not NodeType.FILE:
            raise NotATextFileError(f"'{name}' não é um arquivo de texto.")
        self.tree.delete(name)
        return entry

    def delete_directory(self, name: str) -> DirectoryEntry:
        """Remove and return the empty directory called *name*."""
        entry = self.lookup(name)
        if entry is None:
            raise EntryNotFoundError(f"Diretório '{name}' não encontrado.")
        if entry.type is not NodeType.DIRECTORY:
            raise NotADirectoryEntryError(f"'{name}' não é um diretório.")
        if not entry.data.is_empty():
            raise DirectoryNotEmptyError(
                f"Não é possível remover o diretório '{name}' "
                "porque ele não está vazio."
            )
        self.tree.delete(name)
        return entry

    def list_contents(self) -> list[str]:
        """Return one formatted line per entry, in name order."""
        if self.is_empty():
            return [EMPTY_DIRECTORY_MESSAGE]
        return [f"  - {entry.name:<20} [{entry.type.label}]" for entry in self.tree]

    def is_empty(self) -> bool:
        """True when the directory has no entries."""
        return self.tree.is_empty()


@dataclass
class DirectoryEntry:
    """A named entry of a directory: a text file or a subdirectory."""

    name: str
    type: NodeType
    data: Union[TextFile, Directory]


def create_txt_file(name: str, content: str = "") -> DirectoryEntry:
    """Make an entry for a new text file."""
    return DirectoryEntry(name, NodeType.FILE, TextFile(name, content))


def create_directory(name: str) -> DirectoryEntry:
    """Make an entry for a new, empty directory."""
    return DirectoryEntry(name, NodeType.DIRECTORY, Directory())


def change_directory(current: Directory, path: str, root: Directory) -> Directory:
    """Return the directory reached from *current* by *path* ('/' is *root*)."""
    if path == "/":
        return root
    entry = current.lookup(path)
    if entry is None:
        raise EntryNotFoundError(f"Diretório '{path}' não encontrado.")
    if entry.type is not NodeType.DIRECTORY:
        raise NotADirectoryEntryError(f"'{path}' não é um diretório.")
    return entry.data