import pytest

from btreefs.filesystem import (
    Directory,
    DirectoryNotEmptyError,
    EntryNotFoundError,
    FileSystemError,
    NameExistsError,
    NodeType,
    NotADirectoryEntryError,
    NotATextFileError,
    TextFile,
    change_directory,
    create_directory,
    create_txt_file,
)


@pytest.fixture
def root():
    directory = Directory()
    directory.add(create_directory("docs"))
    directory.add(create_txt_file("notes.txt", "hello world"))
    return directory


def test_create_txt_file():
    entry = create_txt_file("a.txt", "conteúdo")
    assert entry.name == "a.txt"
    assert entry.type is NodeType.FILE
    assert isinstance(entry.data, TextFile)
    assert entry.data.content == "conteúdo"
    assert entry.data.size == len("conteúdo".encode("utf-8"))


def test_create_directory_is_empty():
    entry = create_directory("docs")
    assert entry.type is NodeType.DIRECTORY
    assert entry.data.is_empty()
    assert entry.data.list_contents() == ["(O diretório está vazio)"]


def test_add_and_lookup(root):
    assert root.lookup("docs").type is NodeType.DIRECTORY
    assert root.lookup("notes.txt").data.content == "hello world"
    assert root.lookup("missing") is None


def test_add_duplicate_name_raises(root):
    with pytest.raises(NameExistsError, match="docs"):
        root.add(create_txt_file("docs", ""))
    assert len(root.tree) == 2


def test_list_contents_format(root):
    lines = root.list_contents()
    assert lines == [
        f"  - {'docs':<20} [DIRETÓRIO]",
        f"  - {'notes.txt':<20} [ARQUIVO]",
    ]


def test_list_contents_sorted_many():
    directory = Directory()
    names = [f"f{i:03d}" for i in range(50)][::-1]
    for n in names:
        directory.add(create_txt_file(n, ""))
    listed = [line.split()[1] for line in directory.list_contents()]
    assert listed == sorted(names)


def test_delete_txt_file(root):
    removed = root.delete_txt_file("notes.txt")
    assert removed.name == "notes.txt"
    assert root.lookup("notes.txt") is None


def test_delete_txt_file_missing(root):
    with pytest.raises(EntryNotFoundError, match="Arquivo 'x' não encontrado."):
        root.delete_txt_file("x")


def test_delete_txt_file_on_directory(root):
    with pytest.raises(NotATextFileError):
        root.delete_txt_file("docs")
    assert root.lookup("docs") is not None


def test_delete_directory(root):
    root.delete_directory("docs")
    assert root.lookup("docs") is None


def test_delete_directory_missing(root):
    with pytest.raises(EntryNotFoundError, match="Diretório 'x' não encontrado."):
        root.delete_directory("x")


def test_delete_directory_on_file(root):
    with pytest.raises(NotADirectoryEntryError):
        root.delete_directory("notes.txt")


def test_delete_non_empty_directory(root):
    root.lookup("docs").data.add(create_txt_file("inner", ""))
    with pytest.raises(DirectoryNotEmptyError):
        root.delete_directory("docs")
    assert root.lookup("docs") is not None


def test_errors_share_base():
    directory = Directory()
    with pytest.raises(FileSystemError):
        directory.delete_txt_file("nothing")


def test_change_directory(root):
    docs = change_directory(root, "docs", root)
    assert docs is root.lookup("docs").data
    assert change_directory(docs, "/", root) is root


def test_change_directory_missing(root):
    with pytest.raises(EntryNotFoundError):
        change_directory(root, "nope", root)


def test_change_directory_to_file(root):
    with pytest.raises(NotADirectoryEntryError, match="não é um diretório"):
        change_directory(root, "notes.txt", root)


def test_nested_directories_are_independent(root):
    docs = change_directory(root, "docs", root)
    docs.add(create_directory("docs"))
    inner = change_directory(docs, "docs", root)
    assert inner is not docs
    assert inner.is_empty()
    assert not docs.is_empty()