# btreefs

A small in-memory file system. Each directory stores its entries in a
B-tree keyed by name, so listings always come out in sorted order. The
package has an interactive shell and a library API.

## Installation

```
pip install .
```

## The shell

Start it with:

```
btreefs
```

It prints a help text and then reads commands at the `FS > ` prompt. The
shell's help text and messages are in Portuguese.

| Command                | Effect                                                        |
|------------------------|---------------------------------------------------------------|
| `ls`                   | List the current directory                                    |
| `mkdir <name>`         | Create a directory                                            |
| `touch <name> [text]`  | Create a text file; the rest of the line becomes its content  |
| `rm <name>`            | Remove a text file                                            |
| `rmdir <name>`         | Remove a directory, which must be empty                       |
| `cd <path>`            | Enter a child directory by name; `/` goes back to the root    |
| `save`                 | Write a tree view of the whole system to `fs.img`             |
| `help`                 | Show the help text                                            |
| `exit`                 | Quit                                                          |

Names are single words. A name can be used only once within a directory,
whether by a file or by a directory. The shell stops at `exit` or at the
end of its input.

## Library use

```python
from btreefs.filesystem import Directory, create_directory, create_txt_file, change_directory
from btreefs.shell import render_image

root = Directory()
root.add(create_directory("docs"))
root.add(create_txt_file("notes.txt", "hello"))

docs = change_directory(root, "docs", root)
docs.add(create_txt_file("readme.txt", "text"))

print(render_image(root))
```

`Directory` also offers `lookup`, `delete_txt_file`, `delete_directory`,
`list_contents` and `is_empty`. `btreefs.shell.save_image(root, path)`
writes the text of `render_image` to a file, and `btreefs.shell.Shell`
runs command lines against its own root directory, writing to any text
stream.

Failed operations raise subclasses of `FileSystemError`:
`EntryNotFoundError`, `NotATextFileError`, `NotADirectoryEntryError`,
`DirectoryNotEmptyError` and `NameExistsError`.

The B-tree itself is `btreefs.btree.BTree`, with a minimum degree of 3 by
default. It supports `insert`, `delete`, `search`, `is_empty`, `len()`,
`in` and in-order iteration. `insert` does not check for duplicate names.

## What it does not do

- Everything lives in memory and is lost when the shell exits. `fs.img`
  is a tree view for reading; nothing loads it back.
- `cd` takes only the name of a child of the current directory or `/`;
  there are no multi-part paths and no `..`.
- There is no command to show or change a file's content after `touch`.

## Tests

```
pip install .[test]
pytest
```