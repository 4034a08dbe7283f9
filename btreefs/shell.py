"""Interactive command shell over an in-memory file system."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, TextIO

from .btree import BTreeNode
from .filesystem import (
    Directory,
    FileSystemError,
    NodeType,
    change_directory,
    create_directory,
    create_txt_file,
)

PROMPT = "FS > "
IMAGE_PATH = "fs.img"

HELP_TEXT = (
    "\n--- Simple File System --- Comandos disponíveis ---\n"
    "  ls              - Lista o conteúdo do diretório atual.\n"
    "  mkdir <nome>    - Cria um novo diretório.\n"
    "  touch <nome>    - Cria um novo arquivo.\n"
    "  rm <nome>       - Remove um arquivo.\n"
    "  rmdir <nome>    - Remove um diretório (deve estar vazio).\n"
    "  cd <path>       - Muda de diretório. Use '/' para ir para a raiz.\n"
    "  save            - Salva o estado atual do sistema em 'fs.img'.\n"
    "  help            - Mostra esta ajuda.\n"
    "  exit            - Encerra o programa.\n\n"
)


def _image_lines(node: BTreeNode, depth: int) -> Iterator[str]:
    for idx, entry in enumerate(node.keys):
        if not node.leaf:
            yield from _image_lines(node.children[idx], depth + 1)
        yield "│   " * depth + f"└── {entry.name}"
        if entry.type is NodeType.DIRECTORY and entry.data.tree.root is not None:
            yield from _image_lines(entry.data.tree.root, depth + 1)
    if not node.leaf:
        yield from _image_lines(node.children[len(node.keys)], depth + 1)


def render_image(root: Directory) -> str:
    """Return the text image of the tree below *root*."""
    lines = ["ROOT"]
    if root.tree.root is not None:
        lines.extend(_image_lines(root.tree.root, 1))
    return "\n".join(lines) + "\n"


def save_image(root: Directory, path: str = IMAGE_PATH) -> None:
    """Write the text image of *root* to *path*."""
    with open(path, "w", encoding="utf-8") as img:
        img.write(render_image(root))


def _parse(line: str) -> Optional[tuple[str, Optional[str], str]]:
    """Split a line into command, first argument and the remaining text."""
    line = line.split("\n", 1)[0]
    rest = line.lstrip(" ")
    if not rest:
        return None
    command, _, rest = rest.partition(" ")
    rest = rest.lstrip(" ")
    if not rest:
        return command, None, ""
    arg, _, content = rest.partition(" ")
    return command, arg, content


class Shell:
    """Reads commands and applies them to a file system rooted in memory."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.root = Directory()
        self.current = self.root

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        parsed = _parse(line)
        if parsed is None:
            return True
        command, arg, content = parsed
        try:
            return self._dispatch(command, arg, content)
        except FileSystemError as exc:
            self._say(f"Erro: {exc}")
            return True

    def _dispatch(self, command: str, arg: Optional[str], content: str) -> bool:
        if command == "ls":
            for text in self.current.list_contents():
                self._say(text)
        elif command == "mkdir":
            if arg is None:
                self._say("Uso: mkdir <nome_do_diretorio>")
            else:
                self.current.add(create_directory(arg))
        elif command == "touch":
            if arg is None:
                self._say("Uso: touch <nome_do_arquivo> [conteúdo do arquivo...]")
            else:
                self.current.add(create_txt_file(arg, content))
        elif command == "rm":
            if arg is None:
                self._say("Uso: rm <nome_do_arquivo>")
            else:
                self.current.delete_txt_file(arg)
                self._say(f"Arquivo '{arg}' deletado com sucesso.")
        elif command == "rmdir":
            if arg is None:
                self._say("Uso: rmdir <nome_do_diretorio>")
            else:
                self.current.delete_directory(arg)
                self._say(f"Diretório '{arg}' deletado com sucesso.")
        elif command == "cd":
            if arg is None:
                self._say("Uso: cd <path>")
            else:
                self.current = change_directory(self.current, arg, self.root)
        elif command == "save":
            try:
                save_image(self.root, IMAGE_PATH)
            except OSError as exc:
                sys.stderr.write(f"Erro ao criar fs.img: {exc.strerror or exc}\n")
            else:
                self._say("Sistema de arquivos salvo em fs.img")
        elif command == "help":
            self.out.write(HELP_TEXT)
        elif command == "exit":
            self._say("Encerrando o sistema de arquivos.")
            return False
        else:
            self._say(
                f"Comando desconhecido: '{command}'. "
                "Digite 'help' para ver a lista de comandos."
            )
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Show the help, then run each line until 'exit' or the input ends."""
        self.out.write(HELP_TEXT)
        for line in lines:
            self.out.write(PROMPT)
            if not self.execute(line):
                break
        else:
            self.out.write(PROMPT)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the shell on standard input."""
    Shell(sys.stdout).run(sys.stdin)
    return 0