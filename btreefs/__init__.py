"""In-memory file system with B-tree directories and an interactive shell."""

__version__ = "0.1.0"
__all__ = ["btree", "filesystem", "shell"]