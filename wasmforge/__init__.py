"""In-memory parts of WebAssembly modules (types, memories, tables, imports, locals, producers) and their binary encodings."""

__version__ = "0.19.0"

__all__ = [
    "arena",
    "indices",
    "types",
    "memories",
    "tables",
    "imports",
    "producers",
    "locals",
]