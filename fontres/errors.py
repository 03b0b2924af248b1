"""
fontres – errors.py
===================

Error taxonomy shared by the scan, rename, metadata and CLI stages.

Every error raised by the core derives from :class:`FontResourceError`, so
the CLI can report any failure of a run with a single ``except`` clause.
Core errors are never swallowed: a single unreadable font aborts the whole
batch and no code is generated.
"""

from __future__ import annotations

from pathlib import Path


class FontResourceError(Exception):
    """Base exception for all fontres errors."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class DirectoryNotFoundError(FontResourceError):
    """The directory does not exist, is not a directory or cannot be listed."""

    def __init__(self, path: Path):
        super().__init__(f"Directory not found: {path}", path)


class NoFontsInDirectoryError(FontResourceError):
    """The directory exists but holds no file with a known font extension."""

    def __init__(self, path: Path):
        super().__init__(f"No fonts found in directory: {path}", path)


class UnreadableFontError(FontResourceError):
    """The file could not be parsed as a font container."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read font {path}: {reason}", path)
        self.reason = reason


class UnrecognizedWeightError(FontResourceError):
    """The font declares a weight class with no matching FontWeight."""

    def __init__(self, path: Path | None, weight_class: int):
        where = f" in {path}" if path is not None else ""
        super().__init__(
            f"Font weight class {weight_class}{where} was not recognized", path
        )
        self.weight_class = weight_class


class RenameFailureError(FontResourceError):
    """The filesystem rejected renaming a font file."""

    def __init__(self, source: Path, target: Path, cause: OSError):
        super().__init__(f"Cannot rename {source} to {target}: {cause}", source)
        self.target = target
        self.cause = cause
