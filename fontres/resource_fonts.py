"""
fontres – resource_fonts.py
===========================

Turn a directory of font files into Android font resources and group them
by family.

Pipeline
--------
1. :func:`rename_fonts_for_android` renames every font file to a valid
   resource name (see :func:`normalize`). All renames finish before any
   metadata is read.
2. :func:`get_fonts_in_resource` re-lists the directory, reads each file
   with a :class:`~fontres.font_metadata.FontMetadataSource` and groups the
   results by family name.

:func:`aggregate` runs both steps. Directory listings are sorted by file
name, so the variant order of a family is the same on every run.

Renaming is destructive: if two files normalize to the same name, the later
one replaces the earlier one on disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from fontres.errors import (
    DirectoryNotFoundError,
    NoFontsInDirectoryError,
    RenameFailureError,
)
from fontres.font_metadata import (
    FontMetadataSource,
    FontStyle,
    FontToolsMetadataSource,
    FontWeight,
    read_metadata,
)

#: Extensions (as stored on disk, case-sensitive) treated as font files.
COMMON_FONT_EXTENSIONS: tuple[str, ...] = ("otf", "ttf", "woff", "woff2")


@dataclass(frozen=True)
class FontVariant:
    """One font file of a family, as referenced from generated code."""

    family_name: str
    resource_name: str
    weight: FontWeight
    style: FontStyle
    path: Path | None = None


#: Family name → variants in directory scan order.
FamilyGroup = dict[str, list[FontVariant]]


# -----------------------
# Filename helpers
# -----------------------
def normalize(filename: str) -> str:
    """Return the Android resource form of ``filename``.

    The whole name (extension included) is lowercased and every ``-`` and
    space becomes ``_``. Nothing else changes, so the function is
    idempotent.
    """
    return filename.lower().replace("-", "_").replace(" ", "_")


def font_extension(filename: str) -> str | None:
    """Return the extension of ``filename`` as stored, or ``None``."""
    suffix = Path(filename).suffix
    if not suffix:
        return None
    return suffix[1:]


def is_font_filename(filename: str) -> bool:
    return font_extension(filename) in COMMON_FONT_EXTENSIONS


def resource_name(filename: str) -> str:
    """Strip the extension: ``roboto_bold.ttf`` → ``roboto_bold``."""
    extension = font_extension(filename)
    if extension is None:
        return filename
    return filename[: -len(extension) - 1]


# -----------------------
# Directory scanning
# -----------------------
def folder_contains_fonts(directory: Path) -> bool:
    """Return ``True`` if ``directory`` holds at least one font file.

    Missing paths, non-directories and unreadable directories all return
    ``False``; the interactive prompt asks again in each of these cases.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return False
    try:
        with os.scandir(directory) as entries:
            return any(_is_font_entry(entry) for entry in entries)
    except OSError:
        return False


def check_font_directory(directory: Path) -> Path:
    """Validate ``directory`` for non-interactive runs.

    Raises:
        DirectoryNotFoundError: ``directory`` is missing, not a directory,
            or cannot be listed.
        NoFontsInDirectoryError: ``directory`` holds no font file.
    """
    directory = Path(directory)
    if not list_font_files(directory):
        raise NoFontsInDirectoryError(directory)
    return directory


def _is_font_entry(entry: os.DirEntry) -> bool:
    # symlinks are not regular files, even when they point at one
    return entry.is_file(follow_symlinks=False) and is_font_filename(entry.name)


def list_font_files(directory: Path) -> list[Path]:
    """List the font files of ``directory``, sorted by file name.

    Only regular files are kept (symlinks are skipped), and only those whose
    extension is in :data:`COMMON_FONT_EXTENSIONS`.

    Raises:
        DirectoryNotFoundError: ``directory`` is missing or cannot be listed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DirectoryNotFoundError(directory)
    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries if _is_font_entry(entry)]
    except OSError as e:
        raise DirectoryNotFoundError(directory) from e
    return [directory / name for name in sorted(names)]


# -----------------------
# Rename pass
# -----------------------
def rename_fonts_for_android(
    directory: Path, verbose: bool = False
) -> list[tuple[Path, Path]]:
    """Rename every font file in ``directory`` to its normalized name.

    Renames are applied one by one and are not rolled back: if one fails,
    the files renamed before it keep their new names.

    Args:
        directory: Directory holding the font files.
        verbose: Print every rename to stdout.

    Returns:
        The ``(old_path, new_path)`` pairs actually renamed.

    Raises:
        DirectoryNotFoundError: ``directory`` cannot be listed.
        RenameFailureError: The filesystem rejected a rename.
    """
    renamed: list[tuple[Path, Path]] = []
    for old_path in list_font_files(directory):
        new_path = old_path.with_name(normalize(old_path.name))
        if new_path.name == old_path.name:
            continue
        try:
            os.replace(old_path, new_path)
        except OSError as e:
            raise RenameFailureError(old_path, new_path, e) from e
        if verbose:
            print(f"Renamed: {old_path.name} -> {new_path.name}")
        renamed.append((old_path, new_path))
    return renamed


# -----------------------
# Metadata pass
# -----------------------
def get_fonts_in_resource(
    directory: Path,
    source: FontMetadataSource | None = None,
    oblique_as_italic: bool = False,
    verbose: bool = False,
) -> FamilyGroup:
    """Read every font in ``directory`` and group the variants by family.

    Data structure::

        {
          "Roboto": [
            FontVariant(family_name="Roboto", resource_name="roboto_bold", ...),
            FontVariant(family_name="Roboto", resource_name="roboto_italic", ...),
          ]
        }

    Args:
        directory: Directory holding (already renamed) font files.
        source: Metadata source. Defaults to :class:`FontToolsMetadataSource`.
        oblique_as_italic: Passed to the default source; ignored when
            ``source`` is given.
        verbose: Print every variant found to stdout.

    Returns:
        The family mapping; empty if the directory holds no fonts.

    Raises:
        DirectoryNotFoundError: ``directory`` cannot be listed.
        UnreadableFontError: A file is not a parseable font.
        UnrecognizedWeightError: A font declares an unknown weight class.
    """
    if source is None:
        source = FontToolsMetadataSource(oblique_as_italic=oblique_as_italic)

    families: FamilyGroup = {}
    for path in list_font_files(directory):
        meta = read_metadata(path, source)
        variant = FontVariant(
            family_name=meta.family_name,
            resource_name=resource_name(path.name),
            weight=meta.weight,
            style=meta.style,
            path=path,
        )
        if verbose:
            print(
                f"Found: {path.name} ({variant.family_name}, "
                f"{variant.weight.name.lower()}, {variant.style.value})"
            )
        families.setdefault(meta.family_name, []).append(variant)
    return families


def aggregate(
    directory: Path,
    source: FontMetadataSource | None = None,
    oblique_as_italic: bool = False,
    verbose: bool = False,
) -> FamilyGroup:
    """Rename the fonts of ``directory`` and return them grouped by family."""
    rename_fonts_for_android(directory, verbose=verbose)
    return get_fonts_in_resource(
        directory,
        source=source,
        oblique_as_italic=oblique_as_italic,
        verbose=verbose,
    )
