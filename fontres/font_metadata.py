"""
fontres – font_metadata.py
==========================

Read the family name, weight class and style of the first face of a font
file.

Design principles
-----------------
- **Capability boundary**: callers depend on :class:`FontMetadataSource`,
  never on fontTools types. :class:`FontToolsMetadataSource` is the default
  implementation.
- **No silent defaults**: a weight class outside :data:`WEIGHT_CLASS_TABLE`
  raises :class:`~fontres.errors.UnrecognizedWeightError`.
- **Pure read**: font files are opened lazily and closed again; nothing is
  written.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

# fontTools does not provide type stubs/py.typed
from fontTools.ttLib import TTFont  # type: ignore[import]

from fontres.errors import UnreadableFontError, UnrecognizedWeightError


# -----------------------
# Weight / style model
# -----------------------
class FontWeight(Enum):
    """Discrete weight buckets, valued by their OS/2 ``usWeightClass``."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    NORMAL = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"


#: Ordered ``(usWeightClass, FontWeight)`` pairs, checked exhaustively.
#:
#: Only exact values are accepted; anything else (e.g. ``350``) is an
#: :class:`~fontres.errors.UnrecognizedWeightError`.
WEIGHT_CLASS_TABLE: tuple[tuple[int, FontWeight], ...] = (
    (100, FontWeight.THIN),
    (200, FontWeight.EXTRA_LIGHT),
    (300, FontWeight.LIGHT),
    (400, FontWeight.NORMAL),
    (500, FontWeight.MEDIUM),
    (600, FontWeight.SEMIBOLD),
    (700, FontWeight.BOLD),
    (800, FontWeight.EXTRA_BOLD),
    (900, FontWeight.BLACK),
)

# OS/2 fsSelection and head.macStyle bit positions
FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_OBLIQUE = 1 << 9
MAC_STYLE_ITALIC = 1 << 1


@dataclass(frozen=True)
class FaceMetadata:
    """What a :class:`FontMetadataSource` reports for one face."""

    family_name: str
    weight: FontWeight
    style: FontStyle


def weight_from_class(weight_class: int, path: Path | None = None) -> FontWeight:
    """Map a numeric weight class to its :class:`FontWeight` bucket.

    Args:
        weight_class: Value of ``OS/2.usWeightClass``.
        path: Font file the value came from, used only in the error message.

    Returns:
        The matching :class:`FontWeight`.

    Raises:
        UnrecognizedWeightError: If ``weight_class`` has no table entry.
    """
    for value, weight in WEIGHT_CLASS_TABLE:
        if weight_class == value:
            return weight
    raise UnrecognizedWeightError(path, weight_class)


def style_from_flags(
    fs_selection: int, mac_style: int, oblique_as_italic: bool = False
) -> FontStyle:
    """Classify a face as italic or normal from its style bits.

    Oblique faces are reported as normal unless ``oblique_as_italic`` is set.
    """
    if fs_selection & FS_SELECTION_ITALIC or mac_style & MAC_STYLE_ITALIC:
        return FontStyle.ITALIC
    if oblique_as_italic and fs_selection & FS_SELECTION_OBLIQUE:
        return FontStyle.ITALIC
    return FontStyle.NORMAL


# -----------------------
# Metadata sources
# -----------------------
class FontMetadataSource(Protocol):
    """Anything able to read the first face of a font file."""

    def read_face_metadata(self, path: Path) -> FaceMetadata: ...


class FontToolsMetadataSource:
    """:class:`FontMetadataSource` backed by ``fontTools.ttLib.TTFont``.

    Only face index 0 is loaded, so a collection exposes its first face.
    WOFF2 input needs the ``brotli`` package, pulled in by ``fonttools[woff]``.
    """

    def __init__(self, oblique_as_italic: bool = False):
        self.oblique_as_italic = oblique_as_italic

    def read_face_metadata(self, path: Path) -> FaceMetadata:
        try:
            tt = TTFont(str(path), fontNumber=0, lazy=True)
        except Exception as e:
            raise UnreadableFontError(path, str(e)) from e

        with tt:
            try:
                family = tt["name"].getBestFamilyName() if "name" in tt else None
                if "OS/2" not in tt:
                    raise UnreadableFontError(path, "missing OS/2 table")
                os2 = tt["OS/2"]
                weight_class = int(os2.usWeightClass)
                fs_selection = int(os2.fsSelection)
                mac_style = int(tt["head"].macStyle) if "head" in tt else 0
            except UnreadableFontError:
                raise
            except Exception as e:
                # lazy tables are decompiled on first access
                raise UnreadableFontError(path, str(e)) from e

        if not family or not family.strip():
            raise UnreadableFontError(path, "no family name in name table")

        return FaceMetadata(
            family_name=family.strip(),
            weight=weight_from_class(weight_class, path),
            style=style_from_flags(fs_selection, mac_style, self.oblique_as_italic),
        )


def read_metadata(
    path: Path, source: FontMetadataSource | None = None
) -> FaceMetadata:
    """Read family, weight and style of the first face in ``path``.

    Args:
        path: Font file to read.
        source: Metadata source to use. Defaults to
            :class:`FontToolsMetadataSource`.

    Returns:
        The face metadata.

    Raises:
        UnreadableFontError: The file is not a parseable font.
        UnrecognizedWeightError: The weight class has no bucket.
    """
    if source is None:
        source = FontToolsMetadataSource()
    return source.read_face_metadata(Path(path))
