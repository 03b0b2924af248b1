from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontres.font_metadata import FaceMetadata, FontStyle, FontWeight


def make_font_file(
    path: Path,
    *,
    family: str = "Test Family",
    style: str = "Regular",
    weight: int = 400,
    italic: bool = False,
    oblique: bool = False,
    typographic_family: str | None = None,
    flavor: str | None = None,
    with_os2: bool = True,
) -> Path:
    """
    Factory helper building a tiny but valid TrueType font on disk.

    ``flavor`` may be ``"woff"`` or ``"woff2"``.
    """
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space"])
    fb.setupCharacterMap({0x20: "space"})

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((400, 700))
    pen.lineTo((400, 0))
    pen.closePath()
    notdef = pen.glyph()
    space = TTGlyphPen(None).glyph()

    fb.setupGlyf({".notdef": notdef, "space": space})
    fb.setupHorizontalMetrics({".notdef": (500, 100), "space": (250, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)

    names = {
        "familyName": family,
        "styleName": style,
        "uniqueFontIdentifier": f"{family}-{style}",
        "fullName": f"{family} {style}",
        "psName": f"{family}-{style}".replace(" ", ""),
        "version": "Version 1.000",
    }
    if typographic_family:
        names["typographicFamily"] = typographic_family
    fb.setupNameTable(names)

    if with_os2:
        fs_selection = 0
        if italic:
            fs_selection |= 1 << 0
        if oblique:
            fs_selection |= 1 << 9
        if not italic and not oblique and weight == 400:
            fs_selection |= 1 << 6
        fb.setupOS2(usWeightClass=weight, fsSelection=fs_selection)

    fb.setupPost()

    if flavor:
        fb.font.flavor = flavor
    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


class StubMetadataSource:
    """FontMetadataSource answering from a filename → metadata mapping."""

    def __init__(self, faces: dict[str, FaceMetadata]):
        self.faces = faces
        self.calls: list[str] = []

    def read_face_metadata(self, path: Path) -> FaceMetadata:
        self.calls.append(path.name)
        return self.faces[path.name]


def face(
    family: str,
    weight: FontWeight = FontWeight.NORMAL,
    style: FontStyle = FontStyle.NORMAL,
) -> FaceMetadata:
    return FaceMetadata(family_name=family, weight=weight, style=style)
