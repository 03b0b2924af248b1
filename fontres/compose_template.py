"""
fontres – compose_template.py
=============================

Render a family mapping as Jetpack Compose ``FontFamily`` declarations.

Output for one family (``\\r\\n`` line endings by default, variant lines
indented with one tab)::

    val RobotoFontFamily = FontFamily(
        Font(R.font.roboto_bold, FontWeight.Bold),
        Font(R.font.roboto_italic, FontWeight.Normal, FontStyle.Italic)
    )



Keep the templates below byte-exact: existing projects diff their generated
code against this output.
"""

from __future__ import annotations

from fontres.font_metadata import FontStyle, FontWeight
from fontres.resource_fonts import FamilyGroup, FontVariant

#: Compose symbol for each weight bucket. Total and injective.
WEIGHT_TOKENS: dict[FontWeight, str] = {
    FontWeight.THIN: "FontWeight.Thin",
    FontWeight.EXTRA_LIGHT: "FontWeight.ExtraLight",
    FontWeight.LIGHT: "FontWeight.Light",
    FontWeight.NORMAL: "FontWeight.Normal",
    FontWeight.MEDIUM: "FontWeight.Medium",
    FontWeight.SEMIBOLD: "FontWeight.SemiBold",
    FontWeight.BOLD: "FontWeight.Bold",
    FontWeight.EXTRA_BOLD: "FontWeight.ExtraBold",
    FontWeight.BLACK: "FontWeight.Black",
}

ITALIC_TOKEN = "FontStyle.Italic"
VARIABLE_NAME_SUFFIX = "FontFamily"

#: Line ending of the generated code unless overridden.
DEFAULT_NEWLINE = "\r\n"

LINE_ENDINGS = {"crlf": "\r\n", "lf": "\n"}


def _starts_word(prev: str, ch: str, following: str) -> bool:
    if prev.isdigit() != ch.isdigit():
        return True
    if prev.islower() and ch.isupper():
        return True
    # last capital of an acronym run starts the next word: "IBMPlex"
    return prev.isupper() and ch.isupper() and following.islower()


def split_words(name: str) -> list[str]:
    """Split a family name on separators and case/digit boundaries.

    ``"IBMPlexSans"`` → ``["IBM", "Plex", "Sans"]``. Any Unicode letter or
    digit is kept (``"Noto Sérif"`` → ``["Noto", "Sérif"]``, CJK names stay
    whole); every other character only acts as a separator.
    """
    words: list[str] = []
    current = ""
    for index, ch in enumerate(name):
        if not ch.isalnum():
            if current:
                words.append(current)
            current = ""
            continue
        following = name[index + 1] if index + 1 < len(name) else ""
        if current and _starts_word(current[-1], ch, following):
            words.append(current)
            current = ""
        current += ch
    if current:
        words.append(current)
    return words


def family_name_to_variable_name(name: str) -> str:
    """``"Open Sans"`` → ``"OpenSansFontFamily"``."""
    return "".join(w.capitalize() for w in split_words(name)) + VARIABLE_NAME_SUFFIX


def render_variant(variant: FontVariant) -> str:
    """Render the ``Font(...)`` call for one variant, without indentation."""
    weight = WEIGHT_TOKENS[variant.weight]
    # assuming the files live in res/font
    if variant.style is FontStyle.ITALIC:
        return f"Font(R.font.{variant.resource_name}, {weight}, {ITALIC_TOKEN})"
    return f"Font(R.font.{variant.resource_name}, {weight})"


def render_family(
    family_name: str, variants: list[FontVariant], newline: str = DEFAULT_NEWLINE
) -> str:
    """Render one ``val ... = FontFamily(...)`` block with its separator."""
    code = f"val {family_name_to_variable_name(family_name)} = FontFamily({newline}"

    for index, variant in enumerate(variants):
        code += "\t" + render_variant(variant)
        if index != len(variants) - 1:
            code += ","
        code += newline

    code += ")"
    code += newline * 3
    return code


def template_fonts_for_jetpack_compose(
    families: FamilyGroup,
    newline: str = DEFAULT_NEWLINE,
    sort_families: bool = True,
) -> str:
    """Render every family of ``families`` as Compose source code.

    Args:
        families: Mapping produced by
            :func:`~fontres.resource_fonts.get_fonts_in_resource`.
        newline: Line ending inside and between blocks.
        sort_families: Emit families in family-name order. When ``False``
            the mapping's own order is kept.

    Returns:
        The concatenated declaration blocks; an empty string for no families.
    """
    names = sorted(families) if sort_families else list(families)
    return "".join(render_family(name, families[name], newline) for name in names)


generate = template_fonts_for_jetpack_compose
