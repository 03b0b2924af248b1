import pytest

from fontres.compose_template import (
    ITALIC_TOKEN,
    WEIGHT_TOKENS,
    family_name_to_variable_name,
    render_variant,
    split_words,
    template_fonts_for_jetpack_compose,
)
from fontres.font_metadata import FontStyle, FontWeight
from fontres.resource_fonts import FontVariant


def variant(family, resource, weight=FontWeight.NORMAL, style=FontStyle.NORMAL):
    return FontVariant(
        family_name=family, resource_name=resource, weight=weight, style=style
    )


def test_weight_tokens_total_and_injective():
    assert set(WEIGHT_TOKENS) == set(FontWeight)
    assert len(set(WEIGHT_TOKENS.values())) == len(FontWeight)
    assert WEIGHT_TOKENS[FontWeight.SEMIBOLD] == "FontWeight.SemiBold"
    assert WEIGHT_TOKENS[FontWeight.EXTRA_LIGHT] == "FontWeight.ExtraLight"


@pytest.mark.parametrize(
    "family, expected",
    [
        ("Roboto", "RobotoFontFamily"),
        ("Open Sans", "OpenSansFontFamily"),
        ("source-code-pro", "SourceCodeProFontFamily"),
        ("IBMPlexSans", "IbmPlexSansFontFamily"),
        ("PT_Serif", "PtSerifFontFamily"),
        ("M PLUS 1p", "MPlus1PFontFamily"),
        ("Noto Sans JP", "NotoSansJpFontFamily"),
        ("Noto Sérif", "NotoSérifFontFamily"),
        ("Ébène Sans", "ÉbèneSansFontFamily"),
        ("源ノ角ゴシック", "源ノ角ゴシックFontFamily"),
        ("方正黑体 Bold", "方正黑体BoldFontFamily"),
    ],
)
def test_family_name_to_variable_name(family, expected):
    assert family_name_to_variable_name(family) == expected


def test_split_words_drops_punctuation():
    assert split_words("Foo & Bar.Baz") == ["Foo", "Bar", "Baz"]


def test_split_words_keeps_non_ascii_letters():
    assert split_words("Noto Sérif") == ["Noto", "Sérif"]
    assert split_words("ÉcoleMono") == ["École", "Mono"]
    assert split_words("源ノ角ゴシック") == ["源ノ角ゴシック"]


def test_cjk_families_get_distinct_variable_names():
    families = {
        "源ノ角ゴシック": [variant("源ノ角ゴシック", "gen_kaku")],
        "方正黑体": [variant("方正黑体", "fangzheng")],
    }

    code = template_fonts_for_jetpack_compose(families, newline="\n")

    assert "val 源ノ角ゴシックFontFamily = FontFamily(\n" in code
    assert "val 方正黑体FontFamily = FontFamily(\n" in code
    assert "val FontFamily =" not in code


def test_render_variant():
    assert (
        render_variant(variant("Roboto", "roboto_bold", FontWeight.BOLD))
        == "Font(R.font.roboto_bold, FontWeight.Bold)"
    )
    assert (
        render_variant(variant("Roboto", "roboto_it", style=FontStyle.ITALIC))
        == f"Font(R.font.roboto_it, FontWeight.Normal, {ITALIC_TOKEN})"
    )


def test_roboto_family_block():
    families = {
        "Roboto": [
            variant("Roboto", "roboto_bold", FontWeight.BOLD),
            variant("Roboto", "roboto_italic", style=FontStyle.ITALIC),
        ]
    }

    code = template_fonts_for_jetpack_compose(families)

    assert code == (
        "val RobotoFontFamily = FontFamily(\r\n"
        "\tFont(R.font.roboto_bold, FontWeight.Bold),\r\n"
        "\tFont(R.font.roboto_italic, FontWeight.Normal, FontStyle.Italic)\r\n"
        ")\r\n\r\n\r\n"
    )


def test_single_italic_family_has_no_trailing_separator():
    families = {
        "Caveat": [variant("Caveat", "caveat_italic", FontWeight.MEDIUM, FontStyle.ITALIC)]
    }

    code = template_fonts_for_jetpack_compose(families)
    lines = code.split("\r\n")

    variant_lines = [line for line in lines if line.startswith("\tFont(")]
    assert variant_lines == [
        "\tFont(R.font.caveat_italic, FontWeight.Medium, FontStyle.Italic)"
    ]
    assert not variant_lines[0].endswith(",")
    assert variant_lines[0].count(",") == 2


def test_families_sorted_by_name_by_default():
    families = {
        "Zilla": [variant("Zilla", "zilla")],
        "Arvo": [variant("Arvo", "arvo")],
    }

    code = template_fonts_for_jetpack_compose(families)

    assert code.index("ArvoFontFamily") < code.index("ZillaFontFamily")


def test_families_keep_mapping_order_without_sort():
    families = {
        "Zilla": [variant("Zilla", "zilla")],
        "Arvo": [variant("Arvo", "arvo")],
    }

    code = template_fonts_for_jetpack_compose(families, sort_families=False)

    assert code.index("ZillaFontFamily") < code.index("ArvoFontFamily")


def test_lf_line_endings():
    families = {"Arvo": [variant("Arvo", "arvo"), variant("Arvo", "arvo_bold", FontWeight.BOLD)]}

    code = template_fonts_for_jetpack_compose(families, newline="\n")

    assert "\r" not in code
    assert code == (
        "val ArvoFontFamily = FontFamily(\n"
        "\tFont(R.font.arvo, FontWeight.Normal),\n"
        "\tFont(R.font.arvo_bold, FontWeight.Bold)\n"
        ")\n\n\n"
    )


def test_empty_mapping_renders_nothing():
    assert template_fonts_for_jetpack_compose({}) == ""
