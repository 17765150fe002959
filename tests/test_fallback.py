"""Tests for fallback generation over declarations."""

import pytest

from color_fallback.color import ParseError
from color_fallback.fallback import (
    Declaration,
    convert_value,
    fallback_color,
    legacy_filter_value,
    process_declaration,
    process_declarations,
)
from color_fallback.options import FallbackOptions, ResolvedOptions

OLDIE = FallbackOptions(oldie=True).resolve()


def decl(prop, value):
    return Declaration(property=prop, value=value)


# Single expression -----------------------------------------------

def test_fallback_color_over_white():
    assert fallback_color("rgba(255,0,0,0.5)") == "#ff7f7f"


def test_fallback_color_custom_background():
    assert fallback_color("rgba(255,255,255,0.5)", "#000") == "#7f7f7f"


def test_fallback_color_hsla():
    assert fallback_color("hsla(0,100%,50%,0.5)") == "#ff7f7f"


def test_fallback_color_raises_on_garbage():
    with pytest.raises(ParseError):
        fallback_color("rgba(x,y,z)")


def test_legacy_filter_value_template():
    assert legacy_filter_value("#66999999") == (
        "progid:DXImageTransform.Microsoft.gradient(startColorStr=#66999999,endColorStr=#66999999)"
    )


# Values ----------------------------------------------------------

def test_convert_value_inside_shorthand():
    value, alpha, _ = convert_value("1px solid rgba(0,0,0,0.5)")
    assert value == "1px solid #7f7f7f"
    assert alpha == 0.5


def test_convert_value_multiple_expressions():
    value, alpha, _ = convert_value("linear-gradient(rgba(255,255,255,0.5), rgba(0, 0, 0, 0.25))")
    assert value == "linear-gradient(#ffffff, #bfbfbf)"
    assert alpha == 0.25


def test_convert_value_keeps_unparsable_expression():
    value, alpha, _ = convert_value("rgba(x,y,z), rgba(0,0,0,0.5)")
    assert value == "rgba(x,y,z), #7f7f7f"
    assert alpha == 0.5


def test_convert_value_nothing_to_do():
    assert convert_value("#fff") == ("#fff", None, None)


# Single declaration ----------------------------------------------

def test_scenario_color_property():
    result = process_declaration(decl("color", "rgba(255,0,0,0.5)"))
    assert result.changed
    assert result.fallback == decl("color", "#ff7f7f")
    assert result.filters == []


def test_ineligible_property_is_untouched():
    assert not process_declaration(decl("width", "rgba(255,0,0,0.5)")).changed


def test_custom_property_list():
    options = FallbackOptions(properties=["box-shadow"]).resolve()
    assert process_declaration(decl("box-shadow", "0 0 1px rgba(0,0,0,0.5)"), options).changed
    assert not process_declaration(decl("color", "rgba(0,0,0,0.5)"), options).changed


def test_value_without_alpha_color_is_untouched():
    assert not process_declaration(decl("color", "rgb(1,2,3)")).changed


def test_malformed_value_is_untouched():
    result = process_declaration(decl("color", "rgba(x,y,z)"))
    assert not result.changed
    assert result.filters == []


def test_same_previous_property_skips():
    result = process_declaration(decl("color", "rgba(0,0,0,0.5)"), previous_property="color")
    assert not result.changed


def test_legacy_filters_for_background_color():
    result = process_declaration(decl("background-color", "rgba(0,0,0,0.4)"), OLDIE)
    assert result.fallback == decl("background-color", "#999999")
    gradient = legacy_filter_value("#66999999")
    assert result.filters == [
        decl("-ms-filter", f'"{gradient}"'),
        decl("filter", gradient),
    ]


def test_legacy_filters_restricted_to_listed_properties():
    assert process_declaration(decl("color", "rgba(0,0,0,0.4)"), OLDIE).filters == []
    only_color = FallbackOptions(oldie=["color"]).resolve()
    filters = process_declaration(decl("color", "rgba(255,0,0,0.5)"), only_color).filters
    assert [f.property for f in filters] == ["-ms-filter", "filter"]
    assert "#80ff7f7f" in filters[1].value


def test_no_legacy_filters_for_opaque_alpha():
    result = process_declaration(decl("background", "rgba(0,0,0,1)"), OLDIE)
    assert result.fallback == decl("background", "#000000")
    assert result.filters == []


# Declaration lists -----------------------------------------------

def test_process_declarations_with_legacy_filters():
    original = decl("background-color", "rgba(0,0,0,0.4)")
    out = process_declarations([original], OLDIE)
    assert [d.property for d in out] == ["-ms-filter", "filter", "background-color", "background-color"]
    assert out[2].value == "#999999"
    assert out[-1] == original
    assert out[1].value.startswith("progid:DXImageTransform.Microsoft.gradient(startColorStr=#66")


def test_process_declarations_malformed_untouched():
    decls = [decl("color", "rgba(x,y,z)"), decl("background", "rgba(0,0,0,0.5)")]
    out = process_declarations(decls)
    assert out[0] == decls[0]
    assert out[1:] == [decl("background", "#7f7f7f"), decls[1]]


def test_process_declarations_existing_fallback():
    decls = [decl("color", "#fff"), decl("color", "rgba(0,0,0,0.5)")]
    assert process_declarations(decls) == decls


@pytest.mark.parametrize("options", [ResolvedOptions(), OLDIE])
def test_process_declarations_idempotent(options):
    decls = [
        decl("margin", "0"),
        decl("background", "rgba(0,0,0,0.4)"),
        decl("color", "hsla(120,100%,50%,0.5)"),
    ]
    first = process_declarations(decls, options)
    second = process_declarations(first, options)
    assert second == first
    assert len(first) > len(decls)


def test_overlong_channel_leaves_declaration_untouched():
    decls = [
        decl("color", "rgba(" + "9" * 5000 + ",0,0,0.5)"),
        decl("background", "rgba(0,0,0,0.5)"),
    ]
    assert not process_declaration(decls[0]).changed
    out = process_declarations(decls)
    assert out == [decls[0], decl("background", "#7f7f7f"), decls[1]]
