"""Unit tests for the Style Compiler."""

import logging

import pytest

from screendsl.style import (
    GradientDescriptor,
    StyleInputError,
    StyleOptions,
    apply_metrics_positioning,
    build_text_style,
    camelize,
    compile_style,
    extract_gradient,
    first_color,
    has_unit,
    is_color_token,
    parse_gradient,
    resolve_font_weight,
    split_commas,
    split_tokens,
    to_length,
    with_color_opacity,
)

# =============================================================================
# Token Helpers
# =============================================================================


class TestTokens:
    """Tests for token-level parsing helpers."""

    @pytest.mark.unit
    def test_split_tokens_keeps_color_functions(self):
        """Whitespace inside parentheses does not split a token."""
        assert split_tokens("1px solid rgba(0, 0, 0, 0.2)") == [
            "1px",
            "solid",
            "rgba(0, 0, 0, 0.2)",
        ]

    @pytest.mark.unit
    def test_split_commas_keeps_color_functions(self):
        """Commas inside parentheses do not split a part."""
        assert split_commas("90deg, #fff , rgba(0, 0, 0, 0.5)") == [
            "90deg",
            "#fff",
            "rgba(0, 0, 0, 0.5)",
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("12px", 12),
            ("12.5pt", 12.5),
            ("4dp", 4),
            ("8", 8),
            (" -2px ", -2),
            (3, 3),
            ("auto", "auto"),
            ("50%", "50%"),
        ],
    )
    def test_to_length(self, value, expected):
        """Unit-suffixed and bare numeric strings become numbers."""
        assert to_length(value) == expected

    @pytest.mark.unit
    def test_has_unit(self):
        """Only numbers with a length suffix count as unit tokens."""
        assert has_unit("4dp")
        assert not has_unit("4")
        assert not has_unit("solid")

    @pytest.mark.unit
    def test_is_color_token(self):
        """Hex and colour functions are recognised."""
        assert is_color_token("#fff")
        assert is_color_token("rgba(1, 2, 3, 0.4)")
        assert is_color_token("hsl(0, 50%, 50%)")
        assert not is_color_token("solid")

    @pytest.mark.unit
    def test_first_color_is_leftmost(self):
        """The earliest literal colour in the string wins."""
        text = "linear-gradient(90deg, rgba(0,0,0,0.1), #222)"
        assert first_color(text) == "rgba(0,0,0,0.1)"
        assert first_color("no colours here") is None


class TestParseGradient:
    """Tests for linear-gradient parsing."""

    @pytest.mark.unit
    def test_degree_angle(self):
        """Leading deg token becomes the angle."""
        gradient = parse_gradient("linear-gradient(90deg, #111111, #222222)")
        assert gradient.angle == 90
        assert gradient.colors == ["#111111", "#222222"]
        assert gradient.type == "linear"

    @pytest.mark.unit
    def test_direction_keyword(self):
        """'to right' maps to 90 degrees and stop positions are stripped."""
        gradient = parse_gradient(
            "linear-gradient(to right, #ff0000 0%, #0000ff 100%)"
        )
        assert gradient.angle == 90
        assert gradient.colors == ["#ff0000", "#0000ff"]

    @pytest.mark.unit
    def test_corner_direction(self):
        """Corner directions accept either word order."""
        assert parse_gradient("linear-gradient(to top right, #000, #fff)").angle == 45
        assert parse_gradient("linear-gradient(to right top, #000, #fff)").angle == 45

    @pytest.mark.unit
    def test_no_direction(self):
        """Without a direction every part is a colour."""
        gradient = parse_gradient("linear-gradient(#111, rgba(0, 0, 0, 0.5))")
        assert gradient.angle == 0
        assert gradient.colors == ["#111", "rgba(0, 0, 0, 0.5)"]

    @pytest.mark.unit
    def test_unbalanced_is_none(self):
        """Unterminated gradient calls are rejected."""
        assert parse_gradient("linear-gradient(90deg, #111") is None
        assert parse_gradient("#111") is None


# =============================================================================
# compile_style
# =============================================================================


class TestCompileStyleBoundary:
    """Tests for compile_style input handling."""

    @pytest.mark.unit
    def test_none_compiles_to_empty(self):
        """None and wrapped None compile to an empty style."""
        assert compile_style(None) == {}
        assert compile_style({"value": None}) == {}

    @pytest.mark.unit
    def test_non_mapping_raises(self):
        """Non-mapping styles are a contract violation."""
        with pytest.raises(StyleInputError):
            compile_style("color: red")
        with pytest.raises(TypeError):
            compile_style(["padding"])

    @pytest.mark.unit
    def test_wrapped_style_and_values(self):
        """Both the style and its values are unwrapped."""
        style = {"value": {"width": {"const": "240px"}, "color": {"value": "#000"}}}
        assert compile_style(style) == {"width": 240, "color": "#000"}

    @pytest.mark.unit
    def test_none_values_skipped(self):
        """Keys whose value resolves to None are omitted."""
        assert compile_style({"width": None, "height": {"value": None}}) == {}

    @pytest.mark.unit
    def test_kebab_case_keys(self):
        """CSS property names are camelised."""
        assert compile_style({"font-size": "14px", "z-index": "2"}) == {
            "fontSize": 14,
            "zIndex": 2,
        }
        assert camelize("background-color") == "backgroundColor"

    @pytest.mark.unit
    def test_input_not_mutated(self):
        """The source dictionary is left untouched."""
        style = {"padding": "4px 8px"}
        compile_style(style)
        assert style == {"padding": "4px 8px"}

    @pytest.mark.unit
    def test_failed_rule_drops_only_its_key(self, caplog):
        """A malformed shorthand is dropped and logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="screendsl")
        result = compile_style({"padding": "1px 2px 3px 4px 5px", "width": "10px"})
        assert result == {"width": 10}
        assert any("padding" in r.getMessage() for r in caplog.records)


class TestBoxShorthand:
    """Tests for padding/margin expansion."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("4px", {"padding": 4}),
            ("4px 8px", {"paddingVertical": 4, "paddingHorizontal": 8}),
            (
                "1px 2px 3px",
                {"paddingTop": 1, "paddingHorizontal": 2, "paddingBottom": 3},
            ),
            (
                "1px 2px 3px 4px",
                {
                    "paddingTop": 1,
                    "paddingRight": 2,
                    "paddingBottom": 3,
                    "paddingLeft": 4,
                },
            ),
            (12, {"padding": 12}),
        ],
    )
    def test_padding_expansion(self, value, expected):
        """1-4 parts expand to the matching sides."""
        assert compile_style({"padding": value}) == expected

    @pytest.mark.unit
    def test_margin_auto_and_percent(self):
        """auto and percentages are valid box parts."""
        assert compile_style({"margin": "0 auto"}) == {
            "marginVertical": 0,
            "marginHorizontal": "auto",
        }
        assert compile_style({"margin": "5%"}) == {"margin": "5%"}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["1px 2px 3px 4px 5px", "4px large", ""])
    def test_invalid_shorthand_dropped(self, value):
        """Wrong arity or unparseable parts drop the key."""
        assert compile_style({"margin": value}) == {}

    @pytest.mark.unit
    def test_axis_shorthand(self):
        """Inline/Block map to the horizontal and vertical axes."""
        assert compile_style({"paddingInline": "4px"}) == {"paddingHorizontal": 4}
        assert compile_style({"paddingInline": "4px 8px"}) == {
            "paddingLeft": 4,
            "paddingRight": 8,
        }
        assert compile_style({"marginBlock": "2px 6px"}) == {
            "marginTop": 2,
            "marginBottom": 6,
        }
        assert compile_style({"marginBlock": "1px 2px 3px"}) == {}

    @pytest.mark.unit
    def test_side_properties(self):
        """Per-side keys convert lengths directly."""
        assert compile_style({"paddingTop": "6px", "marginHorizontal": "3"}) == {
            "paddingTop": 6,
            "marginHorizontal": 3,
        }


class TestBorder:
    """Tests for border shorthand."""

    @pytest.mark.unit
    def test_full_border(self):
        """Width, colour and style are extracted."""
        assert compile_style({"border": "1px solid rgba(0, 0, 0, 0.2)"}) == {
            "borderWidth": 1,
            "borderColor": "rgba(0, 0, 0, 0.2)",
            "borderStyle": "solid",
        }

    @pytest.mark.unit
    def test_side_border(self):
        """Side borders write side keys and no borderStyle."""
        assert compile_style({"borderBottom": "2px dashed #eee"}) == {
            "borderBottomWidth": 2,
            "borderBottomColor": "#eee",
        }

    @pytest.mark.unit
    def test_numeric_and_none(self):
        """Numbers are widths; 'none' clears the width."""
        assert compile_style({"border": 2}) == {"borderWidth": 2}
        assert compile_style({"border": "none"}) == {"borderWidth": 0}

    @pytest.mark.unit
    def test_unrecognised_border_dropped(self):
        """A border with nothing recognisable is dropped."""
        assert compile_style({"border": "inherit"}) == {}
        assert compile_style({"borderTop": "dashed"}) == {}


class TestBackground:
    """Tests for background colours and gradients."""

    @pytest.mark.unit
    def test_gradient_extraction(self):
        """A gradient yields a descriptor and a solid fallback colour."""
        result = compile_style(
            {"background": "linear-gradient(90deg, #33B8C4BA, #09AAB9)"}
        )
        assert result["gradient"] == {
            "type": "linear",
            "angle": 90,
            "colors": ["#33B8C4BA", "#09AAB9"],
        }
        assert result["backgroundColor"] == "#33B8C4BA"

    @pytest.mark.unit
    def test_gradient_with_color_function(self):
        """rgba stops stay intact and can be the fallback colour."""
        result = compile_style(
            {"backgroundColor": "linear-gradient(180deg, rgba(0, 0, 0, 0.5), #000)"}
        )
        assert result["gradient"]["colors"] == ["rgba(0, 0, 0, 0.5)", "#000"]
        assert result["backgroundColor"] == "rgba(0, 0, 0, 0.5)"

    @pytest.mark.unit
    def test_plain_background(self):
        """Plain values become backgroundColor."""
        assert compile_style({"background": "#fff"}) == {"backgroundColor": "#fff"}
        assert compile_style({"backgroundColor": "red"}) == {"backgroundColor": "red"}

    @pytest.mark.unit
    def test_extract_gradient(self):
        """extract_gradient returns the typed descriptor."""
        compiled = compile_style({"background": "linear-gradient(#111, #222)"})
        gradient = extract_gradient(compiled)
        assert isinstance(gradient, GradientDescriptor)
        assert gradient.colors == ["#111", "#222"]
        assert extract_gradient({"backgroundColor": "#111"}) is None
        assert extract_gradient({"gradient": {"colors": []}}) is None


class TestBorderRadius:
    """Tests for borderRadius handling."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["50%", "999px", "9999px", "10%"])
    def test_full_radius(self, value):
        """Circular radii map to the fixed full radius."""
        assert compile_style({"borderRadius": value}) == {"borderRadius": 9999}

    @pytest.mark.unit
    def test_length_radius(self):
        """Plain lengths become numbers."""
        assert compile_style({"borderRadius": "8px"}) == {"borderRadius": 8}
        assert compile_style({"borderRadius": 8}) == {"borderRadius": 8}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["4px 8px", "8px/4px", "large"])
    def test_unsupported_radius_dropped(self, value):
        """Multi-value and non-numeric radii are dropped."""
        assert compile_style({"borderRadius": value}) == {}

    @pytest.mark.unit
    def test_custom_full_radius(self):
        """StyleOptions overrides the full radius."""
        options = StyleOptions(full_radius=500)
        assert compile_style({"borderRadius": "50%"}, options=options) == {
            "borderRadius": 500
        }


class TestTextProperties:
    """Tests for font and text keys."""

    @pytest.mark.unit
    def test_font_family(self):
        """Only the first family is kept, without quotes."""
        assert compile_style({"fontFamily": "'Poppins', sans-serif"}) == {
            "fontFamily": "Poppins"
        }

    @pytest.mark.unit
    def test_font_weight(self):
        """Weights become numeric strings."""
        assert compile_style({"fontWeight": 700}) == {"fontWeight": "700"}
        assert compile_style({"fontWeight": "Bold"}) == {"fontWeight": "700"}
        assert compile_style({"fontWeight": "600"}) == {"fontWeight": "600"}
        assert compile_style({"fontWeight": "chunky"}) == {}

    @pytest.mark.unit
    def test_text_decoration(self):
        """Unknown decorations fall back to none."""
        assert compile_style({"textDecoration": "underline"}) == {
            "textDecorationLine": "underline"
        }
        assert compile_style({"textDecoration": "overline"}) == {
            "textDecorationLine": "none"
        }

    @pytest.mark.unit
    def test_font_style(self):
        """Only 'italic' is italic."""
        assert compile_style({"fontStyle": "italic"}) == {"fontStyle": "italic"}
        assert compile_style({"fontStyle": "oblique"}) == {"fontStyle": "normal"}

    @pytest.mark.unit
    def test_letter_spacing(self):
        """px is direct, em scales by the base font size."""
        assert compile_style({"letterSpacing": "2px"}) == {"letterSpacing": 2}
        assert compile_style({"letterSpacing": "0.5em"}) == {"letterSpacing": 8}
        assert compile_style({"letterSpacing": "0.1em"})["letterSpacing"] == pytest.approx(1.6)
        assert compile_style({"letterSpacing": "wide"}) == {}

    @pytest.mark.unit
    def test_letter_spacing_base_font_size(self):
        """The em base comes from StyleOptions."""
        options = StyleOptions(base_font_size=10)
        assert compile_style({"letterSpacing": "1em"}, options=options) == {
            "letterSpacing": 10
        }

    @pytest.mark.unit
    def test_keyword_normalisation(self):
        """Keywords are trimmed and lower-cased; flex start/end expand."""
        result = compile_style(
            {
                "textAlign": " Center ",
                "justifyContent": "start",
                "alignItems": "space-between",
                "fontVariant": "small-caps oldstyle-nums",
            }
        )
        assert result == {
            "textAlign": "center",
            "justifyContent": "flex-start",
            "alignItems": "space-between",
            "fontVariant": ["small-caps", "oldstyle-nums"],
        }


class TestEffects:
    """Tests for opacity, shadows and images."""

    @pytest.mark.unit
    def test_opacity(self):
        """Opacity parses floats and percentages."""
        assert compile_style({"opacity": "0.5"}) == {"opacity": 0.5}
        assert compile_style({"opacity": "50%"}) == {"opacity": 0.5}
        assert compile_style({"backgroundOpacity": 80}) == {"opacity": 0.8}
        assert compile_style({"backgroundOpacity": "80%"}) == {"opacity": 0.8}

    @pytest.mark.unit
    def test_box_shadow(self):
        """Offsets, blur and colour map to shadow properties."""
        assert compile_style({"boxShadow": "0px 2px 4px rgba(0, 0, 0, 0.2)"}) == {
            "shadowOffset": {"width": 0, "height": 2},
            "shadowRadius": 4,
            "elevation": 2,
            "shadowColor": "rgba(0, 0, 0, 0.2)",
            "shadowOpacity": 0.3,
        }

    @pytest.mark.unit
    @pytest.mark.parametrize("blur,elevation", [(0, 1), (1, 1), (5, 3), (9, 5)])
    def test_shadow_elevation_rounds_half_up(self, blur, elevation):
        """Elevation is half the blur, rounded half up, at least 1."""
        result = compile_style({"boxShadow": f"0px 0px {blur}px #000"})
        assert result["elevation"] == elevation

    @pytest.mark.unit
    def test_box_shadow_none(self):
        """'none' removes the shadow."""
        assert compile_style({"boxShadow": "none"}) == {}

    @pytest.mark.unit
    def test_object_fit(self):
        """objectFit maps to resizeMode."""
        assert compile_style({"objectFit": "cover"}) == {"resizeMode": "cover"}
        assert compile_style({"objectFit": "fill"}) == {"resizeMode": "stretch"}
        assert compile_style({"objectFit": "scale-down"}) == {"resizeMode": "contain"}


class TestLayoutProperties:
    """Tests for layout and fallback keys."""

    @pytest.mark.unit
    def test_gap_dropped(self):
        """Gap properties are not emitted."""
        assert compile_style({"gap": "8px", "rowGap": 4, "columnGap": "2px"}) == {}

    @pytest.mark.unit
    def test_white_space(self):
        """nowrap becomes a single line; the key itself is not emitted."""
        assert compile_style({"whiteSpace": "nowrap"}) == {"numberOfLines": 1}
        assert compile_style({"whiteSpace": "normal"}) == {}

    @pytest.mark.unit
    def test_display(self):
        """Only none and flex survive."""
        assert compile_style({"display": "none"}) == {"display": "none"}
        assert compile_style({"display": "block"}) == {}

    @pytest.mark.unit
    def test_numeric_parsing(self):
        """zIndex/elevation are ints, flex values are floats."""
        assert compile_style({"zIndex": "10", "elevation": "3.7"}) == {
            "zIndex": 10,
            "elevation": 3,
        }
        assert compile_style({"flex": "1", "flexShrink": "0.5"}) == {
            "flex": 1,
            "flexShrink": 0.5,
        }
        assert compile_style({"flexGrow": "grow"}) == {}

    @pytest.mark.unit
    def test_unknown_keys(self):
        """Other keys strip units or pass through."""
        assert compile_style({"shadowRadius": "6px", "color": "#fff"}) == {
            "shadowRadius": 6,
            "color": "#fff",
        }

    @pytest.mark.unit
    @pytest.mark.parametrize("number", [0, 1, 12, 12.5, 375])
    def test_length_round_trip(self, number):
        """'<n>px' compiles back to n."""
        assert compile_style({"width": f"{number}px"}) == {"width": number}

    @pytest.mark.unit
    def test_percentages_pass_through(self):
        """Percentages are left for the host to resolve."""
        assert compile_style({"width": "50%", "height": "auto"}) == {
            "width": "50%",
            "height": "auto",
        }


# =============================================================================
# Helpers
# =============================================================================


class TestMetricsPositioning:
    """Tests for apply_metrics_positioning."""

    @pytest.mark.unit
    def test_absolute_when_offset_given(self):
        """x/y map to left/top and force absolute positioning."""
        result = apply_metrics_positioning(
            {"color": "#000"}, {"x": 10, "y": {"value": 20}, "width": "100px"}
        )
        assert result == {
            "color": "#000",
            "left": 10,
            "top": 20,
            "width": 100,
            "position": "absolute",
        }

    @pytest.mark.unit
    def test_size_only(self):
        """Without offsets the position is untouched."""
        style = {"position": "relative"}
        result = apply_metrics_positioning(style, {"height": 40})
        assert result == {"position": "relative", "height": 40}
        assert style == {"position": "relative"}

    @pytest.mark.unit
    def test_missing_metrics(self):
        """No metrics returns a copy of the style."""
        assert apply_metrics_positioning({"width": 1}, None) == {"width": 1}


class TestTextHelpers:
    """Tests for font weight, colour opacity and text attributes."""

    @pytest.mark.unit
    def test_resolve_font_weight(self):
        """Named and numeric weights resolve to strings."""
        assert resolve_font_weight("SemiBold") == "600"
        assert resolve_font_weight({"value": "light"}) == "300"
        assert resolve_font_weight(500) == "500"
        assert resolve_font_weight("unknown") == "400"
        assert resolve_font_weight(None, None) is None

    @pytest.mark.unit
    def test_with_color_opacity(self):
        """Hex colours gain an alpha channel; others are unchanged."""
        assert with_color_opacity("#ff0000", 50) == "rgba(255, 0, 0, 0.5)"
        assert with_color_opacity("#fff") == "rgba(255, 255, 255, 1)"
        assert with_color_opacity("#000", 150) == "rgba(0, 0, 0, 1)"
        assert with_color_opacity("#000", -10) == "rgba(0, 0, 0, 0)"
        assert with_color_opacity("red", 50) == "red"
        assert with_color_opacity(None, 50) is None

    @pytest.mark.unit
    def test_build_text_style(self):
        """Text attribute blocks map to text styles."""
        attributes = {
            "color": {"value": "#111"},
            "fontFamily": "Inter",
            "size": "18",
            "bold": {"value": "true"},
            "weight": "300",
            "italic": True,
            "underline": "no",
        }
        assert build_text_style(attributes) == {
            "color": "#111",
            "fontFamily": "Inter",
            "fontSize": 18,
            "fontWeight": "700",
            "fontStyle": "italic",
            "textDecorationLine": "none",
        }

    @pytest.mark.unit
    def test_build_text_style_defaults(self):
        """Unset attributes are omitted; non-mappings give None."""
        assert build_text_style({"weight": "medium"}) == {
            "fontWeight": "500",
            "fontStyle": "normal",
            "textDecorationLine": "none",
        }
        assert build_text_style("bold") is None


class TestLengthUnits:
    """Tests for unit stripping on length properties."""

    @pytest.mark.unit
    def test_width_and_font_size(self):
        """Unit-suffixed and bare numeric strings both parse."""
        assert compile_style({"width": "240px"})["width"] == 240
        assert compile_style({"fontSize": "14"})["fontSize"] == 14


class TestStyleOptions:
    """Tests for StyleOptions."""

    @pytest.mark.unit
    def test_defaults(self):
        """Built-in constants match the documented defaults."""
        options = StyleOptions()
        assert options.base_font_size == 16
        assert options.full_radius == 9999
        assert options.shadow_opacity == 0.3

    @pytest.mark.unit
    def test_from_environment(self, monkeypatch):
        """Options read SCREENDSL_* overrides."""
        monkeypatch.setenv("SCREENDSL_FULL_RADIUS", "1000")
        monkeypatch.setenv("SCREENDSL_SHADOW_OPACITY", "0.5")
        options = StyleOptions.from_environment()
        assert options == StyleOptions(full_radius=1000, shadow_opacity=0.5)
        result = compile_style({"boxShadow": "#000", "borderRadius": "50%"}, options=options)
        assert result == {"shadowColor": "#000", "shadowOpacity": 0.5, "borderRadius": 1000}
