"""Tests for responsive value resolution and editor helpers."""

import copy
import math

import pytest

from storefrontctl.domain.breakpoints import Breakpoint
from storefrontctl.domain.responsive import (
    clamp,
    get_responsive_number,
    is_responsive_map,
    is_responsive_number_path,
    resolve_responsive_number,
    resolve_responsive_style,
    resolve_responsive_value,
    sanitize_number_for_path,
    sanitize_value_for_path,
    set_responsive_number,
)


class TestResolveResponsiveNumber:
    def test_own_tier(self) -> None:
        assert resolve_responsive_number({"mobile": 1, "desktop": 3}, "mobile") == 1

    def test_tablet_falls_back_to_desktop(self) -> None:
        assert resolve_responsive_number({"mobile": 1, "desktop": 3}, "tablet") == 3

    def test_desktop_only_map(self) -> None:
        assert resolve_responsive_number({"desktop": 3}, "tablet") == 3
        assert resolve_responsive_number({"desktop": 3}, Breakpoint.MOBILE) == 3

    @pytest.mark.parametrize("bp", ["mobile", "tablet", "desktop"])
    def test_scalar_passthrough(self, bp: str) -> None:
        assert resolve_responsive_number(7, bp) == 7

    def test_mobile_never_falls_back_to_tablet(self) -> None:
        assert resolve_responsive_number({"tablet": 2, "desktop": 3}, "mobile") == 3
        assert resolve_responsive_number({"tablet": 2}, "mobile") is None

    def test_default_when_nothing_applies(self) -> None:
        assert resolve_responsive_number({"mobile": 1}, "desktop", default=9) == 9
        assert resolve_responsive_number(None, "desktop", default=9) == 9

    def test_non_numeric_tiers_are_ignored(self) -> None:
        assert resolve_responsive_number({"mobile": "big", "desktop": 4}, "mobile") == 4
        assert resolve_responsive_number({"mobile": True, "desktop": 2}, "mobile") == 2

    def test_non_numeric_scalar_yields_default(self) -> None:
        assert resolve_responsive_number("12", "mobile", default=5) == 5
        assert resolve_responsive_number(False, "mobile") is None


class TestResolveResponsiveValue:
    def test_scalar_unchanged(self) -> None:
        assert resolve_responsive_value("#fff", "mobile") == "#fff"

    def test_none_gives_default(self) -> None:
        assert resolve_responsive_value(None, "mobile", default="x") == "x"

    def test_plain_mapping_passes_through(self) -> None:
        value = {"color": "red"}
        assert resolve_responsive_value(value, "mobile") is value

    def test_none_tier_falls_back(self) -> None:
        assert resolve_responsive_value({"mobile": None, "desktop": "b"}, "mobile") == "b"

    def test_is_responsive_map(self) -> None:
        assert is_responsive_map({"desktop": 1})
        assert not is_responsive_map({"lg": 1})
        assert not is_responsive_map(5)


class TestResolveResponsiveStyle:
    STYLE = {
        "fontSize": {"mobile": 12, "desktop": 20},
        "lineHeight": {"mobile": 1.2, "desktop": 1.4},
        "color": "#111111",
    }

    def test_mobile(self) -> None:
        assert resolve_responsive_style(self.STYLE, "mobile") == {
            "fontSize": 12,
            "lineHeight": 1.2,
            "color": "#111111",
        }

    def test_tablet_resolves_each_key_to_desktop(self) -> None:
        assert resolve_responsive_style(self.STYLE, "tablet") == {
            "fontSize": 20,
            "lineHeight": 1.4,
            "color": "#111111",
        }

    def test_input_not_mutated(self) -> None:
        before = copy.deepcopy(self.STYLE)
        resolve_responsive_style(self.STYLE, "mobile")
        assert self.STYLE == before

    def test_unresolvable_keys_omitted(self) -> None:
        assert resolve_responsive_style({"gap": {"tablet": 4}, "margin": None}, "mobile") == {}

    def test_nested_plain_mapping_kept(self) -> None:
        style = {"shadow": {"x": 1, "y": 2}}
        assert resolve_responsive_style(style, "desktop") == style

    @pytest.mark.parametrize("style", [None, "color: red", 3, ["a"]])
    def test_non_mapping_is_empty(self, style: object) -> None:
        assert resolve_responsive_style(style, "mobile") == {}


class TestEditorHelpers:
    def test_get_all_reads_desktop(self) -> None:
        assert get_responsive_number({"mobile": 1, "desktop": 3}, "all") == 3
        assert get_responsive_number(5, "all") == 5
        assert get_responsive_number({"mobile": 1}, "all") is None

    def test_get_breakpoint_uses_fallback(self) -> None:
        assert get_responsive_number({"desktop": 3}, "tablet") == 3

    def test_set_all_collapses_to_scalar(self) -> None:
        assert set_responsive_number({"mobile": 1, "desktop": 3}, "all", 8) == 8

    def test_set_on_scalar_keeps_it_as_desktop(self) -> None:
        assert set_responsive_number(10, "mobile", 4) == {"desktop": 10, "mobile": 4}

    def test_set_returns_new_map(self) -> None:
        current = {"mobile": 1, "desktop": 3}
        updated = set_responsive_number(current, "tablet", 2)
        assert updated == {"mobile": 1, "tablet": 2, "desktop": 3}
        assert current == {"mobile": 1, "desktop": 3}

    @pytest.mark.parametrize(
        "path",
        [
            "layout.hero.imageHeight",
            "layout.featured.columns",
            "layout.featured.card.radius",
            "styles.background.opacity",
            "layout.hero.image.posX",
            "layout.hero.title.style.fontSize",
        ],
    )
    def test_responsive_number_paths(self, path: str) -> None:
        assert is_responsive_number_path(path)

    @pytest.mark.parametrize("path", ["", "layout.hero.title", "layout.header.sticky"])
    def test_non_responsive_paths(self, path: str) -> None:
        assert not is_responsive_number_path(path)


class TestSanitize:
    def test_clamp_nan_to_low(self) -> None:
        assert clamp(float("nan"), 2, 5) == 2

    @pytest.mark.parametrize(
        ("path", "value", "expected"),
        [
            ("layout.hero.image.posX", 1.5, 1),
            ("styles.background.opacity", -0.2, 0),
            ("layout.featured.columns", 9, 6),
            ("layout.featured.columns", 2.6, 3),
            ("layout.hero.image.scaleX", 0, 0.1),
            ("layout.hero.title.style.fontSize", 200, 96),
            ("layout.hero.title.style.fontWeight", 451, 451),
            ("layout.hero.title.style.fontWeight", 50, 100),
            ("layout.hero.title.style.lineHeight", 0.1, 0.8),
            ("layout.hero.title.style.letterSpacing", 30, 20),
            ("layout.hero.paddingX", -4, 0),
            ("layout.hero.imageHeight", 9000, 800),
            ("layout.hero.title.text", 9000, 9000),
        ],
    )
    def test_number_rules(self, path: str, value: float, expected: float) -> None:
        assert sanitize_number_for_path(path, value) == expected

    def test_scalar_reports_change(self) -> None:
        assert sanitize_value_for_path("layout.hero.paddingY", 900) == (800, True)
        assert sanitize_value_for_path("layout.hero.paddingY", 40) == (40, False)

    def test_nan_scalar_reports_change(self) -> None:
        value, changed = sanitize_value_for_path("layout.hero.paddingY", math.nan)
        assert value == 0
        assert changed is True

    def test_responsive_map_per_tier(self) -> None:
        value, changed = sanitize_value_for_path(
            "layout.featured.columns", {"mobile": 0, "desktop": 4, "note": "x"}
        )
        assert value == {"mobile": 1, "desktop": 4, "note": "x"}
        assert changed is True

    def test_other_values_untouched(self) -> None:
        assert sanitize_value_for_path("layout.hero.title", {"type": "text"}) == ({"type": "text"}, False)

    def test_integer_too_large_for_float(self) -> None:
        huge = 10**400
        assert clamp(huge, 0, 800) == 800
        assert sanitize_value_for_path("layout.hero.paddingX", huge) == (800, True)
        assert sanitize_value_for_path("layout.hero.paddingX", {"mobile": huge, "desktop": 12}) == (
            {"mobile": 800, "desktop": 12},
            True,
        )
        assert sanitize_number_for_path("layout.hero.title.text", huge) == huge
