"""Tests for the color table, lookup and scaling."""

import pytest

from bstick.colors import (COLOR_OFF, COLOR_TABLE, Color, ColorNotFoundError,
                           color_names, resolve, scale)
from bstick.protocol import BlinkStickError


class TestResolve:

    @pytest.mark.parametrize("name, rgb", [
        ("blue", (0x00, 0x00, 0xFF)),
        ("red", (0xFF, 0x00, 0x00)),
        ("green", (0x00, 0x80, 0x00)),
        ("lime", (0x00, 0xFF, 0x00)),
        ("cornflowerblue", (0x64, 0x95, 0xED)),
        ("lightgoldenrodyellow", (0xFA, 0xFA, 0xD2)),
        ("yellowgreen", (0x9A, 0xCD, 0x32)),
    ])
    def test_known_values(self, name, rgb):
        assert resolve(name) == Color(*rgb, 0xFF)

    def test_blue_scenario(self):
        assert tuple(resolve("blue")) == (0, 0, 255, 255)

    def test_off_is_black(self):
        assert resolve("off") == resolve("black") == COLOR_OFF

    def test_gray_grey_synonyms(self):
        assert resolve("gray") == resolve("grey")
        assert resolve("darkslategray") == resolve("darkslategrey")

    def test_case_sensitive(self):
        assert resolve("red") == Color(255, 0, 0)
        with pytest.raises(ColorNotFoundError):
            resolve("Red")

    @pytest.mark.parametrize("name", ["", "redd", " red", "red ", "#ff0000", "RED", "rebeccapurple"])
    def test_unknown_names(self, name):
        with pytest.raises(ColorNotFoundError) as exc:
            resolve(name)
        assert exc.value.name == name
        assert str(exc.value) == f'Invalid color "{name}"'

    def test_error_hierarchy(self):
        with pytest.raises(BlinkStickError):
            resolve("nope")
        with pytest.raises(KeyError):
            resolve("nope")


class TestTable:

    def test_size(self):
        # 147 extended color names plus "off"
        assert len(COLOR_TABLE) == 148

    def test_all_opaque_bytes(self):
        for name, c in COLOR_TABLE.items():
            assert c.a == 0xFF, name
            assert all(0 <= ch <= 0xFF for ch in c), name

    def test_keys_lowercase(self):
        assert all(k == k.lower() for k in COLOR_TABLE)

    def test_read_only(self):
        with pytest.raises(TypeError):
            COLOR_TABLE["mine"] = Color(1, 2, 3)

    def test_color_names_sorted(self):
        names = color_names()
        assert names == sorted(names)
        assert "off" in names


class TestScale:

    def test_endpoints(self):
        c = Color(200, 100, 7)
        assert scale(c, 0, 15) == COLOR_OFF
        assert scale(c, 15, 15) == c

    def test_truncates(self):
        assert scale(Color(255, 10, 1), 1, 2) == Color(127, 5, 0)

    def test_alpha_preserved(self):
        assert scale(Color(10, 20, 30, 0x80), 1, 3).a == 0x80

    def test_monotonic(self):
        c = Color(255, 37, 3)
        samples = [scale(c, j, 15) for j in range(16)]
        for lo, hi in zip(samples, samples[1:]):
            assert lo.r <= hi.r and lo.g <= hi.g and lo.b <= hi.b

    def test_zero_denominator(self):
        with pytest.raises(ValueError):
            scale(Color(1, 1, 1), 0, 0)
