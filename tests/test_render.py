from __future__ import annotations

import pytest

import A113028_Solver as a113


def test_small_base_uses_alphanumeric_symbols():
    assert a113.render_number(9867312, 10) == "9867312"
    assert a113.render_number(152, 6) == "412"
    assert a113.render_number(35, 36) == "z"
    assert a113.render_number(255, 16) == "ff"


def test_large_base_uses_digit_list():
    n = 36 * 37 * 37 + 1 * 37 + 0
    assert a113.to_base_digits(n, 37) == [36, 1, 0]
    assert a113.render_number(n, 37) == "[36, 1, 0]"


def test_zero_and_format():
    assert a113.to_base_digits(0, 10) == [0]
    assert a113.format_number(54, 4) == "54 312"


def test_negative_has_no_digits():
    with pytest.raises(ValueError):
        a113.to_base_digits(-1, 10)


def test_has_a113028_property():
    assert a113.has_a113028_property(9867312, 10)
    assert a113.has_a113028_property(1, 2)
    assert not a113.has_a113028_property(0, 10)
    assert not a113.has_a113028_property(9876321, 10)  # odd, so not divisible by 8, 6 or 2
    assert not a113.has_a113028_property(110, 10)      # repeated digit and a zero
    assert not a113.has_a113028_property(22, 10)       # repeated digit
