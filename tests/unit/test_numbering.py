"""Unit tests for Hebrew numerals."""

import pytest

from bible_viewer.core.numbering import number_to_hebrew


@pytest.mark.parametrize("number_base0, expected", [
    (0, "א"),
    (8, "ט"),
    (9, "י"),
    (10, "יא"),
    (14, "טו"),
    (15, "טז"),
    (16, "יז"),
    (19, "כ"),
    (99, "ק"),
    (122, "קכג"),
    (149, "קנ"),
    (175, "קעו"),
    (498, "תצט"),
])
def test_number_to_hebrew(number_base0, expected):
    assert number_to_hebrew(number_base0) == expected


@pytest.mark.parametrize("number_base0", [-1, 499, 1000])
def test_number_to_hebrew_out_of_range(number_base0):
    with pytest.raises(ValueError):
        number_to_hebrew(number_base0)
