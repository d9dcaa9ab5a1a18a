"""Hebrew numerals for chapter and verse locations."""

_UNITS = "אבגדהוזחטי"
_TENS = "יכלמנסעפצק"
_HUNDREDS = "קרשת"


def number_to_hebrew(number_base0: int) -> str:
    """
    Convert a 0-based index to a 1-based Hebrew numeral.

        0  -->    "א"
        9  -->    "י"
       14  -->   "טו"
       15  -->   "טז"
      122  -->  "קכג"

    Args:
        number_base0: 0-based index, below 499

    Returns:
        The Hebrew numeral of ``number_base0 + 1``
    """
    if number_base0 < 0 or number_base0 >= 499:
        raise ValueError(f"number_to_hebrew({number_base0}) - base-0 number is out of range")
    if number_base0 < 10:
        return _UNITS[number_base0]

    number_base1 = number_base0 + 1
    # avoid spelling divine names
    if number_base1 == 15:
        return "טו"
    if number_base1 == 16:
        return "טז"

    digit1 = number_base1 % 10
    digit2 = (number_base1 // 10) % 10
    digit3 = number_base1 // 100
    return (
        (_HUNDREDS[digit3 - 1] if digit3 else "")
        + (_TENS[digit2 - 1] if digit2 else "")
        + (_UNITS[digit1 - 1] if digit1 else "")
    )
