"""Thousands grouping and decimal point substitution."""

from __future__ import annotations


def group_digits(number: str, group_separator: str = ",", decimal_point: str = ".") -> str:
    """Insert *group_separator* every three integer digits and swap in *decimal_point*.

    Expects canonical decimal text (optional ``-``, digits, optional ``.`` and
    digits); there is no failure path. ``-12345678.00`` becomes
    ``-12,345,678.00`` and ``678`` is returned as is.
    """
    whole, dot, fraction = number.partition(".")

    sign = ""
    if whole.startswith("-"):
        sign, whole = "-", whole[1:]

    groups = []
    while len(whole) > 3:
        groups.append(whole[-3:])
        whole = whole[:-3]
    groups.append(whole)
    grouped = group_separator.join(reversed(groups))

    if dot:
        return f"{sign}{grouped}{decimal_point}{fraction}"
    return f"{sign}{grouped}"
