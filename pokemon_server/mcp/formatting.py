"""Text rendering for Pokemon tool results."""

from typing import TYPE_CHECKING

from .errors import ComparisonError, ComparisonErrorKind

if TYPE_CHECKING:
    from .pokeapi import CreatureRecord


def title_case(text: str) -> str:
    """Upper-case the first letter of each word.

    A word starts at the beginning of the string or after any character
    that is not a letter, digit or underscore, so 'mr-mime' becomes
    'Mr-Mime'. Unlike str.title(), the rest of each word is left alone,
    which keeps 'porygon2' as 'Porygon2' and makes the function idempotent.
    """
    chars = []
    at_word_start = True
    for ch in text:
        chars.append(ch.upper() if at_word_start else ch)
        at_word_start = not (ch.isalnum() or ch == "_")
    return "".join(chars)


def format_single(record: "CreatureRecord") -> str:
    """Render one Pokemon's attributes."""
    response = (
        f"🔍 Pokemon Information for {record.display_name}:\n\n"
        f"Height: {record.height} decimeters\n"
        f"Weight: {record.weight} hectograms\n"
        f"Types: {', '.join(record.types)}\n\n"
        "Base Stats:\n"
    )
    for stat in record.stats:
        response += f"{stat.name}: {stat.value}\n"
    return response


def format_compare(a: "CreatureRecord", b: "CreatureRecord") -> str:
    """Render a positional stat-by-stat comparison of two Pokemon.

    Stat names are taken from `a`. Stats are paired by index, so `b` must
    have at least as many stats as `a`; extra stats on `b` are ignored.

    Raises:
        ComparisonError: if `b` has fewer stats than `a`.
    """
    if len(b.stats) < len(a.stats):
        raise ComparisonError(
            ComparisonErrorKind.STAT_COUNT_MISMATCH,
            f"{b.display_name} has {len(b.stats)} stats, "
            f"expected at least {len(a.stats)} to match {a.display_name}",
        )

    comparison = f"⚔️ Pokemon Comparison: {a.display_name} vs {b.display_name}\n\n"
    comparison += "Base Stats Comparison:\n"
    for stat1, stat2 in zip(a.stats, b.stats):
        comparison += f"{stat1.name}: {stat1.value} vs {stat2.value}\n"
    return comparison
