"""
Shared formatting helpers for console output.
"""

RULE_WIDTH = 50


def format_budget(amount: int | float) -> str:
    """Return a budget in millions with one decimal (e.g., '$900.0M')."""
    return f"${amount / 1_000_000:.1f}M"


def format_count(count: int, noun: str) -> str:
    """Return '1 manager' / '3 managers'."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def rule(char: str = "=") -> str:
    return char * RULE_WIDTH
