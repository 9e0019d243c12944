"""Human-readable number and age formatting."""


def format_number(num: int | float) -> str:
    """Compact a count: 999 -> "999", 1500 -> "1.5K", 2300000 -> "2.3M"."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


def format_grouped(num: int | float) -> str:
    """Exact count with thousands separators, used in tooltips."""
    return f"{num:,}"


def format_score(score: float) -> str:
    """Score with one decimal place."""
    return f"{score:.1f}"


def format_days_ago(days: int) -> str:
    """Describe an age in days, rounding down to whole weeks, months or years."""
    if days == 0:
        return "today"
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    if days < 365:
        return f"{days // 30} months ago"
    return f"{days // 365} years ago"
