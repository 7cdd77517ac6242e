import re

MAX_CANDIDATES = 5
MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15

_EMAIL_RE = re.compile(
    r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}",
)

# Pooled in this order; earlier patterns win on duplicates.
# \s stays Unicode-aware so non-breaking and thin spaces separate groups.
_PHONE_PATTERNS = (
    # Generic international digit groups
    re.compile(r"\+?[0-9]{1,4}[-.\s]?\(?[0-9]{1,4}\)?[-.\s]?[0-9]{1,4}[-.\s]?[0-9]{1,9}"),
    # US (xxx) xxx-xxxx
    re.compile(r"\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}"),
    # xxx-xxx-xxxx
    re.compile(r"[0-9]{3}[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}"),
    # +cc n n n
    re.compile(r"\+[0-9]{1,4}\s?[0-9]{1,4}\s?[0-9]{1,4}\s?[0-9]{1,9}"),
)

_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)


def _digits_only(value: str) -> str:
    return _NON_DIGIT_RE.sub("", value)


def _unique_first(items, limit: int = MAX_CANDIDATES) -> list[str]:
    """Deduplicate preserving first-seen order, then truncate."""
    return list(dict.fromkeys(items))[:limit]


def extract_emails(html: str) -> list[str]:
    return _unique_first(m.group(0) for m in _EMAIL_RE.finditer(html))


def extract_phones(html: str) -> list[str]:
    """Pool matches of every phone pattern, keep plausible digit counts."""
    pooled = [
        m.group(0)
        for pattern in _PHONE_PATTERNS
        for m in pattern.finditer(html)
    ]
    plausible = (
        p for p in pooled
        if MIN_PHONE_DIGITS <= len(_digits_only(p)) <= MAX_PHONE_DIGITS
    )
    return _unique_first(plausible)
