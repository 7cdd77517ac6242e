import re

MAX_EMAIL_LENGTH = 100

# CDN/avatar artifacts such as "logo@2x.png" look like addresses
_IMAGE_MARKERS = (".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg", "@2x")

# Error tracking, avatar services and placeholder domains
_BLOCKED_EMAIL_DOMAINS = (
    "sentry.io",
    "sentry.wixpress.com",
    "sentry-next.wixpress.com",
    "gravatar.com",
    "example.com",
    "domain.com",
    "yourcompany.com",
    "test.com",
    "placeholder.com",
)

_EMAIL_FULL_RE = re.compile(
    r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}",
)


def _normalize(email: str) -> str:
    return email.strip().lower()


def validate_email(email: str | None) -> bool:
    """Check whether a candidate looks like a real business contact address."""
    if not email or not email.strip():
        return False

    email = _normalize(email)

    if any(marker in email for marker in _IMAGE_MARKERS):
        return False

    if any(domain in email for domain in _BLOCKED_EMAIL_DOMAINS):
        return False

    if not _EMAIL_FULL_RE.fullmatch(email):
        return False

    if len(email) > MAX_EMAIL_LENGTH:
        return False

    _, _, domain = email.partition("@")
    return "." in domain


def clean_emails(emails: list[str] | None) -> list[str]:
    """Normalize, validate and deduplicate, keeping first-seen order."""
    seen: set[str] = set()
    valid: list[str] = []

    for raw in emails or []:
        email = _normalize(raw)
        if not email or email in seen:
            continue
        if validate_email(email):
            seen.add(email)
            valid.append(email)

    return valid
