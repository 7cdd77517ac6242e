import re
from types import MappingProxyType

from app.schemas.scrape import CountryPhoneRule


def _rule(code: str, min_digits: int, max_digits: int, country: str) -> CountryPhoneRule:
    return CountryPhoneRule(
        code=code, min_digits=min_digits, max_digits=max_digits, country=country
    )


# Digit counts exclude the country code itself
COUNTRY_PHONE_RULES = MappingProxyType({
    r.code: r
    for r in (
        _rule("+1", 10, 10, "USA/Canada"),
        _rule("+44", 10, 10, "United Kingdom"),
        _rule("+49", 10, 11, "Germany"),
        _rule("+90", 10, 10, "Turkey"),
        _rule("+91", 10, 10, "India"),
        _rule("+33", 9, 9, "France"),
        _rule("+39", 9, 10, "Italy"),
        _rule("+34", 9, 9, "Spain"),
        _rule("+31", 9, 9, "Netherlands"),
        _rule("+32", 8, 9, "Belgium"),
        _rule("+41", 9, 9, "Switzerland"),
        _rule("+43", 10, 13, "Austria"),
        _rule("+46", 9, 10, "Sweden"),
        _rule("+48", 9, 9, "Poland"),
        _rule("+420", 9, 9, "Czech Republic"),
        _rule("+55", 10, 11, "Brazil"),
        _rule("+52", 10, 10, "Mexico"),
        _rule("+81", 10, 10, "Japan"),
        _rule("+82", 9, 10, "South Korea"),
        _rule("+86", 11, 11, "China"),
        _rule("+61", 9, 9, "Australia"),
    )
})

# Longest first so "+1" never shadows "+420"-style codes
_CODES_LONGEST_FIRST = tuple(
    sorted(COUNTRY_PHONE_RULES, key=len, reverse=True)
)

_SEPARATORS_RE = re.compile(r"[\s\-().]")
_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)


def format_phone_with_country_code(phone: str, country_code: str) -> str:
    """Strip separators and prepend ``country_code`` when no ``+`` is present."""
    cleaned = _SEPARATORS_RE.sub("", phone)
    if cleaned.startswith("+"):
        return cleaned
    return f"{country_code}{cleaned}"


def get_country_code_from_phone(phone: str) -> str | None:
    for code in _CODES_LONGEST_FIRST:
        if phone.startswith(code):
            return code
    return None


def validate_phone_number(phone: str | None) -> bool:
    """Check a ``+``-prefixed number against its country's digit-count rule."""
    if not phone or not phone.strip():
        return False

    phone = phone.strip()
    if not phone.startswith("+"):
        return False

    code = get_country_code_from_phone(phone)
    if code is None:
        return False

    rule = COUNTRY_PHONE_RULES[code]
    national = _NON_DIGIT_RE.sub("", phone[len(code):])
    return rule.min_digits <= len(national) <= rule.max_digits


def clean_phone_numbers(phones: list[str] | None, default_country_code: str) -> list[str]:
    """Normalize, validate and deduplicate, keeping first-seen order."""
    seen: set[str] = set()
    valid: list[str] = []

    for raw in phones or []:
        raw = raw.strip()
        if not raw:
            continue
        phone = format_phone_with_country_code(raw, default_country_code)
        if phone not in seen and validate_phone_number(phone):
            seen.add(phone)
            valid.append(phone)

    return valid
