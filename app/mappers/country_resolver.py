import logging
from types import MappingProxyType
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

DEFAULT_TLD = "com"
DEFAULT_COUNTRY_CODE = "+1"

# Second-level labels that form a compound suffix with the last label (co.uk)
_COMPOUND_LABELS = frozenset({"co", "ltd", "com", "org"})

TLD_TO_COUNTRY_CODE = MappingProxyType({
    "de": "+49",
    "uk": "+44",
    "co.uk": "+44",
    "ch": "+41",
    "cz": "+420",
    "com": "+1",
    "net": "+1",
    "ca": "+1",
    "in": "+91",
    "tr": "+90",
    "eu": "+49",
    "us": "+1",
    "au": "+61",
    "fr": "+33",
    "it": "+39",
    "es": "+34",
    "nl": "+31",
    "be": "+32",
    "at": "+43",
    "se": "+46",
    "pl": "+48",
    "br": "+55",
    "mx": "+52",
    "jp": "+81",
    "kr": "+82",
    "cn": "+86",
})


def ensure_scheme(url: str) -> str:
    """Prefix https:// unless the string already starts with http."""
    return url if url.startswith("http") else f"https://{url}"


def extract_tld(url: str) -> str:
    """Return the domain suffix used as a country signal.

    Compound suffixes such as ``co.uk`` are kept whole. Anything that does not
    parse into a dotted hostname falls back to ``"com"``.
    """
    try:
        hostname = urlparse(ensure_scheme(url)).hostname
    except ValueError:
        logger.debug("Could not parse URL %r", url)
        return DEFAULT_TLD

    if not hostname:
        return DEFAULT_TLD

    parts = hostname.split(".")
    if len(parts) < 2:
        return DEFAULT_TLD

    if len(parts) >= 3 and parts[-2] in _COMPOUND_LABELS:
        return f"{parts[-2]}.{parts[-1]}"
    return parts[-1]


def get_country_code_from_url(url: str) -> str:
    return TLD_TO_COUNTRY_CODE.get(extract_tld(url), DEFAULT_COUNTRY_CODE)
