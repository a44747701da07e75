from typing import Any, Dict, MutableMapping
from urllib.parse import urlparse

from roombook.constants import SESSION_COUNTER_KEY
from roombook.settings import settings


def is_redirect_allowed(url: str) -> bool:
    if not url:
        return False

    parsed = urlparse(url)
    if not parsed.scheme and not parsed.netloc:
        # protocol-relative "//host" is caught by netloc, "/\host" by the check below
        return url.startswith("/") and not url.startswith("/\\")

    allowed = {s.strip().lower() for s in settings.REDIRECT_ALLOWED_SCHEMES.split(",")}
    return parsed.scheme.lower() in allowed and bool(parsed.netloc)


def count_click(session: MutableMapping[str, Any], url: str) -> int:
    counter: Dict[str, int] = dict(session.get(SESSION_COUNTER_KEY) or {})
    counter[url] = counter.get(url, 0) + 1
    session[SESSION_COUNTER_KEY] = counter

    return counter[url]


def get_click_counts(session: MutableMapping[str, Any]) -> Dict[str, int]:
    return dict(session.get(SESSION_COUNTER_KEY) or {})
