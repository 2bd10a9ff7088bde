"""Parser for session related data on AtCoder pages."""

import re

from atcoder_tester.infrastructure.html import Html

USER_SCREEN_NAME_PATTERN = re.compile(r"""userScreenName\s*=\s*["']([^"']*)["']""")


def extract_csrf_token(html: Html) -> str | None:
    """Extract CSRF token from any page carrying a form."""
    element = html.soup.select_one("[name=csrf_token]")
    if element is None:
        return None

    value = element.get("value")
    return value if isinstance(value, str) else None


def extract_title(html: Html) -> str | None:
    """Extract the document ``<title>``."""
    title_tag = html.soup.find("title")
    if not title_tag:
        return None
    return title_tag.get_text(strip=True)


def is_logged_in(html: Html) -> bool:
    """AtCoder pages declare ``userScreenName``, empty for anonymous visitors."""
    for script in html.soup.find_all("script"):
        match = USER_SCREEN_NAME_PATTERN.search(script.string or "")
        if match:
            return bool(match.group(1))
    return False
