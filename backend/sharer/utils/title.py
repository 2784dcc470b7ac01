import re

DEFAULT_TITLE = "Shared HTML Page"

# Plain pattern matching, not an HTML parse: nested tags inside the element
# make it fall through to the next rule.
_TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>")
_H1_RE = re.compile(r"<h1[^>]*>([^<]+)</h1>")


def extract_title(html_content: str) -> str:
    for pattern in (_TITLE_RE, _H1_RE):
        match = pattern.search(html_content or "")
        if match:
            title = match.group(1).strip()
            if title:
                return title

    return DEFAULT_TITLE
