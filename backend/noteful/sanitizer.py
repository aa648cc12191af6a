"""
Noteful Backend — Output Sanitizer
====================================

What:  Neutralizes script-capable markup in stored user text before it is
       returned to a client.
Why:   Folder and note names/content are free text; a stored
       `<script>` must reach the browser as inert text, while harmless
       formatting such as `<strong>` may pass through.
How:   bleach.clean() with a formatting allowlist:
         - allowlisted tags are kept, minus any attribute not on the list
           (`<img src=x onerror=...>` becomes `<img src="x">`)
         - every other tag is escaped, not dropped
           (`<script>` becomes `&lt;script&gt;`)
         - links and image sources only keep http(s)/mailto URLs

Properties:
    - Deterministic: same input, same output.
    - Idempotent: escaped tags stay escaped and kept tags are already clean,
      so a second pass is a no-op.

Example:
    >>> sanitize('Naughty <script>alert("xss");</script>')
    'Naughty &lt;script&gt;alert("xss");&lt;/script&gt;'
"""

from typing import Optional

import bleach

ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "del", "em",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "ins",
    "li", "ol", "p", "pre", "s", "small", "span", "strong",
    "sub", "sup", "u", "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


def sanitize(value: Optional[str]) -> Optional[str]:
    """Clean `value` against the markup allowlist; None passes through unchanged."""
    if value is None:
        return None
    return bleach.clean(
        value,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
        strip_comments=True,
    )
