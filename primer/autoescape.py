"""Fill an HTML template, escaping untrusted text but not trusted HTML."""

from __future__ import annotations

import sys

TEMPLATE = "<p>A: {a}</p><p>B: {b}</p>"

_HTML_ESCAPES = str.maketrans({
    "\0": "\ufffd",
    '"': "&#34;",
    "&": "&amp;",
    "'": "&#39;",
    "+": "&#43;",
    "<": "&lt;",
    ">": "&gt;",
})


class HTML(str):
    """A string of trusted HTML, inserted into templates as it is."""


def _escape(value: object) -> str:
    if isinstance(value, HTML):
        return str(value)
    return str(value).translate(_HTML_ESCAPES)


def render(a: object, b: object) -> str:
    """Fill the template with ``a`` and ``b``; plain strings are escaped."""
    return TEMPLATE.format(a=_escape(a), b=_escape(b))


if __name__ == "__main__":
    sys.stdout.write(render("<b>Hello!</b>", HTML("<b>Hello!</b>")))