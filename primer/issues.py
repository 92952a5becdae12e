"""Print issue search results as a table, an HTML page or a text report."""

from __future__ import annotations

import argparse
import sys
import time
from datetime import datetime, timedelta, timezone

from primer.autoescape import _escape
from primer.github import Issue, IssuesSearchResult, User, search_issues

_URL_KEEP = frozenset(
    "!#$&*+,/:;=?@[]-._~%"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
)
_SAFE_SCHEMES = ("http", "https", "mailto")

_HTML_HEAD = (
    "\n<h1>{total} issues</h1>\n<table>\n<tr style='text-align: left'>\n"
    "  <th>#</th>\n  <th>State</th>\n  <th>User</th>\n  <th>Title</th>\n</tr>\n"
)
_HTML_ROW = (
    "\n<tr>\n  <td><a href='{url}'>{number}</a></td>\n  <td>{state}</td>\n"
    "  <td><a href='{user_url}'>{login}</a></td>\n"
    "  <td><a href='{url}'>{title}</a></td>\n</tr>\n"
)
_HTML_TAIL = "\n</table>\n"

_RULE = "-" * 40


def _checked(item: Issue | None) -> tuple[Issue, User]:
    if item is None:
        raise ValueError("nil pointer evaluating *github.Issue")
    if item.user is None:
        raise ValueError(f"nil pointer evaluating *github.User.Login in issue #{item.number}")
    return item, item.user


def format_table(result: IssuesSearchResult) -> str:
    """One line per issue: number, user login (9 wide) and title (55 at most)."""
    lines = [f"{result.total_count} issues:"]
    for entry in result.items:
        item, user = _checked(entry)
        lines.append(f"#{item.number:<5d} {user.login[:9]:>9} {item.title[:55]}")
    return "".join(line + "\n" for line in lines)


def _url_attr(url: str) -> str:
    """Filter unsafe schemes, percent-encode, then escape for an attribute value."""
    colon = url.find(":")
    if colon >= 0 and "/" not in url[:colon] and url[:colon].lower() not in _SAFE_SCHEMES:
        url = "#ZgotmplZ"
    encoded = "".join(
        chr(b) if chr(b) in _URL_KEEP else f"%{b:02x}" for b in url.encode("utf-8")
    )
    return _escape(encoded)


def render_html(result: IssuesSearchResult) -> str:
    """Render the issues as an HTML table with escaped text and links."""
    parts = [_HTML_HEAD.format(total=_escape(result.total_count))]
    for entry in result.items:
        item, user = _checked(entry)
        parts.append(_HTML_ROW.format(
            url=_url_attr(item.html_url),
            number=_escape(item.number),
            state=_escape(item.state),
            user_url=_url_attr(user.html_url),
            login=_escape(user.login),
            title=_escape(item.title),
        ))
    parts.append(_HTML_TAIL)
    return "".join(parts)


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Whole days from ``t`` until ``now``, truncated toward zero."""
    if now is None:
        now = datetime.now(timezone.utc)
    return int((now - t) / timedelta(hours=1) / 24)


def render_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """Render a plain-text report with each issue's number, user, title and age."""
    parts = [f"{result.total_count} issues:\n"]
    for entry in result.items:
        item, user = _checked(entry)
        parts.append(
            f"{_RULE}\n"
            f"Number: {item.number}\n"
            f"User:   {user.login}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {days_ago(item.created_at, now)} days\n"
        )
    return "".join(parts)


def _fatal(err: BaseException) -> None:
    print(f"{time.strftime('%Y/%m/%d %H:%M:%S')} {err}", file=sys.stderr)


_RENDERERS = {"table": format_table, "html": render_html, "report": render_report}


def main(argv: list[str] | None = None) -> int:
    """Search for the given terms and print the matching issues."""
    parser = argparse.ArgumentParser(prog="issues", description="Search issues.")
    parser.add_argument("--format", choices=sorted(_RENDERERS), default="table")
    parser.add_argument("terms", nargs="*")
    opts = parser.parse_args(argv)
    try:
        result = search_issues(opts.terms)
        text = _RENDERERS[opts.format](result)
    except (OSError, ValueError, RuntimeError) as err:
        _fatal(err)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())