"""Search the GitHub issue tracker and decode its JSON replies."""

from __future__ import annotations

import json
import re
import urllib.error
import urllib.request
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import quote_plus

ISSUES_URL = "https://api.github.com/search/issues"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_MISSING = object()
_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)


@dataclass
class User:
    """The account that opened an issue."""

    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    """One issue from a search result; ``body`` is Markdown."""

    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime = _ZERO_TIME
    body: str = ""


@dataclass
class IssuesSearchResult:
    """The total number of matches and the issues on the returned page."""

    total_count: int = 0
    items: list[Issue | None] = field(default_factory=list)


def _lookup(obj: Mapping[str, Any], key: str) -> Any:
    """Return the value whose key matches ``key`` without regard to case; the last one wins."""
    found = _MISSING
    wanted = key.casefold()
    for k, v in obj.items():
        if k.casefold() == wanted:
            found = v
    return found


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot unmarshal {type(value).__name__} into field {name} of type int")
    return value


def _as_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"cannot unmarshal {type(value).__name__} into field {name} of type string")
    return value


def _as_object(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"cannot unmarshal {type(value).__name__} into field {name} of type object")
    return value


def _parse_time(value: Any) -> datetime:
    text = _as_str(value, "created_at")
    m = _RFC3339.fullmatch(text)
    if not m:
        raise ValueError(f"parsing time {text!r} as RFC 3339: cannot parse")
    year, month, day, hour, minute, second = (int(g) for g in m.group(1, 2, 3, 4, 5, 6))
    fraction = m.group(7) or ""
    micro = int((fraction + "000000")[:6])
    if m.group(8):
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(m.group(10)), minutes=int(m.group(11)))
        tz = timezone(-offset if m.group(9) == "-" else offset)
    return datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)


def _fill(obj: Mapping[str, Any], spec: Mapping[str, tuple[str, Any]]) -> dict[str, Any]:
    """Convert the keys named in ``spec``; JSON null leaves a field at its default."""
    values: dict[str, Any] = {}
    for attr, (key, convert) in spec.items():
        raw = _lookup(obj, key)
        if raw is _MISSING or raw is None:
            continue
        values[attr] = convert(raw, key)
    return values


def _user(value: Any, name: str) -> User:
    obj = _as_object(value, name)
    return User(**_fill(obj, {"login": ("Login", _as_str), "html_url": ("html_url", _as_str)}))


def _issue(value: Any) -> Issue | None:
    if value is None:
        return None
    obj = _as_object(value, "Items")
    return Issue(**_fill(obj, {
        "number": ("Number", _as_int),
        "html_url": ("html_url", _as_str),
        "title": ("Title", _as_str),
        "state": ("State", _as_str),
        "user": ("User", _user),
        "created_at": ("created_at", lambda v, _name: _parse_time(v)),
        "body": ("Body", _as_str),
    }))


def _items(value: Any, name: str) -> list[Issue | None]:
    if not isinstance(value, list):
        raise ValueError(f"cannot unmarshal {type(value).__name__} into field {name} of type list")
    return [_issue(item) for item in value]


def parse_result(data: str | bytes) -> IssuesSearchResult:
    """Decode a search reply; keys match field names without regard to case."""
    parsed = json.loads(data)
    if parsed is None:
        return IssuesSearchResult()
    obj = _as_object(parsed, "result")
    return IssuesSearchResult(**_fill(obj, {
        "total_count": ("total_count", _as_int),
        "items": ("Items", _items),
    }))


def search_issues(terms: Iterable[str], url: str = ISSUES_URL) -> IssuesSearchResult:
    """Query the issue tracker at ``url`` for ``terms``."""
    q = quote_plus(" ".join(terms))
    try:
        resp = urllib.request.urlopen(f"{url}?q={q}")
    except urllib.error.HTTPError as err:
        with err:
            raise RuntimeError(f"search query failed: {err.code} {err.reason}") from None
    with resp:
        if resp.status != 200:
            raise RuntimeError(f"search query failed: {resp.status} {resp.reason}")
        return parse_result(resp.read())