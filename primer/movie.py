"""Movies encoded to and decoded from JSON."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field

_HTML_SAFE = str.maketrans({
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
})


@dataclass
class Movie:
    """A film with its release year, colour flag and actors."""

    title: str
    year: int
    color: bool = False
    actors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Return the JSON object form; ``color`` is omitted when false."""
        d: dict[str, object] = {"Title": self.title, "released": self.year}
        if self.color:
            d["color"] = True
        d["Actors"] = list(self.actors)
        return d


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def marshal(movies: Iterable[Movie]) -> str:
    """Encode ``movies`` as compact JSON."""
    text = json.dumps([m.to_dict() for m in movies], ensure_ascii=False, separators=(",", ":"))
    return text.translate(_HTML_SAFE)


def marshal_indent(movies: Iterable[Movie]) -> str:
    """Encode ``movies`` as JSON indented by four spaces."""
    text = json.dumps([m.to_dict() for m in movies], ensure_ascii=False, indent=4)
    return text.translate(_HTML_SAFE)


def titles(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return the title of each one.

    Keys match ``Title`` without regard to case; the last matching key wins.
    """
    parsed = json.loads(data)
    if parsed is None:
        return []
    if not isinstance(parsed, list):
        raise ValueError(f"cannot unmarshal {type(parsed).__name__} into a list of titles")
    result = []
    for item in parsed:
        title = ""
        if item is not None:
            if not isinstance(item, dict):
                raise ValueError(f"cannot unmarshal {type(item).__name__} into a title record")
            for key, value in item.items():
                if key.casefold() != "title":
                    continue
                if value is None:
                    continue
                if not isinstance(value, str):
                    raise ValueError(f"cannot unmarshal {type(value).__name__} into Title")
                title = value
        result.append(title)
    return result


def main(argv: list[str] | None = None) -> int:
    """Print the movies as compact JSON, indented JSON, and their titles."""
    print(marshal(MOVIES))
    data = marshal_indent(MOVIES)
    print(data)
    print("[" + " ".join(f"{{{t}}}" for t in titles(data)) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())