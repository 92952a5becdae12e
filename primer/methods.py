"""Print the methods of any value's type."""

from __future__ import annotations

import inspect
import types
from typing import Any

_MISSING = object()


def _format_annotation(annotation: Any) -> str:
    if getattr(annotation, "__module__", None) == "typing":
        return repr(annotation).replace("typing.", "")
    if isinstance(annotation, types.GenericAlias):
        return str(annotation)
    if isinstance(annotation, type):
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation)


def _param(name: str, annotations: dict[str, Any], default: Any = _MISSING) -> str:
    annotation = annotations.get(name, _MISSING)
    if annotation is _MISSING:
        text = name
        if default is not _MISSING:
            text += f"={default!r}"
        return text
    text = f"{name}: {_format_annotation(annotation)}"
    if default is not _MISSING:
        text += f" = {default!r}"
    return text


def _code_signature(func: Any, drop_first: bool) -> str:
    code = func.__code__
    names = code.co_varnames
    npos, nposonly, nkw = code.co_argcount, code.co_posonlyargcount, code.co_kwonlyargcount
    annotations = dict(getattr(func, "__annotations__", None) or {})
    defaults = func.__defaults__ or ()
    kwdefaults = func.__kwdefaults__ or {}

    positional = list(names[:npos])
    pos_defaults = dict(zip(positional[npos - len(defaults):], defaults))
    if drop_first and positional:
        positional = positional[1:]
        nposonly = max(nposonly - 1, 0)

    parts = []
    for count, name in enumerate(positional, start=1):
        parts.append(_param(name, annotations, pos_defaults.get(name, _MISSING)))
        if count == nposonly:
            parts.append("/")

    index = npos + nkw
    if code.co_flags & inspect.CO_VARARGS:
        parts.append("*" + _param(names[index], annotations))
        index += 1
    elif nkw:
        parts.append("*")
    for name in names[npos:npos + nkw]:
        parts.append(_param(name, annotations, kwdefaults.get(name, _MISSING)))
    if code.co_flags & inspect.CO_VARKEYWORDS:
        parts.append("**" + _param(names[index], annotations))

    result = f"({', '.join(parts)})"
    if "return" in annotations:
        result += f" -> {_format_annotation(annotations['return'])}"
    return result


def _builtin_signature(obj: Any) -> str:
    text = getattr(obj, "__text_signature__", None)
    if not text:
        return "(...)"
    inner = text.strip()[1:-1]
    parts = [p.strip() for p in inner.split(",") if p.strip()]
    parts = [p for p in parts if not p.startswith("$")]
    if parts and parts[0] == "/":
        parts = parts[1:]
    return f"({', '.join(parts)})"


def _callable_signature(func: Any, drop_first: bool) -> str:
    if getattr(func, "__code__", None) is not None:
        return _code_signature(func, drop_first)
    return _builtin_signature(func)


def _signature(obj: Any) -> str | None:
    if isinstance(obj, staticmethod):
        return _callable_signature(obj.__func__, False)
    if isinstance(obj, classmethod):
        return _callable_signature(obj.__func__, True)
    if inspect.isroutine(obj):
        return _callable_signature(obj, True)
    return None


def _public_attributes(t: type) -> dict[str, Any]:
    found: dict[str, Any] = {}
    for klass in t.__mro__:
        for name, obj in vars(klass).items():
            if not name.startswith("_") and name not in found:
                found[name] = obj
    return found


def print_methods(x: Any) -> None:
    """Print the type of ``x`` and the signature of each of its public methods, by name."""
    t = type(x)
    name = t.__qualname__
    print(f"type {name}")
    attributes = _public_attributes(t)
    for attr in sorted(attributes):
        sig = _signature(attributes[attr])
        if sig is None:
            continue
        print(f"func ({name}) {attr}{sig}")