"""Human readable rendering of GitHub resources for logs and debugging.

Only fields that were actually set are shown, so a partially populated
resource renders compactly:

    >>> stringify(User(login="octocat", id=1))
    'User{login="octocat", id=1}'
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from .timestamp import format_timestamp


def stringify(value: Any) -> str:
    parts: list[str] = []
    _render(value, parts, set())
    return "".join(parts)


def _render(value: Any, out: list[str], seen: set[int]) -> None:
    if value is None:
        out.append("<nil>")
    elif isinstance(value, str):
        out.append(f'"{value}"')
    elif isinstance(value, datetime):
        out.append(format_timestamp(value))
    elif isinstance(value, BaseModel):
        _render_container(value, out, seen, _render_model)
    elif isinstance(value, (list, tuple)):
        _render_container(value, out, seen, _render_sequence)
    elif isinstance(value, dict):
        _render_container(value, out, seen, _render_mapping)
    else:
        out.append(str(value))


def _render_container(value: Any, out: list[str], seen: set[int], render) -> None:
    if id(value) in seen:
        out.append("<cycle>")
        return
    seen.add(id(value))
    try:
        render(value, out, seen)
    finally:
        seen.discard(id(value))


def _render_model(model: BaseModel, out: list[str], seen: set[int]) -> None:
    out.append(f"{type(model).__name__}{{")
    first = True
    for name in type(model).model_fields:
        if name not in model.model_fields_set:
            continue
        field_value = getattr(model, name)
        if field_value is None:
            continue
        if not first:
            out.append(", ")
        first = False
        out.append(f"{name.rstrip('_')}=")
        _render(field_value, out, seen)
    out.append("}")


def _render_sequence(items: list | tuple, out: list[str], seen: set[int]) -> None:
    out.append("[")
    for i, item in enumerate(items):
        if i:
            out.append(", ")
        _render(item, out, seen)
    out.append("]")


def _render_mapping(mapping: dict, out: list[str], seen: set[int]) -> None:
    out.append("{")
    for i, (key, item) in enumerate(mapping.items()):
        if i:
            out.append(", ")
        _render(key, out, seen)
        out.append(": ")
        _render(item, out, seen)
    out.append("}")
