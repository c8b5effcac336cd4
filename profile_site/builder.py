"""
Element builder: tag name + attributes + children → bs4 Tag.

Attribute values are normalised into a small tagged union before they are
applied, so the construction loop switches on the tag of the value instead of
poking at arbitrary runtime types:

• Literal(value)          → written as an HTML attribute
• Absent                  → skipped, nothing is written
• Listener(event, fn)     → registered as an event handler on the node
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Union

from bs4 import BeautifulSoup, NavigableString, Tag

# Detached nodes are minted from this soup and adopted by whichever page they
# are appended to.
_FACTORY = BeautifulSoup("", "html.parser")


@dataclass(frozen=True)
class Literal:
    value: str


@dataclass(frozen=True)
class _Absent:
    pass


Absent = _Absent()


@dataclass(frozen=True)
class Listener:
    event: str
    handler: Callable[..., Any]


AttrValue = Union[Literal, _Absent, Listener]
Child = Union[str, Tag, NavigableString, None]


def attr_value(key: str, raw: Any) -> AttrValue:
    """Tag a raw attribute value."""
    if isinstance(raw, (Literal, _Absent, Listener)):
        return raw
    if raw is None:
        return Absent
    if key.startswith("on") and callable(raw):
        return Listener(key[2:], raw)
    return Literal(str(raw))


def add_listener(node: Tag, event: str, handler: Callable[..., Any]) -> None:
    # Kept in the instance dict: Tag.__getattr__ would treat a missing
    # attribute as a child-tag lookup.
    node.__dict__.setdefault("event_listeners", {}).setdefault(event, []).append(handler)


def listeners(node: Tag, event: str) -> List[Callable[..., Any]]:
    return list(node.__dict__.get("event_listeners", {}).get(event, []))


def dispatch(node: Tag, event: str, *args: Any) -> int:
    """Call every handler registered for `event`; returns how many ran."""
    handlers = listeners(node, event)
    for fn in handlers:
        fn(*args)
    return len(handlers)


def el(tag: str, attrs: Mapping[str, Any] | None = None,
       children: Iterable[Child] | None = None) -> Tag:
    node = _FACTORY.new_tag(tag)
    for key, raw in (attrs or {}).items():
        value = attr_value(key, raw)
        if isinstance(value, Listener):
            add_listener(node, value.event, value.handler)
        elif isinstance(value, Literal):
            if key == "class":
                node["class"] = value.value.split()
            else:
                node[key] = value.value
    for child in children or []:
        if child is not None:
            node.append(child)
    return node


def set_text(node: Tag, value: Any) -> None:
    """textContent assignment: drop every child, then add the text (if any)."""
    node.clear()
    value = "" if value is None else str(value)
    if value:
        node.append(value)


def by_id(page: BeautifulSoup, element_id: str) -> Tag | None:
    return page.find(id=element_id)
