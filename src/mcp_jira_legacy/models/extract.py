"""
Helpers for reading loosely-typed payload trees.

Both the XML search feed (after ``xmltodict``) and the REST JSON payloads
arrive as nested dicts, lists and scalars with no fixed schema. Every
normalizer reads them through these helpers so that a missing key, a
scalar where a mapping was expected, or an empty value always resolves to
a default instead of an exception.

Known limitation: ``safe_get`` and ``first_non_empty`` treat every falsy
value (``""``, ``0``, ``False``, empty containers) as absent. The legacy
server does not let us tell a real zero or false apart from a missing
field, so the behaviour is kept as is.
"""

from collections.abc import Mapping
from typing import Any

from .constants import EMPTY_STRING, VALUE_KEY, XML_TEXT_KEY

_SCALAR_TYPES = (str, int, float)


def safe_get(node: Any, path: str, default: Any = EMPTY_STRING) -> Any:
    """
    Walk a dotted path through nested mappings.

    Args:
        node: The tree to read from
        path: Dot separated keys, e.g. ``"status.value.name"``
        default: Returned when any step is missing or the final value is falsy

    Returns:
        The value found at ``path`` or ``default``
    """
    current = node
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current or default


def unwrap_value(field: Any) -> Any:
    """
    Resolve a field that may be wrapped as ``{"value": ...}``.

    Args:
        field: Either a raw value or a mapping carrying a ``value`` key

    Returns:
        The wrapped value, the field itself, or None for a falsy field
    """
    if not field:
        return None
    if isinstance(field, Mapping) and VALUE_KEY in field:
        return field[VALUE_KEY]
    return field


def ensure_list(node: Any) -> list[Any]:
    """
    Re-establish list semantics for a node the XML parser may have collapsed.

    ``xmltodict`` turns a single repeated element into a bare value, so a
    feed with one ``<item>`` yields a mapping instead of a list.

    Args:
        node: None, a list, or a single element

    Returns:
        A list (empty for None)
    """
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def text_of(node: Any, default: str = EMPTY_STRING) -> str:
    """
    Read the text content of an XML-derived node.

    A node is either a bare scalar or a mapping holding its text under
    ``#text`` next to ``@_``-prefixed attributes.

    Args:
        node: The node to read
        default: Returned when there is no usable text

    Returns:
        The text as a string, or ``default``
    """
    if isinstance(node, Mapping):
        node = node.get(XML_TEXT_KEY)
    if isinstance(node, bool) or not isinstance(node, _SCALAR_TYPES):
        return default
    return str(node) or default


def as_text(value: Any, default: str = EMPTY_STRING) -> str:
    """
    Coerce a resolved JSON value to a string.

    Mappings, lists and None are not representable as a single string
    and resolve to ``default``.
    """
    if isinstance(value, bool) or not isinstance(value, _SCALAR_TYPES):
        return default
    return str(value) or default


def first_non_empty(*candidates: Any, default: Any = EMPTY_STRING) -> Any:
    """Return the first truthy candidate, or ``default``."""
    for candidate in candidates:
        if candidate:
            return candidate
    return default


def string_list(value: Any) -> list[str]:
    """Coerce a value to a list of strings, dropping null and non-scalar entries."""
    if not isinstance(value, list):
        return []
    return [
        str(item)
        for item in value
        if isinstance(item, _SCALAR_TYPES) and not isinstance(item, bool)
    ]


def name_list(value: Any) -> list[str]:
    """Map a list of ``{"name": ...}`` objects to their names (``""`` if missing)."""
    if not isinstance(value, list):
        return []
    return [as_text(safe_get(item, "name")) for item in value]


def resolve_user(node: Any, name: str, default: str) -> str:
    """
    Resolve a user field to its display name.

    Precedence: wrapped display name, direct display name, wrapped login
    name, direct login name.

    Args:
        node: The mapping that holds the user field
        name: Key of the user field, e.g. ``"assignee"`` or ``"lead"``
        default: Returned when no name can be found

    Returns:
        The resolved name
    """
    return as_text(
        first_non_empty(
            safe_get(node, f"{name}.value.displayName"),
            safe_get(node, f"{name}.displayName"),
            safe_get(node, f"{name}.value.name"),
            safe_get(node, f"{name}.name"),
        ),
        default,
    )
