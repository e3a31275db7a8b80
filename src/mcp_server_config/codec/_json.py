"""JSON documents with ``//`` and ``/* */`` comments, through json-five.

The text is parsed twice: once into plain values and once into json-five's
round-trip model. Comments found in the model are attached, by position, to
the entries of :class:`JsonObject` / :class:`JsonArray` containers. Those are
``dict`` / ``list`` subclasses, so validation and deep copies keep the
comments without knowing about them.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import json5
from json5.loader import ModelLoader
from json5.model import BlockComment, Comment, JSONArray, JSONObject, JSONText


@dataclass
class EntryComments:
    """Comments written above an entry and after its value."""

    before: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)


class _Commented:
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.comments: dict[Any, EntryComments] = {}
        self.header: list[str] = []  # before the opening bracket of the document
        self.footer: list[str] = []  # before the closing bracket
        self.trailer: list[str] = []  # after the document


class JsonObject(_Commented, dict):
    """A parsed JSON object; ``comments`` is keyed by entry name."""


class JsonArray(_Commented, list):
    """A parsed JSON array; ``comments`` is keyed by element index."""


DecodeError = ValueError


def loads(text: str) -> Any:
    if not text.strip():
        return None
    data = json5.loads(text)
    model = json5.loads(text, loader=ModelLoader())
    root = model.value if isinstance(model, JSONText) else model
    tree = _annotate(root, data)
    if isinstance(tree, _Commented):
        outer = model if model is not root else None
        tree.header = _texts(getattr(outer, "wsc_before", None)) + _texts(root.wsc_before)
        tree.trailer = _texts(root.wsc_after) + _texts(getattr(outer, "wsc_after", None))
    return tree


def dumps(value: Any, indent: int, plain: Callable[[Any], Any]) -> str:
    notes = value if isinstance(value, _Commented) else None
    lines = [
        *(notes.header if notes else ()),
        _dump(value, indent, 0, plain),
        *(notes.trailer if notes else ()),
    ]
    return "\n".join(lines) + "\n"


def is_tree(value: Any) -> bool:
    return isinstance(value, _Commented)


def carries_comments(value: Any) -> bool:
    """True if this container itself (not its children) has comments attached."""
    if not isinstance(value, _Commented):
        return False
    return bool(value.comments or value.header or value.footer or value.trailer)


def _texts(wsc: Any) -> list[str]:
    """Comment texts from a json-five whitespace-and-comments list."""
    texts = []
    for item in wsc or ():
        if not isinstance(item, Comment):
            continue
        text = str(item.value).strip()
        if not text.startswith(("//", "/*")):
            text = f"/* {text} */" if isinstance(item, BlockComment) else f"// {text}"
        texts.append(text)
    return texts


def _annotate(node: Any, data: Any) -> Any:
    if isinstance(node, JSONObject) and isinstance(data, dict):
        out: JsonObject | JsonArray = JsonObject()
        pairs = list(node.key_value_pairs)
        items = list(data.items())
        entries = [(name, pair.key, pair.value, item) for (name, item), pair in zip(items, pairs)]
        count = len(pairs)
    elif isinstance(node, JSONArray) and isinstance(data, list):
        out = JsonArray()
        values = list(node.values)
        items = list(enumerate(data))
        entries = [(index, None, value, item) for (index, item), value in zip(items, values)]
        count = len(values)
    else:
        return data

    if count != len(items):
        # Duplicate keys collapse in the plain data, so positions no longer line up.
        for slot, item in items:
            _put(out, slot, item)
        return out

    pending = _texts(getattr(node, "leading_wsc", None))
    for slot, key, value, item in entries:
        before = pending
        if key is not None:
            before = before + _texts(key.wsc_before) + _texts(key.wsc_after)
        before = before + _texts(value.wsc_before)
        pending = []
        after = _texts(value.wsc_after)
        _put(out, slot, _annotate(value, item))
        if before or after:
            out.comments[slot] = EntryComments(before, after)

    trailing = getattr(node, "trailing_comma", None)
    if trailing is not None:
        pending += _texts(trailing.wsc_before) + _texts(trailing.wsc_after)
    out.footer = pending
    return out


def _put(out: JsonObject | JsonArray, slot: Any, item: Any) -> None:
    if isinstance(out, JsonObject):
        out[slot] = item
    else:
        out.append(item)


def _dump(value: Any, indent: int, depth: int, plain: Callable[[Any], Any]) -> str:
    if isinstance(value, Mapping):
        entries = [(f"{_scalar(str(k))}: ", k, v) for k, v in value.items()]
        opening, closing = "{", "}"
    elif isinstance(value, (list, tuple)):
        entries = [("", i, v) for i, v in enumerate(value)]
        opening, closing = "[", "]"
    else:
        return _scalar(plain(value))

    comments = value.comments if isinstance(value, _Commented) else {}
    footer = value.footer if isinstance(value, _Commented) else []
    if not entries and not footer:
        return opening + closing

    pad = " " * (indent * (depth + 1))
    lines = []
    last = len(entries) - 1
    for n, (label, slot, item) in enumerate(entries):
        note = comments.get(slot)
        if note is not None:
            lines.extend(pad + text for text in note.before)
        line = pad + label + _dump(item, indent, depth + 1, plain) + ("," if n < last else "")
        if note is not None and note.after:
            first, *rest = note.after
            lines.append(f"{line} {first}")
            lines.extend(pad + text for text in rest)
        else:
            lines.append(line)
    lines.extend(pad + text for text in footer)
    return opening + "\n" + "\n".join(lines) + "\n" + " " * (indent * depth) + closing


def _scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
