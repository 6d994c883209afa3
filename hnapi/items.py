"""Decoded HN records.

``Item`` is the generic record returned by /item/{id}. The typed views
(Story, Comment, Poll, Part, Job) are projections of it, selected by the
item's ``type`` discriminant through ``PROJECTIONS``.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple


class Item:
    """Read-only view over a decoded item mapping.

    Every accessor tolerates a missing key and returns the field's zero value.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping[str, Any]] = None):
        self._fields = MappingProxyType(dict(fields or {}))

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._fields

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def _str(self, key: str) -> str:
        return self._fields.get(key) or ""

    def _int(self, key: str) -> int:
        return self._fields.get(key) or 0

    def _ids(self, key: str) -> Tuple[int, ...]:
        return tuple(self._fields.get(key) or ())

    @property
    def id(self) -> int:
        return self._int("id")

    @property
    def type(self) -> str:
        return self._str("type")

    @property
    def by(self) -> str:
        return self._str("by")

    @property
    def time(self) -> int:
        return self._int("time")

    @property
    def text(self) -> str:
        return self._str("text")

    @property
    def parent(self) -> int:
        return self._int("parent")

    @property
    def poll(self) -> int:
        return self._int("poll")

    @property
    def kids(self) -> Tuple[int, ...]:
        return self._ids("kids")

    @property
    def parts(self) -> Tuple[int, ...]:
        return self._ids("parts")

    @property
    def url(self) -> str:
        return self._str("url")

    @property
    def score(self) -> int:
        return self._int("score")

    @property
    def title(self) -> str:
        return self._str("title")

    @property
    def descendants(self) -> int:
        return self._int("descendants")

    @property
    def deleted(self) -> bool:
        return bool(self._fields.get("deleted", False))

    @property
    def dead(self) -> bool:
        return bool(self._fields.get("dead", False))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return dict(self._fields) == dict(other._fields)

    def __repr__(self) -> str:
        return f"Item(id={self.id!r}, type={self.type!r})"


@dataclass(frozen=True)
class Story:
    by: str = ""
    id: int = 0
    kids: Tuple[int, ...] = ()
    score: int = 0
    time: int = 0
    title: str = ""
    type: str = ""
    url: str = ""
    descendants: int = 0


@dataclass(frozen=True)
class Comment:
    by: str = ""
    id: int = 0
    kids: Tuple[int, ...] = ()
    parent: int = 0
    text: str = ""
    time: int = 0
    type: str = ""


@dataclass(frozen=True)
class Poll:
    by: str = ""
    id: int = 0
    kids: Tuple[int, ...] = ()
    parts: Tuple[int, ...] = ()
    score: int = 0
    text: str = ""
    time: int = 0
    title: str = ""
    type: str = ""
    descendants: int = 0


@dataclass(frozen=True)
class Part:
    """A poll option ("pollopt")."""

    by: str = ""
    id: int = 0
    parent: int = 0
    poll: int = 0
    score: int = 0
    text: str = ""
    time: int = 0
    type: str = ""


@dataclass(frozen=True)
class Job:
    by: str = ""
    id: int = 0
    score: int = 0
    text: str = ""
    time: int = 0
    title: str = ""
    type: str = ""
    url: str = ""


def to_story(item: Item) -> Story:
    return Story(
        by=item.by,
        id=item.id,
        kids=item.kids,
        score=item.score,
        time=item.time,
        title=item.title,
        type=item.type,
        url=item.url,
        descendants=item.descendants,
    )


def to_comment(item: Item) -> Comment:
    return Comment(
        by=item.by,
        id=item.id,
        kids=item.kids,
        parent=item.parent,
        text=item.text,
        time=item.time,
        type=item.type,
    )


def to_poll(item: Item) -> Poll:
    return Poll(
        by=item.by,
        id=item.id,
        kids=item.kids,
        parts=item.parts,
        score=item.score,
        text=item.text,
        time=item.time,
        title=item.title,
        type=item.type,
        descendants=item.descendants,
    )


def to_part(item: Item) -> Part:
    return Part(
        by=item.by,
        id=item.id,
        parent=item.parent,
        poll=item.poll,
        score=item.score,
        text=item.text,
        time=item.time,
        type=item.type,
    )


def to_job(item: Item) -> Job:
    return Job(
        by=item.by,
        id=item.id,
        score=item.score,
        text=item.text,
        time=item.time,
        title=item.title,
        type=item.type,
        url=item.url,
    )


# discriminant -> projection
PROJECTIONS: Dict[str, Callable[[Item], Any]] = {
    "story": to_story,
    "comment": to_comment,
    "poll": to_poll,
    "pollopt": to_part,
    "job": to_job,
}


@dataclass(frozen=True)
class User:
    id: str = ""
    about: str = ""
    created: int = 0
    karma: int = 0
    delay: int = 0
    submitted: Tuple[int, ...] = ()

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=data.get("id") or "",
            about=data.get("about") or "",
            created=data.get("created") or 0,
            karma=data.get("karma") or 0,
            delay=data.get("delay") or 0,
            submitted=tuple(data.get("submitted") or ()),
        )


@dataclass(frozen=True)
class Changes:
    """Contents of /updates: changed item ids and changed user profiles."""

    items: Tuple[int, ...] = ()
    profiles: Tuple[str, ...] = ()

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Changes":
        return cls(
            items=tuple(data.get("items") or ()),
            profiles=tuple(data.get("profiles") or ()),
        )
