from .client import HackerNewsClient
from .errors import DecodeError, HackerNewsError, NotFound, TransportError, TypeMismatch
from .items import Changes, Comment, Item, Job, Part, Poll, Story, User
from .transport import Transport

__all__ = [
    "HackerNewsClient",
    "Transport",
    "Item",
    "Story",
    "Comment",
    "Poll",
    "Part",
    "Job",
    "User",
    "Changes",
    "HackerNewsError",
    "TransportError",
    "NotFound",
    "DecodeError",
    "TypeMismatch",
]
