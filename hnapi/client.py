import json
import logging
from typing import Any, List, Optional

import requests
from jsonschema import ValidationError
from jsonschema.protocols import Validator

from . import schemas
from .errors import DecodeError, NotFound, TypeMismatch
from .items import PROJECTIONS, Changes, Comment, Item, Job, Part, Poll, Story, User
from .transport import DEFAULT_TIMEOUT, Transport

logger = logging.getLogger(__name__)

DEFAULT_BASE_URI = "https://hacker-news.firebaseio.com/"
DEFAULT_VERSION = "v0"
DEFAULT_SUFFIX = ".json"

# Some upstream deployments answer a missing item with this text body.
NOT_FOUND_BODY = b"404 page not found"


class HackerNewsClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_uri: Optional[str] = None,
        version: str = DEFAULT_VERSION,
        suffix: str = DEFAULT_SUFFIX,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_uri = (base_uri or DEFAULT_BASE_URI).rstrip("/") + "/"
        self.version = version.strip("/")
        self.suffix = suffix
        self.http = Transport(session=session, timeout=timeout)

    def _url(self, *segments: Any) -> str:
        path = "/".join(str(s) for s in segments)
        return f"{self.base_uri}{self.version}/{path}{self.suffix}"

    def _decode(self, url: str, body: bytes, validator: Validator, nullable: bool = False) -> Any:
        try:
            data = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise DecodeError(url, f"invalid JSON: {e}", body) from e
        if data is None and nullable:
            return None
        try:
            validator.validate(data)
        except ValidationError as e:
            # e.message embeds the failing instance, which can be the whole body
            raise DecodeError(url, f"{e.validator} check failed at {e.json_path}", body) from e
        logger.debug("decoded %s as %s", url, type(data).__name__)
        return data

    def _get_json(self, url: str, validator: Validator) -> Any:
        return self._decode(url, self.http.request(url), validator)

    def _id_list(self, name: str) -> List[int]:
        # upstream order is preserved as-is
        return self._get_json(self._url(name), schemas.id_list_validator)

    # ---- items
    def get_item(self, item_id: int) -> Item:
        """Fetch /item/{id} as a generic Item.

        Raises NotFound for a 404, the plain-text 404 body, or a ``null``
        payload (how the service reports ids that do not exist).
        """
        url = self._url("item", int(item_id))
        body = self.http.request(url)
        if body.strip() == NOT_FOUND_BODY:
            raise NotFound(url)
        data = self._decode(url, body, schemas.item_validator, nullable=True)
        if data is None:
            raise NotFound(url)
        return Item(data)

    def _get_typed(self, item_id: int, kind: str, operation: str) -> Any:
        item = self.get_item(item_id)
        if item.type != kind:
            logger.debug("%s(%s): item is of type %r, expected %r", operation, item_id, item.type, kind)
            raise TypeMismatch(item_id, operation, kind, item.type)
        return PROJECTIONS[kind](item)

    def get_story(self, item_id: int) -> Story:
        return self._get_typed(item_id, "story", "get_story")

    def get_comment(self, item_id: int) -> Comment:
        return self._get_typed(item_id, "comment", "get_comment")

    def get_poll(self, item_id: int) -> Poll:
        return self._get_typed(item_id, "poll", "get_poll")

    def get_part(self, item_id: int) -> Part:
        return self._get_typed(item_id, "pollopt", "get_part")

    def get_job(self, item_id: int) -> Job:
        return self._get_typed(item_id, "job", "get_job")

    def get_max_item_id(self) -> int:
        return self._get_json(self._url("maxitem"), schemas.max_item_validator)

    def get_max_item(self) -> Item:
        return self.get_item(self.get_max_item_id())

    # ---- users & updates
    def get_user(self, user_id: str) -> User:
        url = self._url("user", user_id)
        data = self._decode(url, self.http.request(url), schemas.user_validator, nullable=True)
        if data is None:
            raise NotFound(url)
        return User.from_json(data)

    def get_changes(self) -> Changes:
        return Changes.from_json(self._get_json(self._url("updates"), schemas.updates_validator))

    # ---- list endpoints
    def get_top_stories(self) -> List[int]:
        return self._id_list("topstories")

    def get_new_stories(self) -> List[int]:
        return self._id_list("newstories")

    def get_best_stories(self) -> List[int]:
        return self._id_list("beststories")

    def get_ask_stories(self) -> List[int]:
        return self._id_list("askstories")

    def get_show_stories(self) -> List[int]:
        return self._id_list("showstories")

    def get_job_stories(self) -> List[int]:
        return self._id_list("jobstories")
