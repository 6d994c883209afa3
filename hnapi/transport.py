import logging
from typing import Optional

import requests

from .errors import NotFound, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class Transport:
    """Single GET round trip over a requests.Session.

    No retries: a failed request surfaces immediately as TransportError.
    Timeouts and adapters are whatever the injected session is configured with,
    plus the per-request timeout given here.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def request(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(url, e) from e
        try:
            if resp.status_code == 404:
                raise NotFound(url)
            resp.raise_for_status()
            body = resp.content
        except requests.RequestException as e:
            raise TransportError(url, e) from e
        finally:
            resp.close()
        logger.debug("GET %s -> %s (%d bytes)", url, resp.status_code, len(body))
        return body
