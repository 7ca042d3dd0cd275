"""Reusable HTTP client wrapper."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
import requests
from requests.structures import CaseInsensitiveDict
from hipsterstack.config.settings import Settings
from hipsterstack.exceptions.custom_exceptions import UpstreamStatusError
from hipsterstack.utils.logger import get_logger

log = get_logger(__name__)

def _is_json_content_type(content_type: str) -> bool:
    """True for application/json and the structured +json media types."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")

@dataclass(frozen=True)
class JsonResponse:
    """Decoded response body plus the status it came back with.

    Field access is delegated to the body, so a response reads like the JSON
    object it carries: ``resp["items"]``, ``resp.get("has_more")``.
    """
    status_code: int
    body: Any
    url: str = ""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def __getitem__(self, key: Any) -> Any:
        return self.body[key]

    def __contains__(self, key: Any) -> bool:
        return isinstance(self.body, Mapping) and key in self.body

    def get(self, key: Any, default: Any = None) -> Any:
        if isinstance(self.body, Mapping):
            return self.body.get(key, default)
        return default

    def raise_for_status(self) -> "JsonResponse":
        """Raise UpstreamStatusError on a non-2xx status, else return self."""
        if not self.ok:
            raise UpstreamStatusError(self)
        return self

@dataclass
class HttpClient:
    """Small wrapper around requests for a base URL and a consistent timeout.

    Transport errors from requests propagate untouched, and non-2xx responses
    are handed back rather than raised.
    """
    base_url: str
    timeout_seconds: int

    @classmethod
    def for_base(cls, base_url: str, settings: Optional[Settings] = None) -> "HttpClient":
        """Client for base_url using the request timeout from settings (env if omitted)."""
        settings = settings or Settings.from_env()
        return cls(base_url=base_url, timeout_seconds=settings.request_timeout_seconds)

    def url_for(self, path: str) -> str:
        """Join the base URL and a path without doubling slashes."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> JsonResponse:
        """GET base_url + path and return the decoded response."""
        url = self.url_for(path)
        log.debug("GET %s params=%s", url, params)
        resp = requests.get(url, params=params, timeout=self.timeout_seconds)
        log.debug("GET %s -> %s", resp.url, resp.status_code)

        if _is_json_content_type(resp.headers.get("Content-Type", "")):
            body = resp.json()
        else:
            body = resp.text
        return JsonResponse(
            status_code=resp.status_code,
            body=body,
            url=resp.url,
            headers=CaseInsensitiveDict(resp.headers),
        )
