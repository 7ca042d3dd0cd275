"""Sources of hipster placeholder text: the public API and an offline stand-in."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol

from hipsterstack.clients.http_client import HttpClient, JsonResponse
from hipsterstack.config.settings import Settings
from hipsterstack.exceptions.custom_exceptions import ConfigurationError
from hipsterstack.utils.constants import (
    FAKE_HIPSTER_TEXT,
    FAKE_HIPSTER_TYPE,
    FAKE_SOURCE,
    HIPSTER_API_PATH,
    REMOTE_SOURCE,
)
from hipsterstack.utils.logger import get_logger

log = get_logger(__name__)

class TextSource(Protocol):
    """Anything that can hand back a ``{"text": ..., "params": {"type": ...}}`` mapping."""

    def fetch_data(self) -> Mapping[str, Any]:
        ...

@dataclass
class RemoteTextSource:
    """Client for the hipster ipsum API."""
    http: HttpClient = field(default_factory=lambda: HttpClient.for_base(Settings.from_env().hipster_base_url))

    def fetch_data(self) -> JsonResponse:
        """GET /api once and return the decoded response."""
        return self.http.get_json(HIPSTER_API_PATH)

    def hipster_text(self) -> str:
        """Fetch a fresh paragraph and return just its text."""
        return self.fetch_data()["text"]

class FakeTextSource:
    """Offline stand-in for RemoteTextSource; always serves the same paragraph."""

    def fetch_data(self) -> Dict[str, Any]:
        return {
            "text": FAKE_HIPSTER_TEXT,
            "params": {"type": FAKE_HIPSTER_TYPE},
        }

    def hipster_text(self) -> str:
        return self.fetch_data()["text"]

def text_source_from_settings(settings: Optional[Settings] = None) -> TextSource:
    """Build the text source selected by settings.hipster_source."""
    settings = settings or Settings.from_env()
    log.debug("Using %s hipster source", settings.hipster_source)
    if settings.hipster_source == FAKE_SOURCE:
        return FakeTextSource()
    if settings.hipster_source == REMOTE_SOURCE:
        return RemoteTextSource(http=HttpClient.for_base(settings.hipster_base_url, settings))
    raise ConfigurationError(
        f"Unknown hipster source {settings.hipster_source!r}; "
        f"expected {REMOTE_SOURCE!r} or {FAKE_SOURCE!r}"
    )
