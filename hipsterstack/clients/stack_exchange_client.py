"""Client for the Stack Exchange questions and users endpoints."""
from __future__ import annotations
from dataclasses import dataclass, field
from hipsterstack.clients.http_client import HttpClient, JsonResponse
from hipsterstack.config.settings import Settings
from hipsterstack.utils.constants import QUESTIONS_RESOURCE, USERS_RESOURCE

@dataclass(frozen=True)
class QuestionAndUserClient:
    """One page of questions or users from a single Stack Exchange site.

    Nothing is cached; every call is a fresh request.
    """
    site: str
    page: int
    http: HttpClient = field(
        default_factory=lambda: HttpClient.for_base(Settings.from_env().stack_exchange_base_url),
        compare=False,
        repr=False,
    )

    @classmethod
    def from_settings(cls, settings: Settings, site: str, page: int) -> "QuestionAndUserClient":
        """Build a client that talks to the API configured in settings."""
        return cls(site=site, page=page, http=HttpClient.for_base(settings.stack_exchange_base_url, settings))

    def questions(self) -> JsonResponse:
        """GET /questions for the configured site and page."""
        return self._get(QUESTIONS_RESOURCE)

    def users(self) -> JsonResponse:
        """GET /users for the configured site and page."""
        return self._get(USERS_RESOURCE)

    def _get(self, resource: str) -> JsonResponse:
        return self.http.get_json(f"/{resource}", params={"site": self.site, "page": self.page})
