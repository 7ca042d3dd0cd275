"""Hipster placeholder text, fetched lazily from a pluggable text source."""
from __future__ import annotations
from typing import Any, Callable, Mapping, Optional
from hipsterstack.clients.hipster_sources import TextSource, text_source_from_settings
from hipsterstack.exceptions.custom_exceptions import MissingFieldError
from hipsterstack.utils.logger import get_logger

log = get_logger(__name__)

class HipsterText:
    """A paragraph of hipster ipsum and the style variant it was generated in.

    The source is asked for data at most once per instance, on the first read
    of ``text`` or ``type``; later reads reuse that response. A fetch that
    raises leaves nothing cached.

    When no source is given, ``HipsterText.source_factory`` builds one. Swap
    it at class level to point every new instance at another source:

        HipsterText.source_factory = FakeTextSource
    """

    source_factory: Callable[[], TextSource] = text_source_from_settings

    def __init__(self, source: Optional[TextSource] = None):
        self.source = source if source is not None else type(self).source_factory()
        self._data: Optional[Mapping[str, Any]] = None

    @property
    def text(self) -> str:
        """The generated paragraph."""
        return self._field("text")

    @property
    def type(self) -> str:
        """Generator variant, e.g. ``hipster-latin`` or ``hipster-centric``."""
        return self._field("params", "type")

    def _field(self, *path: str) -> Any:
        value: Any = self._hipster_data()
        for i, key in enumerate(path):
            try:
                value = value[key]
            except (KeyError, TypeError) as e:
                raise MissingFieldError(".".join(path[: i + 1])) from e
        return value

    def _hipster_data(self) -> Mapping[str, Any]:
        if self._data is None:
            log.debug("Fetching hipster data from %s", type(self.source).__name__)
            self._data = self.source.fetch_data()
        return self._data
