"""
Common type definitions: credentials and batch work items
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from ..config import config as global_config, DEFAULT_BASE_URL
from ..errors import ConfigurationError


@dataclass(frozen=True)
class Credential:
    """
    API credential, supplied once per batch

    Attributes:
        api_key: 1inch Developer Portal API key (never logged)
        base_url: API base URL without trailing slash
    """
    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self):
        if not self.api_key:
            raise ConfigurationError.missing(
                "ONEINCH_API_KEY",
                "1inch API key is required. Set ONEINCH_API_KEY environment variable.",
            )
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))

    @classmethod
    def from_config(cls, api_key: Optional[str] = None, base_url: Optional[str] = None) -> "Credential":
        """Build credential from explicit values falling back to global config"""
        return cls(
            api_key=api_key or global_config.oneinch.api_key,
            base_url=base_url or global_config.oneinch.base_url,
        )

    @property
    def authorization(self) -> str:
        """Authorization header value"""
        return f"Bearer {self.api_key}"

    def __repr__(self) -> str:
        return f"Credential(api_key='***', base_url={self.base_url!r})"


@dataclass(frozen=True)
class WorkItem:
    """
    One unit of a batch

    The payload is opaque: it is only carried through for pairing
    with the item's outcome.
    """
    index: int
    payload: Any = None

    @classmethod
    def from_payloads(cls, payloads: Iterable[Any]) -> List["WorkItem"]:
        """Wrap payloads as work items indexed by position"""
        return [cls(index=i, payload=p) for i, p in enumerate(payloads)]
