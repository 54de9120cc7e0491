"""
Parameter sources

A parameter source answers "what is the value of <name> for item <index>".
Resource and operation are batch-level and never looked up here.
"""

from typing import Any, Dict, Mapping, Optional, Protocol, Sequence

from ..errors import ConfigurationError
from .request import MISSING


class ParameterSource(Protocol):
    """Per-item parameter lookup"""

    def get(self, name: str, index: int, default: Any = MISSING) -> Any:
        ...


class StaticParameters:
    """
    Same parameter values for every item

    Usage:
        params = StaticParameters({"chainId": "1", "src": "0x...", "dst": "0x..."})
        params.get("chainId", 3)  # "1"
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def get(self, name: str, index: int, default: Any = MISSING) -> Any:
        if name in self._values:
            return self._values[name]
        if default is MISSING:
            raise ConfigurationError.missing(f"parameter '{name}'")
        return default

    def __repr__(self) -> str:
        return f"StaticParameters({sorted(self._values)})"


class ItemParameters:
    """
    Per-item parameter values with optional shared fallbacks

    Usage:
        params = ItemParameters(
            [{"orderHash": "0xaa"}, {"orderHash": "0xbb"}],
            shared={"chainId": "1"},
        )
    """

    def __init__(
        self,
        items: Sequence[Mapping[str, Any]],
        shared: Optional[Mapping[str, Any]] = None,
    ):
        self._items = [dict(values) for values in items]
        self._shared: Dict[str, Any] = dict(shared or {})

    def __len__(self) -> int:
        return len(self._items)

    def get(self, name: str, index: int, default: Any = MISSING) -> Any:
        if 0 <= index < len(self._items) and name in self._items[index]:
            return self._items[index][name]
        if name in self._shared:
            return self._shared[name]
        if default is MISSING:
            raise ConfigurationError.missing(f"parameter '{name}' for item {index}")
        return default

    def __repr__(self) -> str:
        return f"ItemParameters(items={len(self._items)}, shared={sorted(self._shared)})"
