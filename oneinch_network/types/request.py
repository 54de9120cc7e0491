"""
Request type definitions

OperationDescriptor is static table data; ResolvedRequest is built
fresh for every work item and consumed once by the executor.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import httpx


_PATH_SLOT = re.compile(r"\{(\w+)\}")


class Placement(Enum):
    """Where a parameter goes in the outgoing request"""
    PATH = "path"
    QUERY = "query"
    BODY = "body"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class ParamSpec:
    """
    One parameter of an operation

    Attributes:
        name: Parameter name, used both for lookup and on the wire
        placement: Path slot, query string or JSON body
        required: Required fields are always sent
        default: Value used when lookup finds nothing (optional fields only)
        always_include: Send the default instead of omitting an empty value
    """
    name: str
    placement: Placement
    required: bool = True
    default: Any = MISSING
    always_include: bool = False

    @property
    def is_optional(self) -> bool:
        return not self.required


def path(name: str) -> ParamSpec:
    return ParamSpec(name, Placement.PATH)


def query(name: str, required: bool = True, default: Any = MISSING, always_include: bool = False) -> ParamSpec:
    return ParamSpec(name, Placement.QUERY, required, default, always_include)


def body(name: str, required: bool = True, default: Any = MISSING, always_include: bool = False) -> ParamSpec:
    return ParamSpec(name, Placement.BODY, required, default, always_include)


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Static description of one (resource, operation) endpoint

    Attributes:
        resource: Resource tag (e.g. "swap")
        operation: Operation tag (e.g. "getQuote")
        method: HTTP method
        path: URL path template with {name} slots for path parameters
        params: Parameter specs in wire order
    """
    resource: str
    operation: str
    method: str
    path: str
    params: Tuple[ParamSpec, ...] = ()

    def __post_init__(self):
        slots = set(_PATH_SLOT.findall(self.path))
        declared = {p.name for p in self.params if p.placement is Placement.PATH}
        if slots != declared:
            raise ValueError(
                f"{self.resource}.{self.operation}: path slots {sorted(slots)} "
                f"do not match path params {sorted(declared)}"
            )
        object.__setattr__(self, "method", self.method.upper())

    @property
    def key(self) -> str:
        return f"{self.resource}.{self.operation}"

    @property
    def path_params(self) -> Tuple[ParamSpec, ...]:
        return tuple(p for p in self.params if p.placement is Placement.PATH)

    @property
    def query_params(self) -> Tuple[ParamSpec, ...]:
        return tuple(p for p in self.params if p.placement is Placement.QUERY)

    @property
    def body_params(self) -> Tuple[ParamSpec, ...]:
        return tuple(p for p in self.params if p.placement is Placement.BODY)

    @property
    def has_body(self) -> bool:
        return bool(self.body_params)

    @property
    def is_read(self) -> bool:
        return self.method == "GET"

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True)
class ResolvedRequest:
    """
    Fully resolved request for one work item

    Attributes:
        method: HTTP method
        url: Base URL plus substituted path, without query string
        headers: Request headers (includes Authorization, excluded from repr)
        params: Query parameters in wire order
        body: JSON body, None when the operation sends none
    """
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict, repr=False)
    params: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None

    @property
    def full_url(self) -> str:
        """URL including the encoded query string"""
        if not self.params:
            return self.url
        return str(httpx.URL(self.url, params=self.params))
