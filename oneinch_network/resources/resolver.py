"""
Request resolution

Turns a static OperationDescriptor plus one item's parameter values into
a ResolvedRequest. The same routine serves every operation of every resource.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

from ..types import (
    Credential,
    MISSING,
    OperationDescriptor,
    ParamSpec,
    ParameterSource,
    Placement,
    ResolvedRequest,
)


@dataclass(frozen=True)
class ItemContext:
    """
    Everything resolution needs for one work item

    Attributes:
        credential: Batch credential
        index: Index of the item being resolved
        parameters: Parameter lookup shared by the batch
    """
    credential: Credential
    index: int
    parameters: ParameterSource

    def lookup(self, spec: ParamSpec) -> Any:
        """Fetch a parameter value for this item, MISSING if optional and absent"""
        if spec.required:
            return self.parameters.get(spec.name, self.index)
        default = None if spec.default is MISSING else spec.default
        return self.parameters.get(spec.name, self.index, default)


def _is_empty(value: Any) -> bool:
    return value is MISSING or value is None or value == ""


def _path_segment(value: Any) -> str:
    # Commas separate protocol names and must stay literal
    return quote("" if value is None else str(value), safe=",")


def build_headers(credential: Credential, descriptor: OperationDescriptor) -> Dict[str, str]:
    """Headers for a request: auth always, accept on reads, content type with a body"""
    headers = {"Authorization": credential.authorization}
    if descriptor.is_read:
        headers["accept"] = "application/json"
    if descriptor.has_body:
        headers["Content-Type"] = "application/json"
    return headers


def resolve_request(descriptor: OperationDescriptor, context: ItemContext) -> ResolvedRequest:
    """
    Resolve one item's request

    Optional fields resolving to an empty value are omitted, unless the
    spec is always-included, in which case its default is sent.

    Args:
        descriptor: Operation descriptor
        context: Item context (credential, index, parameter lookup)

    Returns:
        ResolvedRequest ready for the executor

    Raises:
        ConfigurationError: If a required parameter cannot be found
    """
    path_values: Dict[str, str] = {}
    params: Dict[str, Any] = {}
    body: Optional[Dict[str, Any]] = {} if descriptor.has_body else None

    for spec in descriptor.params:
        value = context.lookup(spec)

        if spec.is_optional and _is_empty(value):
            if not spec.always_include or spec.default is MISSING:
                continue
            value = spec.default

        if spec.placement is Placement.PATH:
            path_values[spec.name] = _path_segment(value)
        elif spec.placement is Placement.QUERY:
            params[spec.name] = value
        else:
            body[spec.name] = value

    url = context.credential.base_url + descriptor.path.format(**path_values)

    return ResolvedRequest(
        method=descriptor.method,
        url=url,
        headers=build_headers(context.credential, descriptor),
        params=params,
        body=body,
    )
