"""
Type definitions for the 1inch Network client
"""

from .common import Credential, WorkItem
from .request import (
    Placement,
    ParamSpec,
    OperationDescriptor,
    ResolvedRequest,
    MISSING,
)
from .result import FailurePolicy, OutcomeRecord
from .parameters import ParameterSource, StaticParameters, ItemParameters

__all__ = [
    # Batch types
    "Credential",
    "WorkItem",
    "FailurePolicy",
    "OutcomeRecord",
    # Request types
    "Placement",
    "ParamSpec",
    "OperationDescriptor",
    "ResolvedRequest",
    "MISSING",
    # Parameter sources
    "ParameterSource",
    "StaticParameters",
    "ItemParameters",
]
