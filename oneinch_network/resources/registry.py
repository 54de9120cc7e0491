"""
Resource router

Centralized registration and lookup for operation tables.
"""

import importlib
import logging
from typing import Dict, List

from ..errors import UnsupportedResource, UnsupportedOperation
from ..types import OperationDescriptor

logger = logging.getLogger(__name__)

# Built-in resource tag -> table module
_BUILTIN_RESOURCES = {
    "swap": ".swap",
    "limitOrder": ".limit_order",
    "fusionOrder": ".fusion_order",
    "portfolio": ".portfolio",
    "crossChain": ".cross_chain",
}


class ResourceRouter:
    """
    Registry for resource operation tables

    Built-in tables are loaded lazily on first lookup.

    Usage:
        descriptor = ResourceRouter.resolve("limitOrder", "cancelOrder")

        # List available resources / operations
        ResourceRouter.list()
        ResourceRouter.operations("swap")
    """

    _tables: Dict[str, Dict[str, OperationDescriptor]] = {}

    @classmethod
    def register(cls, resource: str, table: Dict[str, OperationDescriptor]):
        """
        Register an operation table

        Args:
            resource: Resource tag (e.g., "swap")
            table: Mapping of operation tag to descriptor
        """
        for operation, descriptor in table.items():
            if descriptor.resource != resource or descriptor.operation != operation:
                raise ValueError(
                    f"Descriptor {descriptor.key} registered under {resource}.{operation}"
                )
        cls._tables[resource] = dict(table)
        logger.debug(f"Registered resource table: {resource} ({len(table)} operations)")

    @classmethod
    def get(cls, resource: str) -> Dict[str, OperationDescriptor]:
        """
        Get operation table for resource

        Raises:
            UnsupportedResource: If resource is unknown
        """
        if resource not in cls._tables:
            cls._try_load_table(resource)

        if resource not in cls._tables:
            raise UnsupportedResource(resource, cls.list())

        return cls._tables[resource]

    @classmethod
    def resolve(cls, resource: str, operation: str) -> OperationDescriptor:
        """
        Look up the descriptor for a (resource, operation) pair

        Raises:
            UnsupportedResource: If resource is unknown
            UnsupportedOperation: If operation is not in the resource's table
        """
        table = cls.get(resource)
        descriptor = table.get(operation)
        if descriptor is None:
            raise UnsupportedOperation(resource, operation, list(table.keys()))
        return descriptor

    @classmethod
    def list(cls) -> List[str]:
        """List registered resource tags"""
        cls._ensure_loaded()
        return list(cls._tables.keys())

    @classmethod
    def operations(cls, resource: str) -> List[str]:
        """List operation tags of a resource"""
        return list(cls.get(resource).keys())

    @classmethod
    def is_registered(cls, resource: str) -> bool:
        """Check if resource is registered"""
        return resource in cls._tables

    @classmethod
    def _try_load_table(cls, resource: str):
        """Load a built-in table module"""
        module_name = _BUILTIN_RESOURCES.get(resource)
        if module_name is None:
            return
        module = importlib.import_module(module_name, __package__)
        cls.register(module.RESOURCE, module.OPERATIONS)

    @classmethod
    def _ensure_loaded(cls):
        """Ensure all built-in tables are loaded"""
        for resource in _BUILTIN_RESOURCES:
            if resource not in cls._tables:
                cls._try_load_table(resource)
