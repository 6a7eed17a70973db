"""Tenant registry package."""

from .registry import TenantRegistry
from .interfaces import TenantRegistryProtocol

__all__ = ["TenantRegistry", "TenantRegistryProtocol"]
