"""In-memory tenant registry.

Maps human-friendly tenant identifiers to the key prefixes used by
`tenant_store.storage.NamespacedStore`. Identifiers are normalized to their
camel-case form before every lookup or insert so near-duplicates such as
"Memes Galore" and "memes_galore" resolve to the same tenant.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, Optional

from tenant_store.util import normalize_identifier, upper_snake_case

logger = logging.getLogger(__name__)


class TenantRegistry:
    """Explicit, process-lifetime registry of tenants.

    Instances are created by the caller (see `tenant_store.bootstrap`);
    there is no module-level registry. Not safe for concurrent mutation
    from several threads.
    """

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        self._tenants: Dict[str, str] = {}
        for identifier in identifiers:
            self.add_tenant(identifier)

    def _key(self, identifier: str) -> str:
        # Keys returned by list_tenants() resolve to themselves even where a
        # second normalization pass would change them ("aBC" -> "aBc").
        if identifier in self._tenants:
            return identifier
        return normalize_identifier(identifier)

    def add_tenant(self, identifier: str) -> str:
        """Register `identifier` and return its prefix.

        Adding an already registered identifier is a no-op. Raises
        ValueError if the derived prefix is owned by another identifier.
        """
        key = self._key(identifier)
        existing = self._tenants.get(key)
        if existing is not None:
            return existing
        prefix = upper_snake_case(key)
        for other, other_prefix in self._tenants.items():
            if other_prefix == prefix:
                raise ValueError(
                    f"Tenant {identifier!r} maps to prefix {prefix!r} already used by {other!r}"
                )
        self._tenants[key] = prefix
        logger.info('Registered tenant %s with prefix %s', key, prefix)
        return prefix

    def remove_tenant(self, identifier: str) -> None:
        key = self._key(identifier)
        if self._tenants.pop(key, None) is not None:
            logger.info('Removed tenant %s', key)

    def clear_tenants(self) -> None:
        self._tenants.clear()

    def get_tenant(self, identifier: str) -> Optional[str]:
        """Return the prefix for `identifier`, or None if it is not registered."""
        try:
            key = self._key(identifier)
        except ValueError:
            return None
        return self._tenants.get(key)

    def list_tenants(self) -> Dict[str, str]:
        """Return a copy of the identifier -> prefix mapping."""
        return dict(self._tenants)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        return self.get_tenant(identifier) is not None

    def __len__(self) -> int:
        return len(self._tenants)
