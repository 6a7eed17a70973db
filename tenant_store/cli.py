"""Command line helper for inspecting and maintaining tenant storage.

Works against the backend configured in the settings file (normally the
file backend, since the memory backend does not outlive the process).
Tenant arguments may be registered identifiers or raw prefixes. `get`
prints nothing and exits with status 1 when the key is absent.
"""
from __future__ import annotations
import argparse
import asyncio
import json
import sys
from typing import Any, Iterable, Optional

import yaml

from tenant_store.bootstrap import TenantStorage, bootstrap_storage
from tenant_store.config import load_settings
from tenant_store.logging_config import configure_logging
from tenant_store.util import derive_prefix


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tenant-store", description="Tenant-namespaced key-value storage")
    p.add_argument("--config", help="Path to the YAML settings file")
    p.add_argument("--data-dir", help="Override the data directory and use the file backend")
    sub = p.add_subparsers(dest="command", required=True)

    t = sub.add_parser("tenant", help="Print the prefix derived for a tenant identifier")
    t.add_argument("identifier")

    k = sub.add_parser("keys", help="List logical keys of a tenant")
    k.add_argument("tenant")

    g = sub.add_parser("get", help="Print a stored value")
    g.add_argument("tenant")
    g.add_argument("key")

    s = sub.add_parser("set", help="Store a value")
    s.add_argument("tenant")
    s.add_argument("key")
    s.add_argument("value")
    s.add_argument("--json", action="store_true", help="Parse VALUE as JSON before storing")

    r = sub.add_parser("remove", help="Remove a key")
    r.add_argument("tenant")
    r.add_argument("key")

    d = sub.add_parser("dump", help="Print all key/value pairs of a tenant as YAML")
    d.add_argument("tenant")

    c = sub.add_parser("clear", help="Remove every key of a tenant")
    c.add_argument("tenant")
    return p


def _emit(value: Any) -> None:
    if isinstance(value, str):
        print(value)
    else:
        sys.stdout.write(yaml.safe_dump(value, sort_keys=False, allow_unicode=True))


async def _run(args: argparse.Namespace, storage: TenantStorage) -> int:
    store = storage.store
    if args.command == "tenant":
        _emit(storage.registry.get_tenant(args.identifier) or derive_prefix(args.identifier))
        return 0

    tenant = storage.resolve_tenant(args.tenant)
    if args.command == "keys":
        for key in await store.get_all_keys(tenant):
            print(key)
    elif args.command == "get":
        value = await store.get_item(tenant, args.key)
        if value is None:
            return 1
        _emit(value)
    elif args.command == "set":
        value = json.loads(args.value) if args.json else args.value
        await store.set_item(tenant, args.key, value)
    elif args.command == "remove":
        await store.remove_item(tenant, args.key)
    elif args.command == "dump":
        _emit(dict(await store.get_all_key_value_pairs(tenant)))
    elif args.command == "clear":
        await store.clear(tenant)
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    settings = load_settings(args.config)
    if args.data_dir:
        settings = settings.model_copy(update={"backend": "file", "data_dir": args.data_dir})
    configure_logging(settings.log_level)
    try:
        storage = bootstrap_storage(settings)
        return asyncio.run(_run(args, storage))
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
