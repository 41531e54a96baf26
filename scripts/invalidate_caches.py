"""Invalidate renderer caches after out-of-band changes.

Usage:
    uv run python -m scripts.invalidate_caches --host shop.example.com
    uv run python -m scripts.invalidate_caches --theme acme        # theme tiers + CDN purge
    uv run python -m scripts.invalidate_caches --catalog acme      # every cached listing
Options can be combined and repeated. Uses the same settings (.env) as the app.

Only the Redis tier is reachable from here; running renderer processes keep
their in-memory theme copy until it expires (CACHE_TTL_THEMES).
"""

import argparse
import asyncio
import sys

from storefront.core.config import get_settings
from storefront.core.container import build_services
from storefront.shared.telemetry import setup_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="invalidate_caches", description=__doc__.splitlines()[0])
    parser.add_argument("--host", action="append", default=[], help="Drop a host -> tenant mapping")
    parser.add_argument(
        "--theme", action="append", default=[], metavar="TENANT_ID",
        help="Drop a tenant's theme and purge its pages at the CDN",
    )
    parser.add_argument(
        "--catalog", action="append", default=[], metavar="TENANT_ID",
        help="Drop every cached product, collection and page listing of a tenant",
    )
    args = parser.parse_args(argv)
    if not (args.host or args.theme or args.catalog):
        parser.error("nothing to invalidate: pass --host, --theme and/or --catalog")
    return args


async def main(argv: list[str]) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    setup_logging()
    services = await build_services(settings)
    try:
        for host in args.host:
            await services.tenants.invalidate(host)
            print(f"Tenant mapping invalidated: {host}")
        for tenant_id in args.theme:
            await services.themes.invalidate(tenant_id)
            purged = await services.themes.purge_cdn(tenant_id)
            print(f"Theme invalidated: {tenant_id} (CDN purge: {'ok' if purged else 'skipped/failed'})")
        for tenant_id in args.catalog:
            removed = await services.catalog.invalidate_tenant(tenant_id)
            print(f"Catalog invalidated: {tenant_id} ({removed} keys)")
    finally:
        await services.close()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
