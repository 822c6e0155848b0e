"""
Migration of the deprecated ``outputs.riemann_legacy`` plugin to ``outputs.riemann``.
"""

from ..core.document import Table
from ..core.errors import MigrationError
from .common import pop_string, render_plugin

TRANSPORTS = ("tcp", "udp")


def migrate_riemann_legacy(table: Table) -> bytes:
    """Convert an ``[[outputs.riemann_legacy]]`` instance to ``[[outputs.riemann]]``.

    The legacy plugin takes the transport as a separate option while the new
    plugin expects it as the scheme of the url.
    """
    fields = table.to_dict()

    transport = pop_string(fields, "transport", "tcp").lower()
    if transport not in TRANSPORTS:
        raise MigrationError(f"unsupported transport '{transport}'")

    url = pop_string(fields, "url", "localhost:5555")
    if "://" not in url:
        url = f"{transport}://{url}"

    return render_plugin("outputs", "riemann", {"url": url, **fields})
