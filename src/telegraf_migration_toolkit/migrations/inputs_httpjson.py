"""
Migration of the deprecated ``inputs.httpjson`` plugin to ``inputs.http``.

The http plugin parses the response with the json data format. Request
parameters become the URL query for GET requests and a form encoded body for
POST requests.
"""

import logging
from typing import Any, Dict, List
from urllib.parse import urlencode, urlsplit, urlunsplit

from ..core.document import Table
from ..core.errors import MigrationError
from .common import pop_string, render_plugin

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _add_query(url: str, query: str) -> str:
    parts = urlsplit(url)
    combined = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit(parts._replace(query=combined))


def migrate_httpjson(table: Table) -> bytes:
    """Convert an ``[[inputs.httpjson]]`` instance to ``[[inputs.http]]``."""
    old = table.to_dict()
    fields: Dict[str, Any] = {}

    name = pop_string(old, "name")
    fields["name_override"] = f"httpjson_{name}" if name else "httpjson"

    servers: List[str] = old.pop("servers", [])
    if not isinstance(servers, list) or not all(isinstance(s, str) for s in servers):
        raise MigrationError("option 'servers' must be a list of strings")

    method = pop_string(old, "method", "GET").upper()
    parameters = old.pop("parameters", {})
    headers = dict(old.pop("headers", {}))

    if not isinstance(parameters, dict):
        raise MigrationError("option 'parameters' must be a table")
    for key, value in parameters.items():
        if not isinstance(value, str):
            raise MigrationError(f"parameter '{key}' must be a string, got {type(value).__name__}")

    query = urlencode(sorted(parameters.items())) if parameters else ""
    if method == "GET":
        urls = [_add_query(url, query) for url in servers] if query else servers
        body = ""
    elif method == "POST":
        urls = servers
        body = query
        if body and not any(k.lower() == "content-type" for k in headers):
            headers["Content-Type"] = FORM_CONTENT_TYPE
    else:
        raise MigrationError(f"unsupported method '{method}'")

    fields["urls"] = urls
    fields["method"] = method
    if body:
        fields["body"] = body

    if "response_timeout" in old:
        fields["timeout"] = old.pop("response_timeout")

    # Remaining options (tag_keys, tls settings, ...) have the same meaning in inputs.http
    fields.update(old)
    fields["data_format"] = "json"
    if headers:
        fields["headers"] = headers

    logger.debug(f"Converted httpjson instance '{name or '<unnamed>'}' with {len(urls)} url(s)")
    return render_plugin("inputs", "http", fields)
