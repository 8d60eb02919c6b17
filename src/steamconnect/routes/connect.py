"""Route translating ``/host:port[/password]`` paths into connect redirects."""
from __future__ import annotations

import logging

from flask import Request, Response, request
from markupsafe import escape

from src.steamconnect import app
from src.steamconnect.services.connect_request import MalformedRequestError
from src.steamconnect.services.resolver import DEFAULT_ADDRESS_FAMILY
from src.steamconnect.services.translator import UnresolvableHostError, translate_path

logger = logging.getLogger(__name__)

_DEFAULT_REDIRECT_CODE = 302

_EXAMPLE_PATHS = (
    "116.202.245.30:27015/password",
    "teamserver.example.com:27015/password",
    "116.202.245.30:27015",
    "teamserver.example.com:27015",
)


@app.route("/", defaults={"connect_path": ""}, methods=["GET"])
@app.route("/<path:connect_path>", methods=["GET"])
def connect_redirect(connect_path: str) -> Response:
    """Redirect the browser to the ``steam://connect`` URI for the path.

    ``connect_path`` only routes the request. The translator reads the raw
    request target so percent-escapes in the password survive untouched.
    """

    family = app.config.get("STEAMCONNECT_ADDRESS_FAMILY", DEFAULT_ADDRESS_FAMILY)

    try:
        target = translate_path(_raw_request_path(request), family=family)
    except MalformedRequestError:
        logger.warning("Rejected request with malformed path")
        return _html_response(_usage_message(), 400)
    except UnresolvableHostError as exc:
        logger.warning("Rejected request for unresolvable host %s: %s", exc.host, exc.reason)
        return _html_response(f"Error: {escape(str(exc))}", 400)

    code = app.config.get("STEAMCONNECT_REDIRECT_CODE", _DEFAULT_REDIRECT_CODE)
    return Response(status=code, headers={"Location": target.connect_uri})


def _raw_request_path(flask_request: Request) -> str:
    environ = flask_request.environ
    raw_uri = environ.get("RAW_URI") or environ.get("REQUEST_URI")
    if not raw_uri:
        return flask_request.path

    path = raw_uri.split("?", 1)[0]
    script_root = flask_request.script_root
    if script_root and path.startswith(script_root):
        path = path[len(script_root):]
    return path


def _usage_message() -> str:
    base_url = app.config.get("STEAMCONNECT_PUBLIC_URL") or request.host_url
    base_url = escape(base_url.rstrip("/"))

    lines = [
        "Error: Invalid request format. Use the following format:",
        f"<strong>{base_url}/hostname:port/password</strong>",
        "Examples:",
    ]
    lines.extend(f"{base_url}/{example}" for example in _EXAMPLE_PATHS)
    return "<br>\n".join(lines)


def _html_response(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype="text/html")
