"""URL routes of the service."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, abort, redirect

from skeleton.application import Application
from skeleton.docs import TITLE, swagger_spec
from skeleton.handlers import Handler
from skeleton.response import ok

_SWAGGER_INDEX = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<h1>{title}</h1>
<p><a href="doc.json">doc.json</a></p>
<pre id="spec"></pre>
<script>
fetch("doc.json").then(function (r) {{ return r.json(); }}).then(function (spec) {{
  document.getElementById("spec").textContent = JSON.stringify(spec, null, 2);
}});
</script>
</body>
</html>
"""


def _swagger(path: str = "") -> Any:
    if path == "":
        return redirect("/swagger/index.html", code=301)
    if path == "index.html":
        return Response(_SWAGGER_INDEX.format(title=TITLE), mimetype="text/html")
    if path == "doc.json":
        return swagger_spec()
    abort(404)


def register_routes(app: Application) -> None:
    """Attach the global routes, the API docs and the /api/v1 handlers to ``app``."""
    web = app.app
    web.add_url_rule("/", "index", lambda: ok())
    web.add_url_rule("/ping", "ping", lambda: ok("PONG"))

    web.add_url_rule("/swagger/", "swagger", _swagger)
    web.add_url_rule("/swagger/<path:path>", "swagger_file", _swagger)

    handlers = Handler(app)
    api = Blueprint("api_v1", __name__, url_prefix="/api/v1")
    api.add_url_rule("/example", "example", handlers.example, methods=["GET"])
    web.register_blueprint(api)