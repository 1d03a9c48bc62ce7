"""Command that starts the HTTP service."""

from __future__ import annotations

import argparse
import signal
import threading
from collections.abc import Sequence
from socketserver import ThreadingMixIn
from typing import Any, Optional
from wsgiref.simple_server import WSGIServer, make_server

from skeleton.application import new_application
from skeleton.routes import register_routes

VERSION = "dev"
BUILD_DATE = "realtime"
SHUTDOWN_TIMEOUT = 10.0


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


def wait_timeout(event: threading.Event, timeout: float) -> bool:
    """Wait for ``event``; return True if ``timeout`` seconds passed first."""
    return not event.wait(timeout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the service until it is stopped by SIGINT or SIGTERM."""
    parser = argparse.ArgumentParser(prog="skeleton", description="Run the HTTP service.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION} (build date {BUILD_DATE})",
    )
    parser.parse_args(argv)

    application = new_application()
    log = application.log
    try:
        log.info("Running on version %s (build date %s)", VERSION, BUILD_DATE)
        register_routes(application)

        port = application.config.get_string("PORT")
        try:
            server = make_server(
                "", int(port), application.app, server_class=_ThreadingWSGIServer
            )
        except (ValueError, OSError) as exc:
            log.critical("could not listen on :%s: %s", port, exc)
            return 1

        # Nothing registers in-flight work yet, so the wait ends at once.
        idle = threading.Event()
        idle.set()

        def _shutdown() -> None:
            wait_timeout(idle, SHUTDOWN_TIMEOUT)
            log.info("Gracefully shutting down...")
            server.shutdown()

        def _on_signal(signum: int, frame: Any) -> None:
            log.info("Initiate gracefully shutdown with exit signal")
            threading.Thread(target=_shutdown, daemon=True).start()

        previous = {
            sig: signal.signal(sig, _on_signal) for sig in (signal.SIGINT, signal.SIGTERM)
        }
        try:
            log.info("http server started on :%s", port)
            server.serve_forever()
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)
            server.server_close()

        log.critical("http: Server closed")
        return 1
    finally:
        if application.db is not None:
            application.db.dispose()


if __name__ == "__main__":
    raise SystemExit(main())