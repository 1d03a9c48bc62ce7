"""Request handlers of the versioned API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from skeleton.application import Application
from skeleton.dto import ExampleResponse
from skeleton.response import ok


class Handler:
    """Holds the application that the handlers work with."""

    def __init__(self, app: Application) -> None:
        self.app = app

    def example(self) -> tuple[dict[str, Any], int]:
        """Return a sample example item."""
        now = datetime.now().astimezone()
        body = ExampleResponse(
            id=1,
            name="Contoh",
            price=2500,
            created_at=now,
            updated_at=now,
        )
        self.app.log.info("Example log : %r", body)
        return ok("Handler or controller response example", body)