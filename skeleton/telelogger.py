"""Push error reports to a Telegram chat."""

from __future__ import annotations

import logging
import threading
from urllib.parse import quote_plus

from skeleton.config import Config
from skeleton.rest import RestClient

# Substrings of messages that are never pushed.
ERROR_WHITELIST: list[str] = []


class TeleLogger:
    """Sends messages to a Telegram bot when ENABLE_TELEGRAM_LOG is on."""

    def __init__(self, logger: logging.Logger, config: Config) -> None:
        self.log = logger
        self.config = config

    def _endpoint(self) -> str:
        return (
            self.config.get_string("TELEGRAM_BOT_ENDPOINT")
            + self.config.get_string("TELEGRAM_BOT_TOKEN")
            + "/sendMessage?"
        )

    def build_url(self, text: str) -> str:
        """Return the sendMessage URL carrying ``text``."""
        return (
            self._endpoint()
            + "chat_id="
            + self.config.get_string("TELEGRAM_BOT_CHATID")
            + "&text="
            + quote_plus(text)
            + "&parse_mode=html"
        )

    def push_error(self, err: BaseException) -> threading.Thread | None:
        """Push ``err`` headed by the service name and environment."""
        text = "SERVICE NAME : *{}* (ENV={})".format(
            self.config.get_string("APP_NAME"), self.config.get_string("ENVIRONMENT")
        )
        return self.push_string(f"{text}\n\n{err}")

    def push_string(self, text: str) -> threading.Thread | None:
        """Send ``text`` in the background; return the sending thread, or None if skipped."""
        if not self.config.get_bool("ENABLE_TELEGRAM_LOG"):
            return None
        for entry in ERROR_WHITELIST:
            if entry in text:
                self.log.info("TeleLogger IGNORED (Whitelist=%s)", entry)
                return None
        thread = threading.Thread(target=self._send, args=(text,), daemon=True)
        thread.start()
        return thread

    def _send(self, text: str) -> None:
        target = self._endpoint()
        try:
            client = RestClient(
                self.config.get_string("TELEGRAM_BOT_LOG_PATH"),
                url=self.build_url(text),
                method="POST",
                timeout=5,
                headers={"Accept": "application/json"},
                debug=False,
            )
        except OSError as exc:
            self.log.critical("%s", exc)
            return
        with client:
            _, status = client.execute()
        if status >= 400 or status < 200:
            self.log.info("TeleLogger FAIL (%d) : %s", status, target)