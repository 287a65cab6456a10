"""Usage tracking: one best-effort GET per plugin lifecycle action."""

from __future__ import annotations

import threading
import urllib.parse
import urllib.request
from typing import Callable

EVENTS = ("install", "uninstall", "update")


class UsageReporter:
    """Fire-and-forget reporter for plugin install/uninstall/update events.

    ``report`` never raises and returns nothing: a failed request has no
    effect on the action it accompanies.
    """

    def __init__(
        self,
        host: str,
        user_agent: str,
        timeout: float = 5.0,
        background: bool = False,
        opener: Callable | None = None,
    ):
        self.host = host
        self.user_agent = user_agent
        self.timeout = timeout
        self.background = background
        self._opener = opener or urllib.request.urlopen

    @property
    def base_url(self) -> str:
        host = self.host.rstrip("/")
        return host if host.startswith(("http://", "https://")) else f"https://api.{host}"

    def endpoint(self, event: str) -> str:
        if event not in EVENTS:
            raise ValueError(f"unknown usage event: {event!r}")
        return f"{self.base_url}/usage/plugin_{event}"

    def build_request(self, event: str, plugin_name: str) -> urllib.request.Request:
        query = urllib.parse.urlencode({"plugin_name": plugin_name})
        return urllib.request.Request(
            f"{self.endpoint(event)}?{query}",
            headers={"User-Agent": self.user_agent},
            method="GET",
        )

    def _send(self, event: str, plugin_name: str) -> None:
        try:
            request = self.build_request(event, plugin_name)
            with self._opener(request, timeout=self.timeout) as resp:
                resp.read()
        except Exception:
            pass  # usage tracking must never block a plugin action

    def report(self, event: str, plugin_name: str) -> None:
        if event not in EVENTS:
            raise ValueError(f"unknown usage event: {event!r}")
        if self.background:
            threading.Thread(target=self._send, args=(event, plugin_name), daemon=True).start()
        else:
            self._send(event, plugin_name)
