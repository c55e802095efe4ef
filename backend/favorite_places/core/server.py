"""
Lifecycle of the embedded places server.

The service normally lives in the same process as its client, so the listener
is started on demand on a background thread. ``start`` is idempotent: if this
service already answers on the configured port (started earlier in this
process or by another one) nothing new is bound.
"""
import logging
import threading
import time
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI

from favorite_places.core.config import settings
from favorite_places.core.errors import ForeignServiceError, ServiceStateError
from favorite_places.core.logger import logs


class PlacesServer:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None, identifier: Optional[str] = None):
        self.host = host or settings.SERVER_HOST
        self.port = port or settings.SERVER_PORT
        self.identifier = identifier or settings.SERVER_IDENTIFIER
        self._lock = threading.Lock()
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def started(self) -> bool:
        return self._server is not None

    def start(self, app: Optional[FastAPI] = None) -> None:
        with self._lock:
            if self._server is not None or self.is_running(wait=False):
                return

            if app is None:
                from favorite_places.main import create_app
                app = create_app()

            config = uvicorn.Config(
                app, host=self.host, port=self.port, log_level="warning", access_log=False
            )
            server = uvicorn.Server(config)
            thread = threading.Thread(target=server.run, name="favorite-places-server", daemon=True)
            thread.start()

            # uvicorn exits the thread if it cannot bind
            while not server.started and thread.is_alive():
                time.sleep(0.01)
            if not server.started:
                raise ServiceStateError(f"Places server failed to start on {self.url}")

            self._server = server
            self._thread = thread
            logs.log(logging.INFO, f"Places server listening on {self.url}")

    def stop(self) -> None:
        with self._lock:
            if self._server is None:
                return
            self._server.should_exit = True
            self._thread.join(timeout=5)
            self._server = None
            self._thread = None
            logs.log(logging.INFO, f"Places server on {self.url} stopped")

    def is_running(
        self, wait: bool, retry_count: Optional[int] = None, retry_delay: Optional[float] = None
    ) -> bool:
        """
        Probes GET / for the service identifier.

        Connection failures are retried only when ``wait`` is set, sleeping
        ``retry_delay`` seconds between at most ``retry_count`` attempts.
        A non-2xx answer raises ServiceStateError, and a 2xx answer with the
        wrong body raises ForeignServiceError: some other service holds the port.
        """
        if retry_count is None:
            retry_count = settings.READINESS_RETRY_COUNT
        if retry_delay is None:
            retry_delay = settings.READINESS_RETRY_DELAY

        for attempt in range(retry_count):
            try:
                response = httpx.get(f"{self.url}/", trust_env=False)
            except httpx.TransportError as e:
                logs.log(logging.DEBUG, f"Probe {attempt + 1}/{retry_count} of {self.url} failed: {e}")
                if not wait:
                    break
                time.sleep(retry_delay)
                continue

            if not response.is_success:
                raise ServiceStateError(f"{self.url} answered {response.status_code}")
            if response.text != self.identifier:
                raise ForeignServiceError(self.port, response.text)
            return True
        return False

    def reset(self) -> None:
        """Restores the served catalog to the bundled dataset."""
        response = httpx.get(f"{self.url}/reset/", trust_env=False)
        if not response.is_success:
            raise ServiceStateError(f"Reset of {self.url} failed with {response.status_code}")


places_server = PlacesServer()
