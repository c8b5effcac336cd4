"""
Temporary local server for previewing a built site directory
"""
import logging
import socket
import threading
from functools import partial
from http.server import HTTPServer, SimpleHTTPRequestHandler
from pathlib import Path

logger = logging.getLogger(__name__)


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        logger.debug("preview: " + format, *args)


class TempSiteServer:
    def __init__(self):
        self.server = None
        self.server_thread = None
        self.directory = None
        self.port = None
        self.is_running = False

    def start_server(self, directory) -> str:
        """
        Serve `directory` on a free port from a background thread.
        Returns the base URL. Any server already running is stopped first.
        """
        if self.is_running:
            self.stop_server()

        self.directory = Path(directory).resolve()
        if not self.directory.is_dir():
            raise NotADirectoryError(str(self.directory))

        self.port = self._find_free_port()
        handler = partial(_QuietHandler, directory=str(self.directory))
        self.server = HTTPServer(("127.0.0.1", self.port), handler)

        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        self.is_running = True
        logger.info("serving %s at %s", self.directory, self.get_current_url())
        return self.get_current_url()

    def stop_server(self):
        """Stop the server and wait for its thread"""
        if self.server:
            self.server.shutdown()
            self.server.server_close()
            self.server = None

        if self.server_thread:
            self.server_thread.join(timeout=2)  # Wait up to 2 seconds
            self.server_thread = None

        self.directory = None
        self.is_running = False

    def is_server_running(self) -> bool:
        return self.is_running and self.server is not None

    def get_current_url(self):
        """Base URL of the running server, None otherwise"""
        if self.is_server_running():
            return f"http://127.0.0.1:{self.port}/"
        return None

    def _find_free_port(self) -> int:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", 0))
            return s.getsockname()[1]


# Process-wide instance for quick previews
_temp_server = TempSiteServer()


def serve_site_temporarily(directory) -> str:
    """Serve a built site, replacing any previous preview. Returns its base URL."""
    return _temp_server.start_server(directory)


def cleanup_temp_server():
    _temp_server.stop_server()
