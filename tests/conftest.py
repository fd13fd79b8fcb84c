import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
from rich.console import Console

from crowns_cli import display


class RecordingHandler(BaseHTTPRequestHandler):
    reply = b"hello crowns"

    def _handle(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        self.server.seen.append({
            "method": self.command,
            "path": self.path,
            "headers": {k.lower(): v for k, v in self.headers.items()},
            "body": body.decode("utf-8"),
            "at": time.monotonic(),
        })
        self.send_response(self.server.status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(self.reply)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(self.reply)

    do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_HEAD = _handle

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), RecordingHandler)
    httpd.seen = []
    httpd.status = 200
    httpd.url = f"http://127.0.0.1:{httpd.server_address[1]}/echo"
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield httpd
    httpd.shutdown()
    httpd.server_close()


@pytest.fixture
def dead_url():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}/"


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    monkeypatch.setattr(display, "console", Console(theme=display.custom_theme, color_system=None))
    monkeypatch.setattr(display, "err_console",
                        Console(theme=display.custom_theme, color_system=None, stderr=True))
