"""
Simple TCP session server for minipy.

Protocol: JSON per line over TCP.
- Request: {"cmd": "exec", "code": "x = [1, 2]"}
- Response: {"ok": true, "output": [<printed lines and diagnostics>]}
            or {"ok": false, "error": <message>}

All clients share one session, so variables persist across connections.
Commands from different connections are executed one at a time under a lock.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from typing import Any, Tuple

from minipy.config import get_server_address
from minipy.interpreter import Interpreter

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_server_address()
        self.host = host or default_host
        self.port = port if port is not None else default_port
        self._lock = threading.Lock()
        self._captured: list[str] = []
        # Keep a single interpreter to maintain session state
        self.interp = Interpreter(output=self._captured.append)

    def execute(self, code: str) -> list[str]:
        """Run each line of `code` in the shared session and return its output."""
        with self._lock:
            self._captured.clear()
            for line in code.splitlines() or [""]:
                self.interp.execute(line)
            return list(self._captured)

    def handle_request(self, req: Any) -> dict:
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "exec":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: 'code' must be a string"}
        return {"ok": True, "output": self.execute(code)}

    def handle_line(self, line: bytes) -> dict:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        try:
            return self.handle_request(req)
        except Exception as ex:
            logger.exception("request failed")
            return {"ok": False, "error": str(ex)}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("minipy session server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s", addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s", addr)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
