from __future__ import annotations

"""
Simple TCP REPL server for tinylisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(if #t 1 2)"}
- Request: {"cmd": "reset"}
- Response: {"ok": true, "result": "<printed value>"} or {"ok": false, "error": <message>}

Every connection gets its own Interpreter, so environments are never shared
between clients; within a connection they persist across requests.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, Optional, Tuple

from tinylisp.config import get_settings
from tinylisp.errors import TinyLispError
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_string

logger = logging.getLogger(__name__)


def _render(result: Any) -> str:
    if isinstance(result, list):
        return "\n".join(to_string(r) for r in result)
    return to_string(result)


def handle_request(interp: Interpreter, line: bytes | str) -> Tuple[Dict[str, Any], Interpreter]:
    """Answer one request line; returns the response and the session to keep."""
    try:
        req = json.loads(line)
    except ValueError as ex:
        return {"ok": False, "error": f"Invalid request: {ex}"}, interp
    if not isinstance(req, dict):
        return {"ok": False, "error": "Invalid request: expected a JSON object"}, interp

    cmd = req.get("cmd")
    if cmd == "eval":
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: 'code' must be a string"}, interp
        try:
            result = interp.eval(code)
        except TinyLispError as ex:
            return {"ok": False, "error": str(ex)}, interp
        return {"ok": True, "result": _render(result)}, interp
    if cmd == "reset":
        return {"ok": True, "result": "()"}, Interpreter(forms=interp.forms)
    return {"ok": False, "error": f"Unknown cmd: {cmd}"}, interp


class ReplServer:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None):
        settings = get_settings()
        self.host = host or settings.repl_host
        self.port = settings.repl_port if port is None else port

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("client connected: %s:%d", *addr)
        interp = Interpreter()
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
                    resp, interp = handle_request(interp, line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("client disconnected: %s:%d", *addr)
