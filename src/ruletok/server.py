"""TCP socket server and client for one-document-per-connection tokenization.

Protocol: the client sends UTF-8 text lines followed by the line
``<ENDOFDOCUMENT>``. The server joins the lines with ``\\n``, runs
`ruletok.core.process` once and writes the rendered result back, then closes
the connection. A request that fails is closed without any response.
"""

from __future__ import annotations

import logging
import socket
import socketserver

from ruletok.core import process
from ruletok.io import decode_text
from ruletok.models import ProcessingConfig

logger = logging.getLogger(__name__)

END_OF_DOCUMENT = "<ENDOFDOCUMENT>"
_SENTINEL = END_OF_DOCUMENT.encode("utf-8")


class DocumentHandler(socketserver.StreamRequestHandler):
    """Reads one document, processes it and writes one response."""

    server: TokenizerServer

    def handle(self) -> None:
        lines: list[bytes] = []
        for raw_line in self.rfile:
            line = raw_line.rstrip(b"\r\n")
            if line == _SENTINEL:
                break
            lines.append(line)

        try:
            text = decode_text(b"\n".join(lines))
            output = process(text, self.server.processing_config)
        except ValueError as exc:
            logger.warning("Rejected document from %s: %s", self.client_address, exc)
            return

        if output and not output.endswith("\n"):
            output += "\n"
        self.wfile.write(output.encode("utf-8"))
        logger.debug("Processed %d input lines from %s", len(lines), self.client_address)


class TokenizerServer(socketserver.ThreadingTCPServer):
    """Threaded TCP server bound to one immutable processing config."""

    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, address: tuple[str, int], processing_config: ProcessingConfig) -> None:
        self.processing_config = processing_config
        super().__init__(address, DocumentHandler)


def serve_forever(processing_config: ProcessingConfig, host: str, port: int) -> None:
    """Run the accept loop until interrupted."""
    with TokenizerServer((host, port), processing_config) as server:
        bound_host, bound_port = server.server_address[:2]
        logger.info(
            "Serving %s tokenization on %s:%d",
            processing_config.language,
            bound_host,
            bound_port,
        )
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down tokenizer server")


def send_document(text: str, host: str, port: int, *, timeout: float | None = None) -> str:
    """Send `text` to a running server and return its response."""
    payload = text if text.endswith("\n") or not text else text + "\n"
    payload += END_OF_DOCUMENT + "\n"
    with socket.create_connection((host, port), timeout=timeout) as connection:
        connection.sendall(payload.encode("utf-8"))
        chunks: list[bytes] = []
        while True:
            chunk = connection.recv(65536)
            if not chunk:
                break
            chunks.append(chunk)
    return decode_text(b"".join(chunks))
