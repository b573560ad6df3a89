import socket
import threading
from collections.abc import Iterator

import pytest

from ruletok.models import ProcessingConfig
from ruletok.server import END_OF_DOCUMENT, TokenizerServer, send_document


@pytest.fixture
def server() -> Iterator[TokenizerServer]:
    config = ProcessingConfig(language="en", output_format="oneline")
    instance = TokenizerServer(("127.0.0.1", 0), config)
    thread = threading.Thread(target=instance.serve_forever, daemon=True)
    thread.start()
    try:
        yield instance
    finally:
        instance.shutdown()
        instance.server_close()
        thread.join(timeout=5)


def _address(server: TokenizerServer) -> tuple[str, int]:
    host, port = server.server_address[:2]
    return host, port


def test_send_document_round_trip(server: TokenizerServer) -> None:
    host, port = _address(server)

    response = send_document("Hello world.\nBye.", host, port, timeout=5)

    assert response == "Hello world .\nBye .\n"


def test_one_document_per_connection(server: TokenizerServer) -> None:
    host, port = _address(server)

    first = send_document("One.", host, port, timeout=5)
    second = send_document("Two.", host, port, timeout=5)

    assert (first, second) == ("One .\n", "Two .\n")


def test_end_of_stream_ends_document(server: TokenizerServer) -> None:
    with socket.create_connection(_address(server), timeout=5) as connection:
        connection.sendall(b"No sentinel here.")
        connection.shutdown(socket.SHUT_WR)
        response = connection.makefile("rb").read()

    assert response == b"No sentinel here .\n"


def test_invalid_utf8_closes_without_response(server: TokenizerServer) -> None:
    with socket.create_connection(_address(server), timeout=5) as connection:
        connection.sendall(b"caf\xe9\n" + END_OF_DOCUMENT.encode("utf-8") + b"\n")
        response = connection.makefile("rb").read()

    assert response == b""
