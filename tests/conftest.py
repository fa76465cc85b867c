import logging
import socket

import pytest


@pytest.fixture
def listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    sock.listen(50)
    yield sock.getsockname()[1]
    sock.close()


@pytest.fixture
def closed_port_factory():
    def _make():
        # bind and release so nothing is listening on the port afterwards
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", 0))
            return s.getsockname()[1]

    return _make


@pytest.fixture(autouse=True)
def reset_eyes_logger():
    # create_logger binds its handler to whatever stderr is current
    yield
    logger = logging.getLogger("eyes")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
