import pytest

from stock_service.core.exceptions import StartupError
from stock_service.core.utils import parse_bind_address


@pytest.mark.parametrize("address, expected", [
    ("[::1]:50073", ("::1", 50073)),
    ("[::]:8080", ("::", 8080)),
    ("0.0.0.0:50073", ("0.0.0.0", 50073)),
    ("localhost:9000", ("localhost", 9000)),
    (" 127.0.0.1:80 ", ("127.0.0.1", 80)),
])
def test_parse_bind_address(address, expected):
    assert parse_bind_address(address) == expected


@pytest.mark.parametrize("address", [
    "",
    "50073",
    "::1:50073",
    "[::1]",
    "127.0.0.1:",
    "127.0.0.1:port",
    "127.0.0.1:70000",
    "127.0.0.1:0",
])
def test_parse_bind_address_rejects_invalid(address):
    with pytest.raises(StartupError):
        parse_bind_address(address)
