import pytest

from cubmap.errors import ParseError


def test_message_is_kept():
    error = ParseError("Map error")
    assert error.message == "Map error"
    assert str(error) == "Map error"


@pytest.mark.parametrize(
    "message",
    ["No map", "Invalid line", "Map not closed", "Player missing", "Multiple player"],
)
def test_is_an_exception_carrying_its_message(message):
    error = ParseError(message)
    assert isinstance(error, Exception)
    assert error.message == message
    assert str(error) == message