import pytest

from fdf.errors import ErrorKind, FdfError, error_message


@pytest.mark.parametrize(
    "kind, message",
    [
        (ErrorKind.MEMORY, "malloc failed"),
        (ErrorKind.INVALID_INPUT, "invalid input"),
        (ErrorKind.OPEN_FAILED, "coudln't open file"),
    ],
)
def test_messages(kind, message):
    assert error_message(kind) == message


def test_plain_int_kind():
    assert error_message(int(ErrorKind.MEMORY)) == error_message(ErrorKind.MEMORY)


def test_unknown_kind():
    assert error_message(99) == "error"


def test_exit_code_follows_kind():
    err = FdfError(ErrorKind.OPEN_FAILED)
    assert err.exit_code == int(ErrorKind.OPEN_FAILED)
    assert err.kind is ErrorKind.OPEN_FAILED


def test_str_is_message():
    assert str(FdfError(ErrorKind.INVALID_INPUT)) == "invalid input"


def test_detail_appended():
    err = FdfError(ErrorKind.MEMORY, "no room")
    assert str(err) == "malloc failed: no room"
    assert err.detail == "no room"


@pytest.mark.parametrize(
    "kind, code",
    [
        (ErrorKind.MEMORY, 2),
        (ErrorKind.INVALID_INPUT, 3),
        (ErrorKind.OPEN_FAILED, 4),
    ],
)
def test_exit_codes_pinned(kind, code):
    assert FdfError(kind).exit_code == code