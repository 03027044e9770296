"""Tests for exit code constants."""

from smart_todo.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_STORAGE,
    SUCCESS,
    get_exit_code_name,
)


def test_codes_are_distinct():
    assert len({SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_STORAGE}) == 4


def test_known_names():
    assert get_exit_code_name(SUCCESS) == "SUCCESS"
    assert get_exit_code_name(ERROR_STORAGE) == "ERROR_STORAGE"


def test_unknown_code():
    assert get_exit_code_name(42) == "UNKNOWN(42)"
