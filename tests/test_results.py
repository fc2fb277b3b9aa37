"""Unit tests for the result values."""

import errno

from fileutils.results import INVALID_OPTION, MALFORMED_ENTRY, Failure, Success, os_error_reason


def test_success():
    assert Success().ok
    assert Success().value is None
    assert Success(42).value == 42
    assert Success("a") == Success("a")
    assert Success("a") != Success("b")


def test_failure():
    failure = Failure("EEXIST", "hello")
    assert not failure.ok
    assert failure.reason == "EEXIST"
    assert failure.detail == "hello"
    assert failure.error is None


def test_failure_equality_ignores_error():
    assert Failure("ENOENT", "x", error=FileNotFoundError()) == Failure("ENOENT", "x")
    assert Failure("ENOENT", "x") != Failure("ENOENT", "y")
    assert Failure(MALFORMED_ENTRY, "x") != Failure(INVALID_OPTION, "x")


def test_failure_from_os_error():
    error = PermissionError(errno.EACCES, "Permission denied")
    failure = Failure.from_os_error(error, "locked")
    assert failure == Failure("EACCES", "locked")
    assert failure.error is error


def test_os_error_reason():
    assert os_error_reason(FileExistsError(errno.EEXIST, "exists")) == "EEXIST"
    assert os_error_reason(OSError(errno.ENOTEMPTY, "not empty")) == "ENOTEMPTY"
    assert os_error_reason(OSError("no errno")) == "OSError"
    assert os_error_reason(OSError(999999, "unknown errno")) == "OSError"
