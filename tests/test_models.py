import pytest

from slack_client.models import Err, Ok


def test_ok_unpacks_as_no_error_and_value():
    error, value = Ok({"ok": True})

    assert error is None
    assert value == {"ok": True}


def test_err_unpacks_as_error_and_no_value():
    failure = RuntimeError("channel_not_found")

    error, value = Err(failure)

    assert error is failure
    assert value is None


def test_flags_are_exclusive():
    assert Ok(1).is_ok and not Ok(1).is_err
    assert Err(ValueError()).is_err and not Err(ValueError()).is_ok


def test_err_requires_an_exception():
    with pytest.raises(TypeError):
        Err("not_an_exception")


def test_unwrap():
    assert Ok([1, 2]).unwrap() == [1, 2]
    with pytest.raises(KeyError):
        Err(KeyError("missing")).unwrap()
