import pickle

import pytest

from twofold import (
    EmptyUnwrapError,
    ExpectationError,
    SuccessUnwrapError,
    UnwrapError,
    absent,
    failure,
    success,
)


@pytest.mark.parametrize(
    "error_type", [EmptyUnwrapError, ExpectationError, SuccessUnwrapError]
)
def test_unwrap_errors_are_value_errors(error_type):
    assert issubclass(error_type, UnwrapError)
    assert issubclass(error_type, ValueError)


def test_messages_differ_between_containers():
    with pytest.raises(EmptyUnwrapError) as optional_info:
        absent().unwrap()

    with pytest.raises(ValueError) as outcome_info:
        failure(ValueError("fail")).unwrap()

    assert str(outcome_info.value) == "fail"
    assert str(optional_info.value) != str(outcome_info.value)


def test_expectation_error_pickling():
    try:
        failure(KeyError("key")).expect("missing key")
    except ExpectationError as exc:
        exception = exc

    loaded = pickle.loads(pickle.dumps(exception))

    assert isinstance(loaded, ExpectationError)
    assert str(loaded) == "missing key"
    assert isinstance(loaded.__cause__, KeyError)
    assert loaded.__traceback__ is not None


def test_success_unwrap_error_pickling():
    try:
        success(1).unwrap_failure()
    except SuccessUnwrapError as exc:
        exception = exc

    loaded = pickle.loads(pickle.dumps(exception))

    assert isinstance(loaded, SuccessUnwrapError)
