import logging

import pytest

from twofold.outcome import attempt, collect, failure, success


@attempt(ZeroDivisionError)
def divide(a: float, b: float) -> float:
    return a / b


def test_attempt_success():
    assert divide(1, 2) == success(0.5)


def test_attempt_captures_exception():
    outcome = divide(1, 0)

    assert outcome.is_failure()
    assert isinstance(outcome.unwrap_failure(), ZeroDivisionError)


def test_attempt_propagates_other_exceptions():
    with pytest.raises(TypeError):
        divide(1, "a")


def test_attempt_default_captures_any_exception():
    @attempt()
    def parse(text: str) -> int:
        return int(text)

    assert parse("1") == success(1)
    assert parse("a").is_failure()


def test_attempt_logs_captured_exception(caplog):
    logger = logging.getLogger("test_attempt")

    @attempt(KeyError, logger=logger, level=logging.WARNING)
    def lookup(key: str) -> int:
        return {"a": 1}[key]

    with caplog.at_level(logging.WARNING, logger="test_attempt"):
        lookup("a")
        assert not caplog.records

        lookup("b")

    [record] = caplog.records
    assert record.levelno == logging.WARNING
    assert "lookup" in record.getMessage()
    assert isinstance(record.exc_info[1], KeyError)


def test_attempt_preserves_metadata():
    assert divide.__name__ == "divide"


def test_collect_all_successes():
    assert collect([success(1), success(2)]) == success([1, 2])
    assert collect([]) == success([])


def test_collect_stops_at_first_failure():
    first = ValueError("first")
    consumed = []

    def outcomes():
        for outcome in [success(1), failure(first), failure(ValueError("second"))]:
            consumed.append(outcome)
            yield outcome

    result = collect(outcomes())

    assert result.unwrap_failure() is first
    assert len(consumed) == 2
