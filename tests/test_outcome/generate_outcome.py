import hypothesis.strategies

from twofold.outcome import success, failure

values = hypothesis.strategies.one_of(
    hypothesis.strategies.none(),
    hypothesis.strategies.integers(),
    hypothesis.strategies.text(),
)
messages = hypothesis.strategies.text()
errors = hypothesis.strategies.builds(
    lambda error_type, message: error_type(message),
    hypothesis.strategies.sampled_from([ValueError, RuntimeError, TypeError]),
    messages,
)
successful_outcome = hypothesis.strategies.builds(success, values)
failed_outcome = hypothesis.strategies.builds(failure, errors)
outcome = hypothesis.strategies.one_of(successful_outcome, failed_outcome)
