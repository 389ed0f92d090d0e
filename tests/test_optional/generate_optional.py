import hypothesis.strategies

from twofold.optional import present, absent

values = hypothesis.strategies.one_of(
    hypothesis.strategies.none(),
    hypothesis.strategies.integers(),
    hypothesis.strategies.text(),
    hypothesis.strategies.floats(allow_nan=False),
)
present_optional = hypothesis.strategies.builds(present, values)
absent_optional = hypothesis.strategies.builds(absent)
optional = hypothesis.strategies.one_of(present_optional, absent_optional)
