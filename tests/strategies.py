"""Hypothesis strategies for property-based testing of tryeither types."""

from hypothesis import strategies as st

from tryeither import Bottom, Left, Right

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Payloads an Either accepts (anything but None)
payloads = st.one_of(integers, texts, booleans, st.lists(integers, max_size=5))

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
    KeyError('test'),
])

rights = integers.map(Right)
lefts = texts.map(Left)
eithers = st.one_of(rights, lefts, st.just(Bottom))
