import os

import hypothesis.strategies as st

# allows us to run short CI and longer scheduled property tests
TEST_ITERATIONS = int(os.environ.get("TEST_ITERATIONS", 100))

#: Lists of booleans, long enough to cover several bytes plus a partial one.
bit_lists = st.lists(st.booleans(), max_size=200)


@st.composite
def same_size_bit_lists(draw: st.DrawFn) -> tuple[list[bool], list[bool]]:
    """
    Draws two lists of booleans of the same length.
    """

    size = draw(st.integers(min_value=0, max_value=200))
    fixed = st.lists(st.booleans(), min_size=size, max_size=size)
    return draw(fixed), draw(fixed)
