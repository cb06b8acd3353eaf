# Custom hypothesis strategies

from hypothesis import strategies as st


@st.composite
def st_length_bounds(draw, max_value=20):
    """Strategy for generating valid (min_length, max_length) pairs"""
    min_length = draw(st.integers(min_value=0, max_value=max_value))
    max_length = draw(st.integers(min_value=min_length, max_value=max_value))
    return min_length, max_length


@st.composite
def st_inverted_bounds(draw, max_value=255):
    """Strategy for generating pairs where min_length > max_length"""
    max_length = draw(st.integers(min_value=0, max_value=max_value - 1))
    min_length = draw(st.integers(min_value=max_length + 1, max_value=max_value))
    return min_length, max_length


def st_seeds():
    return st.integers(min_value=0, max_value=2 ** 64 - 1)
