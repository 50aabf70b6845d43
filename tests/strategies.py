"""Hypothesis strategies for property-based testing of fnkit types."""

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers()
small_integers = st.integers(min_value=-1000, max_value=1000)
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# -----------------------------------------------------------------------------
# Sequence strategies
# -----------------------------------------------------------------------------

int_lists = st.lists(small_integers, max_size=50)
text_lists = st.lists(st.text(max_size=8), max_size=30)

# Keys are str or int, as Map requires
map_keys = st.one_of(st.integers(min_value=-50, max_value=50), st.text(max_size=6))
int_dicts = st.dictionaries(map_keys, small_integers, max_size=20)

# Start and length arguments for slice
slice_bounds = st.tuples(
    st.integers(min_value=-60, max_value=60),
    st.one_of(st.none(), st.integers(min_value=-60, max_value=60)),
)
