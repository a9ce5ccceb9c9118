import pytest
from hypothesis import settings, strategies as st

import bigconfig
from bigconfig import DIGIT_BITS, DIGIT_MASK

NAMESPACES = ['numpy', 'array_api_strict']

SAMPLES = [
    0, 1, -1, 2, -3, 7, 28,
    2**31, -(2**31), 2**32 - 1, 2**32, -(2**32), 2**32 + 1,
    2**64 - 1, 2**64 + 5, -(2**96 - 1), 10**9, 10**18 - 1,
    123456789012345678901234567890, -98765432109876543210,
    3**100, -(7**60), (2**32 + 1) * 2**96,
    2**95 + 2**32 - 1, -((2**32 - 1) << 128 | 1), 2**160 - 1,
]

# digit values that stress carries, borrows and sign extension
DIGIT_PATTERNS = [0, 1, 2**31, DIGIT_MASK]

settings.register_profile('bigdigit', deadline=None)
settings.load_profile('bigdigit')

def _fold(digits):
    value = 0
    for digit in digits:
        value = (value << DIGIT_BITS) | digit
    return value

def lopsided_magnitudes(min_digits=1, max_digits=6):
    '''Magnitudes of min_digits to max_digits digits, most of them drawn from
    DIGIT_PATTERNS. The top digit is never zero.'''
    digit = st.sampled_from(DIGIT_PATTERNS) | st.integers(0, DIGIT_MASK)
    top = st.sampled_from(DIGIT_PATTERNS[1:]) | st.integers(1, DIGIT_MASK)
    rest = st.lists(digit, min_size=min_digits - 1, max_size=max_digits - 1)
    return st.builds(lambda t, r: _fold([t] + r), top, rest)

def lopsided_integers(max_digits=6):
    return st.builds(lambda negative, m: -m if negative else m, st.booleans(), lopsided_magnitudes(1, max_digits))

big_integers = st.integers() | lopsided_integers()
big_magnitudes = st.integers(min_value=0) | lopsided_magnitudes()

@pytest.fixture(params=NAMESPACES)
def xp(request):
    return pytest.importorskip(request.param)

@pytest.fixture
def reset_namespace():
    yield
    bigconfig.set_array_namespace(None)
