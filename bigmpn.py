# Magnitude ("natural number") routines over DigitVectors, least significant digit first.
# Inputs are never modified except by the in-place helpers named as such
# (normalize, com, incr_u, decr_u), which callers apply to temporaries only.

import logging

from bigconfig import DIGIT_BITS, DIGIT_MASK, WANT_ASSERT
from digitvec import DigitVector

logger = logging.getLogger(__name__)

def ASSERT_NORMALIZED(d):
    if WANT_ASSERT:
        assert len(d) >= 1
        assert len(d) == 1 or d[-1] != 0

def from_int(value, *, xp=None):
    '''Digits of a non-negative Python int.'''
    if value < 0:
        raise ValueError(f'magnitude must be non-negative, got {value}')
    digits = []
    while True:
        digits.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
        if not value:
            break
    return DigitVector(digits, xp=xp)

def to_int(d):
    accum = 0
    for item in reversed(d.tolist()):
        accum <<= DIGIT_BITS
        accum += item
    return accum

def normalize(d):
    '''Strip most significant zero digits in place, keeping at least one digit.'''
    if len(d) == 0:
        d.append(0)
    while len(d) > 1 and d[-1] == 0:
        d.pop()
    return d

def is_zero(d):
    return len(d) == 1 and d[0] == 0

def cmp(a, b):
    '''Three-way magnitude comparison of normalized digit vectors.'''
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in range(len(a) - 1, -1, -1):
        x, y = a[i], b[i]
        if x != y:
            return 1 if x > y else -1
    return 0

def add(a, b):
    r = DigitVector(a)
    r.resize(max(len(a), len(b)) + 1)
    carry = 0
    i = 0
    # the carry can ripple past the end of b into the extra digit
    while i < len(b) or carry:
        cur = r[i] + carry
        if i < len(b):
            cur += b[i]
        r[i] = cur & DIGIT_MASK
        carry = cur >> DIGIT_BITS
        i += 1
    return normalize(r)

def add_1(a, n):
    return add(a, DigitVector([n], xp=a.xp))

def sub(a, b):
    '''a - b, requiring |a| >= |b|.'''
    if WANT_ASSERT:
        assert cmp(a, b) >= 0
    r = DigitVector(a)
    borrow = 0
    for i in range(len(r)):
        diff = r[i] - borrow
        if i < len(b):
            diff -= b[i]
        borrow = 1 if diff < 0 else 0
        r[i] = diff & DIGIT_MASK
    if WANT_ASSERT:
        assert borrow == 0
    if len(r) > 1 and r[-1] == 0:
        r.pop()
    return normalize(r)

def mul(a, b):
    r = DigitVector(xp=a.xp)
    r.resize(len(a) + len(b))
    for i in range(len(a)):
        x = a[i]
        if not x:
            continue
        carry = 0
        for j in range(len(b)):
            cur = r[i + j] + x * b[j] + carry
            r[i + j] = cur & DIGIT_MASK
            carry = cur >> DIGIT_BITS
        # several partial products can pile carries onto the same position
        k = i + len(b)
        while carry:
            cur = r[k] + carry
            r[k] = cur & DIGIT_MASK
            carry = cur >> DIGIT_BITS
            k += 1
    return normalize(r)

def mul_1(a, n):
    r = DigitVector(xp=a.xp)
    r.resize(len(a) + 1)
    carry = 0
    for i in range(len(a)):
        cur = a[i] * n + carry
        r[i] = cur & DIGIT_MASK
        carry = cur >> DIGIT_BITS
    r[len(a)] = carry
    return normalize(r)

def divrem_1(a, n):
    '''Short division by a single nonzero digit: (quotient, remainder digit).'''
    if WANT_ASSERT:
        assert 0 < n <= DIGIT_MASK
    q = DigitVector(xp=a.xp)
    q.resize(len(a))
    rem = 0
    for i in range(len(a) - 1, -1, -1):
        rem = (rem << DIGIT_BITS) | a[i]
        q[i] = rem // n
        rem -= q[i] * n
    return normalize(q), rem

def widen(*digits):
    '''Splice digits, most significant first, into one wide integer.'''
    accum = 0
    for item in digits:
        accum = (accum << DIGIT_BITS) | item
    return accum

def _window_cmp(rem, offset, width, prod):
    for k in range(width - 1, -1, -1):
        x = rem[offset + k]
        y = prod[k] if k < len(prod) else 0
        if x != y:
            return 1 if x > y else -1
    return 0

def _window_sub(rem, offset, width, prod):
    borrow = 0
    for k in range(width):
        diff = rem[offset + k] - borrow
        if k < len(prod):
            diff -= prod[k]
        borrow = 1 if diff < 0 else 0
        rem[offset + k] = diff & DIGIT_MASK
    if WANT_ASSERT:
        assert borrow == 0

def divrem(a, b):
    '''Long division of magnitudes, b having at least two digits and a >= b.

    Each quotient digit is estimated from the top three digits of the
    remainder window over the top two digits of the divisor. That estimate is
    never too small, so it is only ever corrected downward.
    '''
    ASSERT_NORMALIZED(a)
    ASSERT_NORMALIZED(b)
    n, m = len(a), len(b)
    if WANT_ASSERT:
        assert m >= 2 and n >= m
    rem = DigitVector(a)
    rem.append(0)
    q = DigitVector(xp=a.xp)
    q.resize(n - m + 1)
    denominator = widen(b[m - 1], b[m - 2])
    corrections = 0
    for j in range(n - m, -1, -1):
        # rem < b * BASE**(j+1) here, so the window rem[j:j+m+1] holds all of it above j
        numerator = widen(rem[j + m], rem[j + m - 1], rem[j + m - 2])
        ratio = min(numerator // denominator, DIGIT_MASK)
        prod = mul_1(b, ratio)
        while _window_cmp(rem, j, m + 1, prod) < 0:
            ratio -= 1
            prod = sub(prod, b)
            corrections += 1
        _window_sub(rem, j, m + 1, prod)
        q[j] = ratio
    if corrections:
        logger.debug('long division %d/%d digits: %d estimate corrections', n, m, corrections)
    return normalize(q), normalize(rem)

def com(d):
    '''Complement every digit in place.'''
    if len(d):
        d.storage[:len(d)] = d.data ^ DIGIT_MASK
    return d

def incr_u(d, incr=1):
    '''Add a single digit in place, growing on carry out.'''
    carry = incr
    i = 0
    while carry:
        if i == len(d):
            d.append(0)
        cur = d[i] + carry
        d[i] = cur & DIGIT_MASK
        carry = cur >> DIGIT_BITS
        i += 1
    return d

def decr_u(d, decr=1):
    '''Subtract a single digit in place; the magnitude must be at least decr.'''
    borrow = decr
    i = 0
    while borrow:
        if WANT_ASSERT:
            assert i < len(d), 'decrement below zero'
        diff = d[i] - borrow
        borrow = 1 if diff < 0 else 0
        d[i] = diff & DIGIT_MASK
        i += 1
    return d
