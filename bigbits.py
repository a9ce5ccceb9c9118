# Bitwise logic and shifts on sign + magnitude pairs.
#
# Bitwise ops extend both operands to two's complement over a common width
# one digit wider than the larger operand, so the top digit is pure sign.
# The combinator is any function that works on both bools and digit arrays:
# operator.and_, operator.or_ and operator.xor are the ones used.

import operator

import bigmpn
from bigconfig import DIGIT_BITS, DIGIT_MASK
from digitvec import DigitVector

def to_twos_complement(sign, digits, width, *, xp=None):
    '''Encode a sign + magnitude pair as width digits of two's complement.'''
    t = DigitVector(digits, xp=xp)
    if sign:
        t.resize(width)
    else:
        # -m encodes as ~(m - 1): add one to the value, then complement
        bigmpn.decr_u(t)
        t.resize(width)
        bigmpn.com(t)
    return t

def combine(a_sign, a_digits, b_sign, b_digits, op):
    xp = a_digits.xp
    width = max(len(a_digits), len(b_digits)) + 1
    ta = to_twos_complement(a_sign, a_digits, width, xp=xp)
    tb = to_twos_complement(b_sign, b_digits, width, xp=xp)

    negative = bool(op(not a_sign, not b_sign))
    result = DigitVector(op(ta.data, tb.data), xp=xp)
    if negative:
        # decode: the magnitude of a negative encoding t is ~t + 1
        bigmpn.com(result)
        bigmpn.incr_u(result)
    return not negative, bigmpn.normalize(result)

def and_(a_sign, a_digits, b_sign, b_digits):
    return combine(a_sign, a_digits, b_sign, b_digits, operator.and_)
def or_(a_sign, a_digits, b_sign, b_digits):
    return combine(a_sign, a_digits, b_sign, b_digits, operator.or_)
def xor(a_sign, a_digits, b_sign, b_digits):
    return combine(a_sign, a_digits, b_sign, b_digits, operator.xor)

def splice_count(shift):
    '''Bits of each output digit taken from the lower source digit's top end.'''
    return (DIGIT_BITS - shift % DIGIT_BITS) % DIGIT_BITS

def _source_digit(src, block):
    if 0 <= block < len(src):
        return src[block]
    return 0

def low_window(src, i, shift):
    '''Low bits of output digit i: the upper part of the source digit the
    output digit's first bit falls in.'''
    start_bit = i * DIGIT_BITS - shift
    return _source_digit(src, start_bit // DIGIT_BITS) >> splice_count(shift)

def high_window(src, i, shift):
    '''High bits of output digit i: the lower part of the next source digit.'''
    cnt = splice_count(shift)
    if not cnt:
        return 0
    end_bit = (i + 1) * DIGIT_BITS - 1 - shift
    block = _source_digit(src, end_bit // DIGIT_BITS)
    return ((block & ((1 << cnt) - 1)) << (DIGIT_BITS - cnt)) & DIGIT_MASK

def _any_bits_below(digits, nbits):
    whole, part = divmod(nbits, DIGIT_BITS)
    for i in range(min(whole, len(digits))):
        if digits[i]:
            return True
    if part and whole < len(digits):
        return bool(digits[whole] & ((1 << part) - 1))
    return False

def shift(sign, digits, distance):
    '''Shift left by distance bits, or right by -distance bits.

    Right shifts floor toward negative infinity: a negative value whose
    shifted-out bits are not all zero ends up one further from zero.
    '''
    xp = digits.xp
    width = len(digits)
    if distance > 0:
        width += distance // DIGIT_BITS + 1
    src = to_twos_complement(True, digits, len(digits), xp=xp)
    shifted = DigitVector(xp=xp)
    shifted.resize(width)
    for i in range(width):
        shifted[i] = high_window(src, i, distance) + low_window(src, i, distance)
    bigmpn.normalize(shifted)
    if distance < 0 and not sign and _any_bits_below(digits, -distance):
        bigmpn.incr_u(shifted)
    if bigmpn.is_zero(shifted):
        sign = True
    return sign, shifted
