# representation:
#  sign + magnitude. _sign is True for non-negative values, _digits is a
#  DigitVector of uint32 digits, least significant first.
#  normalized: at least one digit, no most significant zero digit unless the
#  value is zero, and zero is always non-negative.
#  compound assignment computes into a fresh BigInteger and then swaps its
#  digits in, so a failed operation leaves the receiver as it was.

import logging

import bigbits
import bigmpn
import bigstr
from bigconfig import WANT_ASSERT
from bigstr import FormatError
from digitvec import DigitVector

logger = logging.getLogger(__name__)

class DivisionByZeroError(ZeroDivisionError):
    pass

class BigInteger:
    def __init__(self, value=0, *, xp=None):
        if type(value) is BigInteger:
            self._sign = value._sign
            self._digits = DigitVector(value._digits, xp=xp)
        elif isinstance(value, str):
            self._sign, self._digits = bigstr.parse_decimal(value, xp=xp)
        elif isinstance(value, int):
            self._sign = value >= 0
            self._digits = bigmpn.from_int(abs(value), xp=xp)
        else:
            raise TypeError(f'can not create big integer from {type(value).__name__}')
        self._normalize()

    @classmethod
    def _make(cls, sign, digits):
        result = cls.__new__(cls)
        result._sign = sign
        result._digits = digits
        result._normalize()
        return result

    def _normalize(self):
        bigmpn.normalize(self._digits)
        if bigmpn.is_zero(self._digits):
            self._sign = True

    def _swap(self, other):
        # commit point of every compound assignment: no allocation past here
        self._digits.swap(other._digits)
        self._sign, other._sign = other._sign, self._sign
        return self

    @property
    def xp(self):
        return self._digits.xp
    @property
    def sign(self):
        return self._sign
    @property
    def digits(self):
        return tuple(self._digits.tolist())

    def positive(self):
        return self._sign
    def is_zero(self):
        return bigmpn.is_zero(self._digits)

    def copy(self):
        return BigInteger(self)
    __copy__ = copy
    def __deepcopy__(self, memo):
        return BigInteger(self)

    def __int__(self):
        magnitude = bigmpn.to_int(self._digits)
        return magnitude if self._sign else -magnitude
    def __bool__(self):
        return not self.is_zero()
    def __hash__(self):
        return hash(int(self))
    def __str__(self):
        return bigstr.format_decimal(self._sign, self._digits)
    def __repr__(self):
        return 'BigInteger(' + repr(str(self)) + ')'

    def __pos__(self):
        return BigInteger(self)
    def __neg__(self):
        return BigInteger._make(not self._sign, DigitVector(self._digits))
    def __abs__(self):
        return BigInteger._make(True, DigitVector(self._digits))
    def __invert__(self):
        return _sub(-self, BigInteger(1, xp=self.xp))

    def increment(self):
        return self._swap(_add(self, BigInteger(1, xp=self.xp)))
    def decrement(self):
        return self._swap(_sub(self, BigInteger(1, xp=self.xp)))

    def __divmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _divmod(self, other)
    def __rdivmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return _divmod(other, self)

def _coerce(value):
    if type(value) is BigInteger:
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return NotImplemented

def compare(a, b):
    '''Three-way comparison: -1, 0 or +1.'''
    a, b = _coerce(a), _coerce(b)
    if a is NotImplemented or b is NotImplemented:
        raise TypeError('compare() needs BigInteger or int operands')
    if len(a._digits) > len(b._digits):
        return 1 if a._sign else -1
    if len(a._digits) < len(b._digits):
        return -1 if b._sign else 1
    if a._sign != b._sign:
        return 1 if a._sign else -1
    magnitude = bigmpn.cmp(a._digits, b._digits)
    return magnitude if a._sign else -magnitude

def _add(a, b):
    if b.is_zero():
        return BigInteger(a)
    if a._sign != b._sign:
        return _sub(a, -b)
    return BigInteger._make(a._sign, bigmpn.add(a._digits, b._digits))

def _sub(a, b):
    if b.is_zero():
        return BigInteger(a)
    if a._sign != b._sign:
        return _add(a, -b)
    if bigmpn.cmp(a._digits, b._digits) < 0:
        return -_sub(b, a)
    return BigInteger._make(a._sign, bigmpn.sub(a._digits, b._digits))

def _mul(a, b):
    return BigInteger._make(a._sign == b._sign, bigmpn.mul(a._digits, b._digits))

def _divmod(a, b):
    '''Truncating division: the quotient rounds toward zero and the
    remainder takes the sign of the dividend.'''
    if b.is_zero():
        raise DivisionByZeroError('division by zero')
    if bigmpn.cmp(a._digits, b._digits) < 0:
        return BigInteger(xp=a.xp), BigInteger(a)
    if len(b._digits) == 1:
        logger.debug('short division of %d digits by %d', len(a._digits), b._digits[0])
        q, r = bigmpn.divrem_1(a._digits, b._digits[0])
        r = bigmpn.from_int(r, xp=a.xp)
    else:
        logger.debug('long division of %d digits by %d digits', len(a._digits), len(b._digits))
        q, r = bigmpn.divrem(a._digits, b._digits)
    quotient = BigInteger._make(a._sign == b._sign, q)
    remainder = BigInteger._make(a._sign, r)
    if WANT_ASSERT:
        assert bigmpn.cmp(remainder._digits, b._digits) < 0
    return quotient, remainder

def _div(a, b):
    return _divmod(a, b)[0]

def _mod(a, b):
    return _divmod(a, b)[1]

def __bitwise(combinator):
    def fn(a, b):
        sign, digits = combinator(a._sign, a._digits, b._sign, b._digits)
        return BigInteger._make(sign, digits)
    return fn

def _shift(a, count, direction):
    if type(count) is BigInteger:
        count = int(count)
    if not isinstance(count, int):
        return NotImplemented
    if count < 0:
        raise ValueError('negative shift count')
    sign, digits = bigbits.shift(a._sign, a._digits, direction * count)
    return BigInteger._make(sign, digits)

def _lshift(a, count):
    return _shift(a, count, 1)

def _rshift(a, count):
    return _shift(a, count, -1)

def __BigIntegerOpBinary(fn):
    def op(a, b):
        b = _coerce(b)
        if b is NotImplemented:
            return NotImplemented
        return fn(a, b)
    return op
def __BigIntegerOpReflected(fn):
    def op(b, a):
        a = _coerce(a)
        if a is NotImplemented:
            return NotImplemented
        return fn(a, b)
    return op
def __BigIntegerOpInplace(fn):
    def op(a, b):
        b = _coerce(b)
        if b is NotImplemented:
            return NotImplemented
        return a._swap(fn(a, b))
    return op
def __BigIntegerOpShiftInplace(fn):
    def op(a, count):
        result = fn(a, count)
        if result is NotImplemented:
            return NotImplemented
        return a._swap(result)
    return op
def __BigIntegerOpCompare(test):
    def op(a, b):
        if _coerce(b) is NotImplemented:
            return NotImplemented
        return test(compare(a, b))
    return op

for opname, fn in [
        ['add', _add],
        ['sub', _sub],
        ['mul', _mul],
        ['truediv', _div],
        ['mod', _mod],
        ['and', __bitwise(bigbits.and_)],
        ['or', __bitwise(bigbits.or_)],
        ['xor', __bitwise(bigbits.xor)],
]:
    for prefix, factory in [
            ['', __BigIntegerOpBinary],
            ['r', __BigIntegerOpReflected],
            ['i', __BigIntegerOpInplace],
    ]:
        op = factory(fn)
        op.__name__ = f'__{prefix}{opname}__'
        setattr(BigInteger, op.__name__, op)

for opname, fn in [['lshift', _lshift], ['rshift', _rshift]]:
    setattr(BigInteger, f'__{opname}__', fn)
    for prefix, factory in [
            ['r', __BigIntegerOpReflected],
            ['i', __BigIntegerOpShiftInplace],
    ]:
        op = factory(fn)
        op.__name__ = f'__{prefix}{opname}__'
        setattr(BigInteger, op.__name__, op)

for opname, test in [
        ['eq', lambda c: c == 0],
        ['ne', lambda c: c != 0],
        ['lt', lambda c: c < 0],
        ['le', lambda c: c <= 0],
        ['gt', lambda c: c > 0],
        ['ge', lambda c: c >= 0],
]:
    op = __BigIntegerOpCompare(test)
    op.__name__ = f'__{opname}__'
    setattr(BigInteger, op.__name__, op)

def parse(text, *, xp=None):
    return BigInteger(text, xp=xp)

def to_string(a):
    return str(a)

__all__ = ['BigInteger', 'DivisionByZeroError', 'FormatError', 'compare', 'parse', 'to_string']

if __name__ == '__main__':
    import array_api_strict as xp

    a = parse('123456789012345678901234567890', xp=xp)
    assert str(a + 1) == '123456789012345678901234567891'
    assert str(parse('-5', xp=xp) % 3) == '-2'
    assert str(parse('1000000000000000000000', xp=xp) / parse('999999999999999999999', xp=xp)) == '1'
    zero = parse('0', xp=xp) - parse('0', xp=xp)
    assert str(zero) == '0' and zero.sign
    assert str(parse('7', xp=xp) << 2) == '28'
    assert str(parse('28', xp=xp) >> 2) == '7'
    assert str(1 << parse('3', xp=xp)) == '8'
    b = BigInteger(a)
    b *= b
    assert int(b) == int(a) ** 2 and int(a) == 123456789012345678901234567890
    for bad in ['', '12a']:
        try:
            parse(bad)
        except FormatError as exc:
            print(exc)
        else:
            raise AssertionError(bad)
