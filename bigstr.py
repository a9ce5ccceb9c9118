import bigmpn
from bigconfig import DECIMAL_CHUNK_BASE, DECIMAL_CHUNK_DIGITS
from digitvec import DigitVector

DECIMAL_DIGITS = '0123456789'

class FormatError(ValueError):
    '''Malformed decimal text.

    `char` is the offending character, or None when the text ran out
    where a digit was expected. `position` indexes into `text`.
    '''
    def __init__(self, message, text=None, position=None, char=None):
        super().__init__(message)
        self.text = text
        self.position = position
        self.char = char

def _digit_expected(text, position):
    if position < len(text):
        char = text[position]
        return FormatError(f'digit expected, {char!r} found', text, position, char)
    return FormatError('digit expected, end of string found', text, position)

def parse_decimal(text, *, xp=None):
    '''Parse `[+-]digit+` into a (sign, digits) pair, sign True for non-negative.

    Digits are absorbed up to nine at a time so each chunk costs one
    full-precision multiply and one add.
    '''
    if not text:
        raise FormatError('can not create big integer from empty string', text, 0)
    start = 1 if text[0] in '+-' else 0
    if start == len(text):
        raise _digit_expected(text, start)
    value = DigitVector([0], xp=xp)
    for i in range(start, len(text), DECIMAL_CHUNK_DIGITS):
        chunk = text[i:i + DECIMAL_CHUNK_DIGITS]
        for offset, char in enumerate(chunk):
            if char not in DECIMAL_DIGITS:
                raise _digit_expected(text, i + offset)
        value = bigmpn.mul_1(value, 10 ** len(chunk))
        value = bigmpn.add_1(value, int(chunk))
    sign = text[0] != '-' or bigmpn.is_zero(value)
    return sign, value

def format_decimal(sign, digits):
    groups = []
    magnitude = digits
    while True:
        magnitude, remainder = bigmpn.divrem_1(magnitude, DECIMAL_CHUNK_BASE)
        if bigmpn.is_zero(magnitude):
            groups.append(str(remainder))
            break
        groups.append(str(remainder).zfill(DECIMAL_CHUNK_DIGITS))
    text = ''.join(reversed(groups))
    if not sign and text != '0':
        text = '-' + text
    return text
