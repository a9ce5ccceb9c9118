# NOTE: digits are what the mp literature calls LIMBS. Same thing, fixed at 32 bits here.

import importlib
import logging
import os

logger = logging.getLogger(__name__)

DIGIT_BITS = 32
DIGIT_BASE = 1 << DIGIT_BITS
DIGIT_MASK = DIGIT_BASE - 1

DECIMAL_CHUNK_DIGITS = 9
DECIMAL_CHUNK_BASE = 10 ** DECIMAL_CHUNK_DIGITS

def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off', '')

WANT_ASSERT = _env_flag('BIGDIGIT_WANT_ASSERT', True)

ARRAY_NAMESPACE_ENV = 'BIGDIGIT_ARRAY_NAMESPACE'
_xp = None

def _import_namespace(name):
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        raise ImportError(f'{ARRAY_NAMESPACE_ENV}: can not import array namespace {name!r}') from exc

def array_namespace():
    '''The array namespace new digit storage is allocated in when none is given.'''
    global _xp
    if _xp is None:
        name = os.getenv(ARRAY_NAMESPACE_ENV, 'numpy')
        _xp = _import_namespace(name)
        logger.debug('array namespace %s selected from environment', _xp.__name__)
    return _xp

def set_array_namespace(xp):
    global _xp
    if isinstance(xp, str):
        xp = _import_namespace(xp)
    _xp = xp
    logger.debug('array namespace set to %s', getattr(xp, '__name__', xp))
    return xp
