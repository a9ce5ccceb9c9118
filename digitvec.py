import logging

import bigconfig
from bigconfig import DIGIT_MASK

logger = logging.getLogger(__name__)

def ceil_exp_2(n):
    return 1 << (max(int(n), 1) - 1).bit_length()

class DigitVector:
    '''Growable contiguous run of uint32 digits held in an array-api array.

    Storage is over-allocated to a power of two so append is amortized O(1).
    Anything that reallocates builds the new storage fully before it is
    installed, and swap only exchanges references.
    '''
    def __init__(self, data=(), *, xp=None):
        if type(data) is DigitVector:
            if xp is None:
                xp = data.xp
            if xp is data.xp:
                values = data.storage[:data.size] if data.size else None
            else:
                values = xp.asarray(data.tolist(), dtype=xp.uint32) if data.size else None
            size = data.size
        elif hasattr(data, '__array_namespace__'):
            if xp is None:
                xp = data.__array_namespace__()
            if not xp.isdtype(data.dtype, 'integral'):
                raise TypeError(data.dtype)
            if len(data.shape) != 1:
                raise ValueError(f'digits must be one-dimensional, got shape {data.shape}')
            size = data.shape[0]
            values = xp.astype(data, xp.uint32) if size else None
        else:
            if xp is None:
                xp = bigconfig.array_namespace()
            data = list(data)
            for value in data:
                self._check_digit(value)
            size = len(data)
            values = xp.asarray(data, dtype=xp.uint32) if size else None
        self.xp = xp
        self.capacity = ceil_exp_2(size)
        self.storage = xp.zeros(self.capacity, dtype=xp.uint32)
        if values is not None:
            self.storage[:size] = values
        self.size = size

    @staticmethod
    def _check_digit(value):
        if not 0 <= value <= DIGIT_MASK:
            raise OverflowError(f'digit out of range: {value}')

    def _index(self, idx):
        if idx < 0:
            idx += self.size
        if not 0 <= idx < self.size:
            raise IndexError(f'digit index {idx} out of range for {self.size} digits')
        return idx

    def __len__(self):
        return self.size
    def __getitem__(self, idx):
        return int(self.storage[self._index(idx)])
    def __setitem__(self, idx, value):
        self._check_digit(value)
        self.storage[self._index(idx)] = value
    def __iter__(self):
        for idx in range(self.size):
            yield int(self.storage[idx])
    def __eq__(self, other):
        if type(other) is DigitVector:
            other = other.tolist()
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return self.tolist() == list(other)
    def __repr__(self):
        return 'DigitVector(' + repr(self.tolist()) + ')'
    def __str__(self):
        return str(self.tolist())

    @property
    def data(self):
        return self.storage[:self.size]

    def tolist(self):
        return [int(item) for item in self.xp.unstack(self.data)] if self.size else []

    def copy(self):
        return DigitVector(self)

    def _reserve(self, size):
        if size > self.capacity:
            capacity = ceil_exp_2(size)
            storage = self.xp.zeros(capacity, dtype=self.xp.uint32)
            if self.size:
                storage[:self.size] = self.storage[:self.size]
            logger.debug('digit storage grows %d -> %d', self.capacity, capacity)
            return [storage, capacity]
        else:
            return [self.storage, self.capacity]

    def reserve(self, size):
        self.storage, self.capacity = self._reserve(size)

    def resize(self, size, fill=0):
        self._check_digit(fill)
        storage, capacity = self._reserve(size)
        if size > self.size:
            storage[self.size:size] = fill
        self.storage = storage
        self.capacity = capacity
        self.size = size

    def append(self, value):
        self._check_digit(value)
        storage, capacity = self._reserve(self.size + 1)
        storage[self.size] = value
        self.storage = storage
        self.capacity = capacity
        self.size += 1

    def pop(self):
        value = self[-1]
        self.size -= 1
        self.storage[self.size] = 0
        return value

    def insert(self, idx, value):
        # O(n): slides the tail up one slot
        self._check_digit(value)
        if idx < 0:
            idx += self.size
        idx = min(max(idx, 0), self.size)
        storage, capacity = self._reserve(self.size + 1)
        if idx < self.size:
            tail = self.xp.asarray(self.storage[idx:self.size], copy=True)
            storage[idx + 1:self.size + 1] = tail
        storage[idx] = value
        self.storage = storage
        self.capacity = capacity
        self.size += 1

    def erase(self, idx):
        idx = self._index(idx)
        value = int(self.storage[idx])
        if idx + 1 < self.size:
            tail = self.xp.asarray(self.storage[idx + 1:self.size], copy=True)
            self.storage[idx:self.size - 1] = tail
        self.size -= 1
        self.storage[self.size] = 0
        return value

    def swap(self, other):
        self.xp, other.xp = other.xp, self.xp
        self.storage, other.storage = other.storage, self.storage
        self.capacity, other.capacity = other.capacity, self.capacity
        self.size, other.size = other.size, self.size

if __name__ == '__main__':
    import array_api_strict as xp

    digits = DigitVector(xp.asarray([1,2,3]))
    assert digits == [1,2,3]
    digits.insert(2, 4)
    assert digits == [1,2,4,3]
    for value in range(5, 40):
        digits.append(value)
    assert digits.capacity == 64
    assert digits[-1] == 39
    assert digits.erase(0) == 1
    digits.resize(2)
    assert digits == [2,4]
    other = DigitVector([DIGIT_MASK], xp=xp)
    digits.swap(other)
    assert digits == [DIGIT_MASK] and other == [2,4]
