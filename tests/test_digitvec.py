import numpy as np
import pytest

from bigconfig import DIGIT_MASK
from digitvec import DigitVector, ceil_exp_2


class TestCeilExp2:
    def test_powers(self):
        assert [ceil_exp_2(n) for n in [0, 1, 2, 3, 4, 5, 8, 9]] == [1, 1, 2, 4, 4, 8, 8, 16]


class TestConstruction:
    """Vectors come from lists, arrays or other vectors"""

    def test_from_list(self, xp):
        digits = DigitVector([1, 2, 3], xp=xp)
        assert len(digits) == 3
        assert digits.tolist() == [1, 2, 3]
        assert digits.xp is xp

    def test_from_array_takes_its_namespace(self, xp):
        digits = DigitVector(xp.asarray([4, 5, 6]))
        assert digits.xp is xp
        assert digits == [4, 5, 6]

    def test_empty(self, xp):
        digits = DigitVector(xp=xp)
        assert len(digits) == 0
        assert digits.tolist() == []

    def test_copy_is_independent(self, xp):
        a = DigitVector([1, 2], xp=xp)
        b = DigitVector(a)
        b[0] = 9
        assert a == [1, 2]
        assert b == [9, 2]

    def test_copy_across_namespaces(self, xp):
        a = DigitVector([7, DIGIT_MASK], xp=np)
        b = DigitVector(a, xp=xp)
        assert b.xp is xp
        assert b == [7, DIGIT_MASK]

    def test_rejects_float_arrays(self):
        with pytest.raises(TypeError):
            DigitVector(np.asarray([1.5]))

    def test_rejects_out_of_range_digits(self, xp):
        with pytest.raises(OverflowError):
            DigitVector([DIGIT_MASK + 1], xp=xp)
        with pytest.raises(OverflowError):
            DigitVector([-1], xp=xp)


class TestAccess:
    def test_negative_index(self, xp):
        digits = DigitVector([1, 2, 3], xp=xp)
        assert digits[-1] == 3
        digits[-1] = 8
        assert digits == [1, 2, 8]

    def test_index_out_of_range(self, xp):
        digits = DigitVector([1], xp=xp)
        with pytest.raises(IndexError):
            digits[1]
        with pytest.raises(IndexError):
            digits[-2] = 0

    def test_items_are_python_ints(self, xp):
        digits = DigitVector([DIGIT_MASK], xp=xp)
        assert type(digits[0]) is int
        assert all(type(item) is int for item in digits)

    def test_write_rejects_overflow(self, xp):
        digits = DigitVector([0], xp=xp)
        with pytest.raises(OverflowError):
            digits[0] = DIGIT_MASK + 1
        assert digits == [0]


class TestGrowth:
    def test_append_doubles_capacity(self, xp):
        digits = DigitVector(xp=xp)
        capacities = set()
        for value in range(33):
            digits.append(value)
            capacities.add(digits.capacity)
        assert digits.tolist() == list(range(33))
        assert capacities == {1, 2, 4, 8, 16, 32, 64}

    def test_resize_fills(self, xp):
        digits = DigitVector([1], xp=xp)
        digits.resize(4, fill=7)
        assert digits == [1, 7, 7, 7]
        digits.resize(2)
        assert digits == [1, 7]
        digits.resize(3)
        assert digits == [1, 7, 0]

    def test_reserve_keeps_contents(self, xp):
        digits = DigitVector([5, 6], xp=xp)
        digits.reserve(100)
        assert digits.capacity == 128
        assert digits == [5, 6]

    def test_failed_resize_leaves_vector_alone(self, xp):
        digits = DigitVector([1, 2], xp=xp)
        with pytest.raises(OverflowError):
            digits.resize(10, fill=-1)
        assert digits == [1, 2]
        assert digits.capacity == 2


class TestInsertErase:
    def test_insert_middle(self, xp):
        digits = DigitVector([1, 2, 3], xp=xp)
        digits.insert(1, 9)
        assert digits == [1, 9, 2, 3]

    def test_insert_ends(self, xp):
        digits = DigitVector([1], xp=xp)
        digits.insert(0, 0)
        digits.insert(len(digits), 2)
        assert digits == [0, 1, 2]

    def test_erase(self, xp):
        digits = DigitVector([1, 2, 3, 4], xp=xp)
        assert digits.erase(1) == 2
        assert digits == [1, 3, 4]
        assert digits.erase(-1) == 4
        assert digits == [1, 3]

    def test_pop(self, xp):
        digits = DigitVector([1, 2], xp=xp)
        assert digits.pop() == 2
        assert digits == [1]
        digits.append(5)
        assert digits == [1, 5]

    def test_pop_empty(self, xp):
        with pytest.raises(IndexError):
            DigitVector(xp=xp).pop()


class TestSwap:
    def test_swap_exchanges_everything(self, xp):
        a = DigitVector([1, 2, 3], xp=xp)
        b = DigitVector([9], xp=np)
        a.swap(b)
        assert a == [9] and a.xp is np
        assert b == [1, 2, 3] and b.xp is xp
        assert a.capacity == 1 and b.capacity == 4
