import unittest
from hypothesis import given
import hypothesis.strategies as st

from CurveFormula.Errors import Overflow, Underflow, RangeViolation
from CurveFormula.SafeMath import safeAdd, safeSub, safeMul, MAX_UINT256


uint256 = st.integers(min_value=0, max_value=MAX_UINT256)


class TestSafeMath(unittest.TestCase):
    def testAddBoundary(self):
        self.assertEqual(safeAdd(MAX_UINT256 - 1, 1), MAX_UINT256)
        with self.assertRaises(Overflow):
            safeAdd(MAX_UINT256, 1)

    def testSubBoundary(self):
        self.assertEqual(safeSub(1, 1), 0)
        with self.assertRaises(Underflow):
            safeSub(0, 1)

    def testMulBoundary(self):
        self.assertEqual(safeMul(1 << 128, (1 << 128) - 1), (1 << 256) - (1 << 128))
        with self.assertRaises(Overflow):
            safeMul(1 << 128, 1 << 128)

    def testOverflowIsRangeViolation(self):
        with self.assertRaises(RangeViolation):
            safeMul(MAX_UINT256, 2)

    @given(uint256, uint256)
    def testAdd(self, x, y):
        if x + y > MAX_UINT256:
            self.assertRaises(Overflow, safeAdd, x, y)
        else:
            self.assertEqual(safeAdd(x, y), x + y)

    @given(uint256, uint256)
    def testSub(self, x, y):
        if x < y:
            self.assertRaises(Underflow, safeSub, x, y)
        else:
            self.assertEqual(safeSub(x, y), x - y)


if __name__ == '__main__':
    unittest.main()
