import math
import unittest

from CurveFormula import Power
from CurveFormula.Errors import Overflow
from CurveFormula.AutoGenerate.common.constants import NUM_OF_TAYLOR_COEFS, MIN_PRECISION, LN2_SHIFT
from CurveFormula.AutoGenerate.common.functions import getTaylorCoefs, checkedExp, getMaxExp, binarySearch, ln2Scaled


class TestAutoGenerate(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.coefficients = getTaylorCoefs(NUM_OF_TAYLOR_COEFS)

    def testTaylorCoefficients(self):
        self.assertEqual(self.coefficients[0], Power.EXP_FACTORIAL)
        self.assertEqual(tuple(self.coefficients[1:]), Power.EXP_COEFFICIENTS)

    def testCheckedExpMatchesEngine(self):
        for x in [0, 1, Power.FIXED_ONE, 7 * Power.FIXED_ONE // 3, Power.MAX_FIXED_EXP_32]:
            self.assertEqual(checkedExp(x, MIN_PRECISION, self.coefficients), Power.fixedExpUnsafe(x))

    def testCheckedExpOverflow(self):
        with self.assertRaises(Overflow):
            checkedExp(Power.MAX_FIXED_EXP_32 + 1, MIN_PRECISION, self.coefficients)

    def testMaxExp(self):
        self.assertEqual(getMaxExp(MIN_PRECISION, self.coefficients), Power.MAX_FIXED_EXP_32)

    def testMaxExpGrowsWithPrecision(self):
        self.assertLess(getMaxExp(MIN_PRECISION, self.coefficients), getMaxExp(MIN_PRECISION + 1, self.coefficients))

    def testBinarySearch(self):
        def below(x, limit):
            if x > limit:
                raise Overflow(x)
        self.assertEqual(binarySearch(below, {'limit': 12345}), 12345)
        self.assertEqual(binarySearch(below, {'limit': (1 << 256) - 1}), (1 << 256) - 1)
        self.assertEqual(binarySearch(below, {'limit': 0}), 0)

    def testLn2ScalingFactor(self):
        # the engine keeps the double-precision ln(2), one unit below the exact floor
        self.assertEqual(int(math.log(2) * 2 ** LN2_SHIFT), Power.LN2_SCALED)
        self.assertEqual(ln2Scaled(LN2_SHIFT), Power.LN2_SCALED + 1)
        self.assertEqual(Power.LN2_SHIFT, LN2_SHIFT)


if __name__ == '__main__':
    unittest.main()
