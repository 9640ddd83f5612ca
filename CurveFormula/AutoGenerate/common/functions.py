from math import factorial
from decimal import Decimal
from decimal import localcontext
from decimal import ROUND_FLOOR

from ...Errors import FormulaError
from ...SafeMath import safeAdd
from ...SafeMath import safeMul


def getTaylorCoefs(numOfCoefs):
    '''
        Returns n! / k! for k = 0 to n-1, where n = numOfCoefs.
        The first item is the common denominator, the rest are the degree coefficients.
    '''
    maxFactorial = factorial(numOfCoefs)
    return [maxFactorial // factorial(i) for i in range(numOfCoefs)]


def checkedExp(x, precision, coefficients):
    '''
        The series of 'fixedExpUnsafe' evaluated with checked 256-bit arithmetic.
        Raises Overflow for any input which would not fit in the register.
    '''
    xi = x
    res = safeMul(coefficients[0], 1 << precision)
    res = safeAdd(res, safeMul(xi, coefficients[1]))
    for coefficient in coefficients[2:]:
        xi = safeMul(xi, x) >> precision
        res = safeAdd(res, safeMul(xi, coefficient))
    return res // coefficients[0]


def binarySearch(func, args):
    '''
        Returns the largest input in [0, 2 ^ 256) for which func does not fail.
    '''
    lo = 0
    hi = (1 << 256) - 1
    while lo + 1 < hi:
        mid = (lo + hi) // 2
        try:
            func(mid, **args)
            lo = mid
        except FormulaError:
            hi = mid
    try:
        func(hi, **args)
        return hi
    except FormulaError:
        func(lo, **args)
        return lo


def getMaxExp(precision, coefficients):
    return binarySearch(checkedExp, {'precision': precision, 'coefficients': coefficients})


def getMaxExpArray(coefficients, minPrecision, maxPrecision):
    return [getMaxExp(precision, coefficients) for precision in range(minPrecision, maxPrecision + 1)]


def ln2Scaled(shift):
    '''
        Returns floor(ln(2) * 2 ^ shift), computed with 100 significant digits.
    '''
    with localcontext() as ctx:
        ctx.prec = 100
        return int((Decimal(2).ln() * 2 ** shift).to_integral_exact(rounding=ROUND_FLOOR))
