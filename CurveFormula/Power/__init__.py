import logging

from ..Errors import RangeViolation
from ..SafeMath import safeMul


log = logging.getLogger(__name__)


PRECISION = 32                     # fractional bits
FIXED_ONE = 1 << PRECISION         # 0x100000000
FIXED_TWO = 2 << PRECISION         # 0x200000000
MAX_VAL = 1 << (256 - PRECISION)   # operands must stay below this to be upshifted by PRECISION


'''
    0xb17217f7d1cf78 = ln(2) * (1 << 56), rounded down.
    Since the output of `fixedLog2` is at most 0xdfffffffff (40 bits),
    the product with this 56-bit constant comfortably fits in 256 bits.
'''
LN2_SCALED = 0xb17217f7d1cf78
LN2_SHIFT = 56


MAX_FIXED_EXP_32 = 0x386bfdba29


'''
    The coefficients of the Maclaurin series of e ^ x, all multiplied by 34!
    so that every term is an exact integer: EXP_COEFFICIENTS[k - 1] = 34! / k!
    for k = 1 to 33. The degree-0 term is 34! itself, which is also the final divisor.
    Run `python -m CurveFormula.AutoGenerate.PrintExpCoefficients` to regenerate them.
'''
EXP_FACTORIAL = 0xde1bc4d19efcac82445da75b00000000  # 34!
EXP_COEFFICIENTS = (
    0xde1bc4d19efcac82445da75b00000000,
    0x6f0de268cf7e5641222ed3ad80000000,
    0x2504a0cd9a7f7215b60f9be480000000,
    0x9412833669fdc856d83e6f920000000,
    0x1d9d4d714865f4de2b3fafea0000000,
    0x4ef8ce836bba8cfb1dff2a70000000,
    0xb481d807d1aa66d04490610000000,
    0x16903b00fa354cda08920c2000000,
    0x281cdaac677b334ab9e732000000,
    0x402e2aad725eb8778fd85000000,
    0x5d5a6c9f31fe2396a2af000000,
    0x7c7890d442a82f73839400000,
    0x9931ed54034526b58e400000,
    0xaf147cf24ce150cf7e00000,
    0xbac08546b867cdaa200000,
    0xbac08546b867cdaa20000,
    0xafc441338061b2820000,
    0x9c3cabbc0056d790000,
    0x839168328705c30000,
    0x694120286c049c000,
    0x50319e98b3d2c000,
    0x3a52a1e36b82000,
    0x289286e0fce000,
    0x1b0c59eb53400,
    0x114f95b55400,
    0xaa7210d200,
    0x650139600,
    0x39b78e80,
    0x1fd8080,
    0x10fbc0,
    0x8c40,
    0x462,
    0x22,
)


def power(_baseN, _baseD, _expN, _expD):
    '''
        @dev Calculate (_baseN / _baseD) ^ (_expN / _expD)
        Returns result upshifted by PRECISION

        This method is overflow-safe
    '''
    logbase = ln(_baseN, _baseD)
    # Not using a checked division here, since it would protect against
    # precision loss, which is unavoidable in this approximation.
    # Both `ln` and `fixedExp` are overflow-safe.
    resN = fixedExp(safeMul(logbase, _expN) // _expD)
    if log.isEnabledFor(logging.DEBUG):
        log.debug('<- power(%d/%d, %d/%d) = 0x%x', _baseN, _baseD, _expN, _expD, resN)
    return resN


def ln(_numerator, _denominator):
    '''
        input range:
            - numerator:   [1, MAX_VAL - 1]
            - denominator: [1, numerator]
        output range:
            [0, 0x9b43d4f8d6]

        This method raises RangeViolation outside of bounds
    '''
    # denominator > numerator: less than one yields negative values. Unsupported
    if _denominator > _numerator:
        raise RangeViolation('ln({}/{}) would be negative'.format(_numerator, _denominator))

    # log(1) is the lowest we can go
    if _numerator == 0 or _denominator == 0:
        raise RangeViolation('ln({}/{}) has a zero operand'.format(_numerator, _denominator))

    # Upper bits are scaled off by precision
    if _numerator >= MAX_VAL or _denominator >= MAX_VAL:
        raise RangeViolation('ln({}/{}) operand does not fit below 2^224'.format(_numerator, _denominator))

    if log.isEnabledFor(logging.DEBUG):
        log.debug('-> ln(numerator = 0x%x, denominator = 0x%x)', _numerator, _denominator)

    return fixedLoge((_numerator << PRECISION) // _denominator)


def fixedLoge(_x):
    '''
        input range:
            [FIXED_ONE, MAX_UINT256]
        output range:
            [0, 0x9b43d4f8d6]
    '''
    # Cannot represent negative numbers (below 1)
    if _x < FIXED_ONE:
        raise RangeViolation('fixedLoge(0x{:x}) is below 1'.format(_x))

    log2 = fixedLog2(_x)
    return (log2 * LN2_SCALED) >> LN2_SHIFT


def fixedLog2(_x):
    '''
        Returns log2(x >> 32) << 32 [1]
        So x is assumed to be already upshifted 32 bits, and
        the result is also upshifted 32 bits.

        [1] The method returns a number which is lower than the
        actual value

        input-range :
            [FIXED_ONE, MAX_UINT256]
        output-range:
            [0, 0xdfffffffff]
    '''
    # Numbers below 1 are negative.
    if _x < FIXED_ONE:
        raise RangeViolation('fixedLog2(0x{:x}) is below 1'.format(_x))

    hi = 0
    while _x >= FIXED_TWO:
        _x >>= 1
        hi += FIXED_ONE

    for i in range(PRECISION):
        _x = (_x * _x) // FIXED_ONE
        if _x >= FIXED_TWO:
            _x >>= 1
            hi += 1 << (PRECISION - 1 - i)

    return hi


def fixedExp(_x):
    '''
        fixedExp is a 'protected' version of `fixedExpUnsafe`, which raises instead of overflowing.
        With 32 bits of precision, the largest input whose intermediate
        values all fit in 256 bits is MAX_FIXED_EXP_32.
    '''
    if _x > MAX_FIXED_EXP_32:
        raise RangeViolation('fixedExp(0x{:x}) exceeds 0x{:x}'.format(_x, MAX_FIXED_EXP_32))
    return fixedExpUnsafe(_x)


def fixedExpUnsafe(_x):
    '''
        Calculates e ^ x according to maclaurin summation:

        e^x = 1 + x + x ^ 2 / 2!...+ x ^ n / n!

        and returns e ^ (x >> 32) << 32, that is, upshifted for accuracy

        Input range:
            - ok at    <= 242329958953
            - fails at >= 242329958954 (a 256-bit register overflows)

        This method is visible for testcases, but not meant for direct use.
    '''
    xi = _x
    res = EXP_FACTORIAL << PRECISION

    res += xi * EXP_COEFFICIENTS[0]
    for coefficient in EXP_COEFFICIENTS[1:]:
        xi = (xi * _x) >> PRECISION
        res += xi * coefficient

    return res // EXP_FACTORIAL
