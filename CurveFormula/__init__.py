import logging

from .Errors import FormulaError
from .Errors import InvalidArgument
from .Errors import RangeViolation
from .Errors import Overflow
from .Errors import Underflow
from .Power import power
from .Power import ln
from .Power import fixedExp
from .Power import PRECISION
from .Power import FIXED_ONE
from .Power import FIXED_TWO
from .Power import MAX_VAL
from .SafeMath import safeAdd
from .SafeMath import safeSub
from .SafeMath import safeMul
from .SafeMath import MAX_UINT256


log = logging.getLogger(__name__)


MAX_RESERVE_RATIO = 100


def calculatePurchaseReturn(_supply, _reserveBalance, _reserveRatio, _depositAmount):
    '''
        @dev given a token supply, reserve, CRR and a deposit amount (in the reserve token), calculates the return for a given change (in the main token)
        Formula:
        Return = _supply * ((1 + _depositAmount / _reserveBalance) ^ (_reserveRatio / 100) - 1)
        @param _supply             token total supply
        @param _reserveBalance     total reserve
        @param _reserveRatio       constant reserve ratio, 1-100
        @param _depositAmount      deposit amount, in reserve token
        @return purchase return amount
    '''
    # validate input
    _verifyUint256(_supply, _reserveBalance, _reserveRatio, _depositAmount)
    if _supply == 0 or _reserveBalance == 0 or not 0 < _reserveRatio <= MAX_RESERVE_RATIO:
        raise InvalidArgument('calculatePurchaseReturn({}, {}, {}, {})'.format(_supply, _reserveBalance, _reserveRatio, _depositAmount))

    # special case for 0 deposit amount
    if _depositAmount == 0:
        return 0

    baseN = safeAdd(_depositAmount, _reserveBalance)

    # special case if the CRR = 100
    if _reserveRatio == MAX_RESERVE_RATIO:
        temp = safeMul(_supply, baseN) // _reserveBalance
        return safeSub(temp, _supply)

    resN = power(baseN, _reserveBalance, _reserveRatio, MAX_RESERVE_RATIO)

    temp = safeMul(_supply, resN) // FIXED_ONE

    result = safeSub(temp, _supply)
    log.debug('<- calculatePurchaseReturn(%d, %d, %d, %d) = %d', _supply, _reserveBalance, _reserveRatio, _depositAmount, result)
    return result


def calculateSaleReturn(_supply, _reserveBalance, _reserveRatio, _sellAmount):
    '''
        @dev given a token supply, reserve, CRR and a sell amount (in the main token), calculates the return for a given change (in the reserve token)
        Formula:
        Return = _reserveBalance * (1 - (1 - _sellAmount / _supply) ^ (1 / (_reserveRatio / 100)))
        @param _supply             token total supply
        @param _reserveBalance     total reserve
        @param _reserveRatio       constant reserve ratio, 1-100
        @param _sellAmount         sell amount, in the token itself
        @return sale return amount
    '''
    # validate input
    _verifyUint256(_supply, _reserveBalance, _reserveRatio, _sellAmount)
    if _supply == 0 or _reserveBalance == 0 or not 0 < _reserveRatio <= MAX_RESERVE_RATIO or _sellAmount > _supply:
        raise InvalidArgument('calculateSaleReturn({}, {}, {}, {})'.format(_supply, _reserveBalance, _reserveRatio, _sellAmount))

    # special case for 0 sell amount
    if _sellAmount == 0:
        return 0

    baseD = safeSub(_supply, _sellAmount)

    # special case if the CRR = 100
    if _reserveRatio == MAX_RESERVE_RATIO:
        temp1 = safeMul(_reserveBalance, _supply)
        temp2 = safeMul(_reserveBalance, baseD)
        return safeSub(temp1, temp2) // _supply

    # special case for selling the entire supply
    if _sellAmount == _supply:
        return _reserveBalance

    resN = power(_supply, baseD, MAX_RESERVE_RATIO, _reserveRatio)

    temp1 = safeMul(_reserveBalance, resN)
    temp2 = safeMul(_reserveBalance, FIXED_ONE)

    result = safeSub(temp1, temp2) // resN
    log.debug('<- calculateSaleReturn(%d, %d, %d, %d) = %d', _supply, _reserveBalance, _reserveRatio, _sellAmount, result)
    return result


def _verifyUint256(*values):
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_UINT256:
            raise InvalidArgument('{!r} is not a 256-bit unsigned integer'.format(value))
