from ..Errors import Overflow
from ..Errors import Underflow


MAX_UINT256 = (1 << 256) - 1


def safeAdd(x, y):
    z = x + y
    if z > MAX_UINT256:
        raise Overflow('safeAdd(0x{:x}, 0x{:x}) exceeds 256 bits'.format(x, y))
    return z


def safeSub(x, y):
    if x < y:
        raise Underflow('safeSub({}, {}) is negative'.format(x, y))
    return x - y


def safeMul(x, y):
    z = x * y
    if z > MAX_UINT256:
        raise Overflow('safeMul(0x{:x}, 0x{:x}) exceeds 256 bits'.format(x, y))
    return z
