from .common.functions import getTaylorCoefs
from .common.functions import getMaxExpArray
from .common.constants import NUM_OF_TAYLOR_COEFS
from .common.constants import MIN_PRECISION
from .common.constants import MAX_PRECISION


coefficients = getTaylorCoefs(NUM_OF_TAYLOR_COEFS)
maxExpArray = getMaxExpArray(coefficients, MIN_PRECISION, MAX_PRECISION)
maxExpLen = len(hex(maxExpArray[-1]))


print('Max Exp Per Precision:')
for precision, maxExp in zip(range(MIN_PRECISION, MAX_PRECISION + 1), maxExpArray):
    print('Precision = {:2d} | Max Exp = {:{}s} | Max Real Exp = {:.6f}'.format(precision, hex(maxExp), maxExpLen, maxExp / 2 ** precision))
print('')
print('MAX_FIXED_EXP_{:d} = 0x{:x}'.format(MIN_PRECISION, maxExpArray[0]))
