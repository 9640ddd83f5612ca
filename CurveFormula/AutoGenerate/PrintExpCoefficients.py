from .common.functions import getTaylorCoefs
from .common.constants import NUM_OF_TAYLOR_COEFS


coefficients = getTaylorCoefs(NUM_OF_TAYLOR_COEFS)


print('EXP_FACTORIAL = 0x{:x}  # {}!'.format(coefficients[0], NUM_OF_TAYLOR_COEFS))
print('EXP_COEFFICIENTS = (')
for coefficient in coefficients[1:]:
    print('    0x{:x},'.format(coefficient))
print(')')
