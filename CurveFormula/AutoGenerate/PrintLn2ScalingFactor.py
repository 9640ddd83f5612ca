from math import log

from .common.functions import ln2Scaled
from .common.constants import LN2_SHIFT


exact = ln2Scaled(LN2_SHIFT)
native = int(log(2) * 2 ** LN2_SHIFT)


print('floor(ln(2) * 2 ^ {}) = 0x{:x}'.format(LN2_SHIFT, exact))
print('ln(2) as a double * 2 ^ {} = 0x{:x}'.format(LN2_SHIFT, native))
print('LN2_SCALED = 0x{:x}'.format(native))
