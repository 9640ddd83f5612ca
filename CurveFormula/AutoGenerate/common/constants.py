MIN_PRECISION = 32 # The scaling factor used by the engine is 2 ^ MIN_PRECISION
MAX_PRECISION = 63 # The largest scaling factor reported on by PrintMaxExpPerPrecision


NUM_OF_TAYLOR_COEFS = 34 # The number of terms (degree 0 included) in function 'fixedExpUnsafe'


LN2_SHIFT = 56 # ln(2) is stored as an integer upshifted by 2 ^ LN2_SHIFT
