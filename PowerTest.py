import sys
import random
import CurveFormula
import FormulaNativePython


def powerTest(baseN, baseD, expN, expD):
    fixed = CurveFormula.power(baseN, baseD, expN, expD)
    real  = FormulaNativePython.power(baseN, baseD, expN, expD, CurveFormula.PRECISION)
    if fixed > real:
        error = ['Implementation Error:']
        error.append('baseN = {}'.format(baseN))
        error.append('baseD = {}'.format(baseD))
        error.append('expN  = {}'.format(expN ))
        error.append('expD  = {}'.format(expD ))
        error.append('fixed = {}'.format(fixed))
        error.append('real  = {}'.format(real ))
        raise BaseException('\n'.join(error))
    return fixed / real


size = int(sys.argv[1]) if len(sys.argv) > 1 else 0
if size == 0:
    size = int(input('How many test-cases would you like to execute? '))


worstAccuracy = 1
numOfFailures = 0


for n in range(size):
    baseN = random.randrange(2, 10**26)
    baseD = random.randrange(1, baseN)
    expN  = random.randrange(1, 100)
    expD  = random.randrange(1, 100)
    try:
        accuracy = powerTest(baseN, baseD, expN, expD)
        worstAccuracy = min(worstAccuracy, accuracy)
    except CurveFormula.FormulaError:
        accuracy = 0
        numOfFailures += 1
    except BaseException as error:
        print(error)
        break
    print('Test #{}: accuracy = {:.12f}, worst accuracy = {:.12f}, num of failures = {}'.format(n, accuracy, worstAccuracy, numOfFailures))
