import sys
import random
import CurveFormula
import FormulaNativePython


def formulaTest(supply, balance, ratio, amount):
    fixed = CurveFormula.calculateSaleReturn(supply, balance, ratio, amount)
    real  = FormulaNativePython.saleTargetAmount(supply, balance, ratio, amount)
    if fixed > real:
        error = ['Implementation Error:']
        error.append('supply  = {}'.format(supply ))
        error.append('balance = {}'.format(balance))
        error.append('ratio   = {}'.format(ratio  ))
        error.append('amount  = {}'.format(amount ))
        error.append('fixed   = {}'.format(fixed  ))
        error.append('real    = {}'.format(real   ))
        raise BaseException('\n'.join(error))
    return fixed / real if real else 1


size = int(sys.argv[1]) if len(sys.argv) > 1 else 0
if size == 0:
    size = int(input('How many test-cases would you like to execute? '))


worstAccuracy = 1
numOfFailures = 0


for n in range(size):
    supply  = random.randrange(2, 10**26)
    balance = random.randrange(1, 10**23)
    ratio   = random.randrange(1, 100)
    amount  = random.randrange(1, supply)
    try:
        accuracy = formulaTest(supply, balance, ratio, amount)
        worstAccuracy = min(worstAccuracy, accuracy)
    except CurveFormula.FormulaError:
        accuracy = 0
        numOfFailures += 1
    except BaseException as error:
        print(error)
        break
    print('Test #{}: accuracy = {:.12f}, worst accuracy = {:.12f}, num of failures = {}'.format(n, accuracy, worstAccuracy, numOfFailures))
