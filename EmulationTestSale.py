import CurveFormula
import InputGenerator
import FormulaNativePython


MINIMUM_VALUE_SUPPLY  = 100
MAXIMUM_VALUE_SUPPLY  = 10**34
GROWTH_FACTOR_SUPPLY  = 2.5


MINIMUM_VALUE_BALANCE = 100
MAXIMUM_VALUE_BALANCE = 10**34
GROWTH_FACTOR_BALANCE = 2.5


MINIMUM_VALUE_RATIO   = 10
MAXIMUM_VALUE_RATIO   = 90
GROWTH_FACTOR_RATIO   = 1.5


MINIMUM_VALUE_AMOUNT  = 1
MAXIMUM_VALUE_AMOUNT  = 10**34
GROWTH_FACTOR_AMOUNT  = 2.5


def Main():
    rangeSupply  = InputGenerator.ExponentialDistribution(MINIMUM_VALUE_SUPPLY , MAXIMUM_VALUE_SUPPLY , GROWTH_FACTOR_SUPPLY )
    rangeBalance = InputGenerator.ExponentialDistribution(MINIMUM_VALUE_BALANCE, MAXIMUM_VALUE_BALANCE, GROWTH_FACTOR_BALANCE)
    rangeRatio   = InputGenerator.ExponentialDistribution(MINIMUM_VALUE_RATIO  , MAXIMUM_VALUE_RATIO  , GROWTH_FACTOR_RATIO  )
    rangeAmount  = InputGenerator.ExponentialDistribution(MINIMUM_VALUE_AMOUNT , MAXIMUM_VALUE_AMOUNT , GROWTH_FACTOR_AMOUNT )

    testNum = 0
    numOfTests = len(rangeSupply) * len(rangeBalance) * len(rangeRatio) * len(rangeAmount)

    for             supply  in rangeSupply :
        for         balance in rangeBalance:
            for     ratio   in rangeRatio  :
                for amount  in rangeAmount :
                    testNum += 1
                    if amount > supply:
                        continue
                    fixed = Run(supply, balance, ratio, amount)
                    real  = FormulaNativePython.saleTargetAmount(supply, balance, ratio, amount)
                    print('Test {} out of {}: fixed = {}, real = {:.2f}'.format(testNum, numOfTests, fixed, real))
                    if fixed > real:
                        print('Emulation Error:', ', '.join('{} = {}'.format(*item) for item in zip('supply,balance,ratio,amount,fixed,real'.split(','), (supply, balance, ratio, amount, fixed, real))))
                        return


def Run(supply, balance, ratio, amount):
    try:
        return CurveFormula.calculateSaleReturn(supply, balance, ratio, amount)
    except CurveFormula.FormulaError:
        return -1


Main()
