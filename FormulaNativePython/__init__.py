from decimal import Decimal
from decimal import getcontext


getcontext().prec = 80 # 78 digits for a maximum of 2^256-1, and 2 more digits for after the decimal point


def purchaseTargetAmount(supply, balance, ratio, amount):
    supply, balance, ratio, amount = [Decimal(value) for value in (supply, balance, ratio, amount)]
    return supply*((1+amount/balance)**(ratio/100)-1)


def saleTargetAmount(supply, balance, ratio, amount):
    supply, balance, ratio, amount = [Decimal(value) for value in (supply, balance, ratio, amount)]
    return balance*(1-(1-amount/supply)**(100/ratio))


def power(baseN, baseD, expN, expD, precision):
    baseN, baseD, expN, expD = [Decimal(value) for value in (baseN, baseD, expN, expD)]
    return (baseN/baseD)**(expN/expD)*2**precision


def log2(x, precision):
    return (Decimal(x)/2**precision).ln()/Decimal(2).ln()*2**precision


def exp(x, precision):
    return (Decimal(x)/2**precision).exp()*2**precision
