"""Sliding window methods.

Quick Reference:
    LinReg (LSMA): Least squares moving average, O(1) per sample
    SMM: Simple moving median, O(log N) search + O(k) shift per sample

Example:
    from slidingstats.methods import SMM, LinReg

    median = SMM(21, prices[0])
    trend = LinReg(21, prices[0])
    for price in prices:
        print(median.next(price), trend.next(price))
"""

from slidingstats.methods.base import Method
from slidingstats.methods.lin_reg import LSMA, LinReg
from slidingstats.methods.smm import SMM

__all__ = [
    "LSMA",
    "LinReg",
    "Method",
    "SMM",
]
