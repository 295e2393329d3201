"""Arithmetic engine."""

from .calculator import MoneyCalculator

__all__ = ["MoneyCalculator"]
