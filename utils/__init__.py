"""工具模块"""
from .metrics import absolute_error, relative_error, observed_order

__all__ = ['absolute_error', 'relative_error', 'observed_order']
