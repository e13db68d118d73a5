"""验证模块"""
from .reference import reference_integral, compare_with_reference
from .builtin_cases import BUILTIN_CASES, EXAMPLE_CASES, run_builtin_cases
from .convergence import convergence_study

__all__ = [
    'reference_integral', 'compare_with_reference',
    'BUILTIN_CASES', 'EXAMPLE_CASES', 'run_builtin_cases', 'convergence_study'
]
