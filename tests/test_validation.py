"""
验证模块测试：scipy参考值、内置用例、收敛阶
"""

import math

import pytest

from core import DomainError
from quadrature import NumericalIntegrator
from utils.metrics import absolute_error, observed_order, relative_error
from validation import (
    BUILTIN_CASES,
    EXAMPLE_CASES,
    compare_with_reference,
    convergence_study,
    reference_integral,
    run_builtin_cases,
)


class TestReference:

    def test_reference_integral_of_expression(self) -> None:
        integrator = NumericalIntegrator("sin(x)", 0.0, math.pi)
        value, abserr = reference_integral(integrator.f, 0.0, math.pi)
        assert value == pytest.approx(2.0, abs=1e-10)
        assert abserr < 1e-8

    def test_reference_propagates_eval_error(self) -> None:
        integrator = NumericalIntegrator("sqrt(x)")
        with pytest.raises(DomainError):
            reference_integral(integrator.f, -1.0, 1.0)

    def test_compare_with_reference(self) -> None:
        frame = compare_with_reference(NumericalIntegrator("x^2"))
        assert frame["reference"].iloc[0] == pytest.approx(1.0 / 3.0)
        assert (frame["abs_error"] < 1e-3).all()

    def test_compare_without_reference(self) -> None:
        frame = compare_with_reference(NumericalIntegrator("sqrt(x)", -1.0, 1.0, 10))
        assert frame["reference"].isna().all()
        assert frame["value"].isna().all()


class TestBuiltinCases:

    def test_all_cases_accurate(self) -> None:
        frame = run_builtin_cases()
        assert len(frame) == len(BUILTIN_CASES) + len(EXAMPLE_CASES)
        assert (frame["max_abs_error"] < 1e-3).all()

    def test_linear_case_exact(self) -> None:
        frame = run_builtin_cases([case for case in BUILTIN_CASES if case["name"] == "multi_digit_linear"])
        row = frame.loc["multi_digit_linear"]
        assert row["trapezoidal"] == pytest.approx(2250.0)
        assert row["simpson"] == pytest.approx(2250.0)
        assert row["midpoint"] == pytest.approx(2250.0)


class TestConvergence:

    def test_observed_orders(self) -> None:
        integrator = NumericalIntegrator("sin(x)", 0.0, math.pi, 1000)
        errors, orders = convergence_study(integrator, 2.0, [10, 20, 40, 80])
        assert list(errors.index) == [10, 20, 40, 80]
        assert orders["trapezoidal"] == pytest.approx(2.0, abs=0.2)
        assert orders["midpoint"] == pytest.approx(2.0, abs=0.2)
        assert orders["simpson"] == pytest.approx(4.0, abs=0.3)

    def test_subdivisions_restored(self) -> None:
        integrator = NumericalIntegrator("exp(x)", 0.0, 1.0, 1000)
        convergence_study(integrator, math.e - 1.0, [4, 8])
        assert integrator.subdivisions == 1000

    def test_failing_rule_gives_nan(self) -> None:
        integrator = NumericalIntegrator("1/x", 0.0, 1.0)
        errors, orders = convergence_study(integrator, 1.0, [10, 20])
        assert errors["trapezoidal"].isna().all()
        assert math.isnan(orders["trapezoidal"])
        assert errors["midpoint"].notna().all()


class TestMetrics:

    def test_errors(self) -> None:
        assert absolute_error(1.5, 2.0) == 0.5
        assert relative_error(1.5, 2.0) == 0.25
        assert relative_error(1e-3, 0.0) == 1e-3

    def test_observed_order_of_exact_power_law(self) -> None:
        ns = [10, 20, 40]
        assert observed_order(ns, [1.0 / n ** 2 for n in ns]) == pytest.approx(2.0)

    def test_observed_order_needs_two_points(self) -> None:
        assert math.isnan(observed_order([10, 20], [0.0, 0.0]))
