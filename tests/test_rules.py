"""
积分规则测试（直接调用规则函数）
"""

import math

import pytest

from quadrature.rules import RULES, midpoint_rule, simpsons_rule, trapezoidal_rule


class TestSampling:

    def test_trapezoidal_samples_in_increasing_order(self, recorder) -> None:
        f = recorder()
        trapezoidal_rule(f, 0.0, 1.0, 4)
        assert f.calls == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_midpoint_samples(self, recorder) -> None:
        f = recorder()
        midpoint_rule(f, 0.0, 1.0, 4)
        assert f.calls == pytest.approx([0.125, 0.375, 0.625, 0.875])

    def test_simpson_rounds_odd_subdivisions_up(self, recorder) -> None:
        f = recorder()
        simpsons_rule(f, 0.0, 1.0, 3)
        assert len(f.calls) == 5
        assert f.calls == sorted(f.calls)

    def test_simpson_odd_equals_next_even(self) -> None:
        f = lambda x: x ** 3 + math.sin(x)  # noqa: E731
        assert simpsons_rule(f, 0.0, 2.0, 7) == simpsons_rule(f, 0.0, 2.0, 8)

    def test_upper_bound_sampled_exactly(self, recorder) -> None:
        f = recorder()
        trapezoidal_rule(f, 0.0, 0.3, 3)
        assert f.calls[-1] == 0.3

    def test_error_aborts_rule(self) -> None:
        def f(x):
            if x > 0.5:
                raise ValueError("boom")
            return x

        with pytest.raises(ValueError):
            trapezoidal_rule(f, 0.0, 1.0, 10)


class TestAccuracy:

    def test_single_subdivision(self) -> None:
        f = lambda x: x ** 2  # noqa: E731
        assert trapezoidal_rule(f, 0.0, 1.0, 1) == pytest.approx(0.5)
        assert midpoint_rule(f, 0.0, 1.0, 1) == pytest.approx(0.25)
        # n=1 -> 2 个细分，对二次多项式精确
        assert simpsons_rule(f, 0.0, 1.0, 1) == pytest.approx(1.0 / 3.0)

    @pytest.mark.parametrize("method", list(RULES))
    def test_linear_function_is_exact(self, method) -> None:
        result = RULES[method](lambda x: 100 + 25 * x, 0.0, 10.0, 100)
        assert result == pytest.approx(2250.0, abs=1e-9)

    @pytest.mark.parametrize("method", list(RULES))
    def test_zero_width_interval(self, method) -> None:
        assert RULES[method](math.exp, 1.0, 1.0, 10) == 0.0

    def test_simpson_exact_for_cubics(self) -> None:
        assert simpsons_rule(lambda x: x ** 3, 0.0, 2.0, 2) == pytest.approx(4.0)

    def test_registry_order(self) -> None:
        assert list(RULES) == ["trapezoidal", "simpson", "midpoint"]
