"""主程序入口 - 数值积分计算器"""
import argparse
import logging

import pandas as pd

from config.config import (
    INTEGRATION_CONFIG, LOGGING_CONFIG, SAMPLING_CONFIG, validate_config
)
from core import EvalError, ExpressionSyntaxError
from quadrature import NumericalIntegrator, outcomes_to_frame, samples_to_frame
from validation import compare_with_reference, convergence_study, reference_integral, run_builtin_cases

logger = logging.getLogger(__name__)


def build_integrator(args):
    """按命令行参数构造积分器；表达式非法时回退到默认表达式"""
    integrator = NumericalIntegrator()
    try:
        integrator.set_expression(args.expression)
        logger.info("Function accepted!")
    except ExpressionSyntaxError as e:
        logger.error(f"Error parsing expression: {e}")
        logger.error("Tip: Make sure to use * for multiplication (e.g., 2*x not 2x)")
        logger.warning(f"Using default: {INTEGRATION_CONFIG['default_expression']}")

    integrator.set_bounds(args.lower, args.upper)
    integrator.set_subdivisions(args.subdivisions)
    return integrator


def main(args):
    validate_config()

    if args.test:
        logger.info("=== Running Integration Tests ===")
        results = run_builtin_cases()
        logger.info("\n" + results.to_string())
        logger.info("=== Tests Complete ===")
        return results

    integrator = build_integrator(args)

    if args.info:
        logger.info("--- Current Settings ---")
        for key, value in integrator.settings().items():
            logger.info(f"{key}: {value}")

    if args.sample:
        points = args.points if args.points else SAMPLING_CONFIG['test_points']
        logger.info("--- Function Test Points ---")
        logger.info("\n" + samples_to_frame(integrator.sample_points(points)).to_string(index=False))

    if args.reference:
        results = compare_with_reference(integrator)
    else:
        results = outcomes_to_frame(integrator.compute_all())

    logger.info("========== Integration Results ==========")
    logger.info("\n" + results.to_string())

    if args.convergence:
        logger.info("=== Convergence Study ===")
        exact = args.exact
        if exact is None:
            try:
                exact, _ = reference_integral(integrator.f, integrator.lower_bound, integrator.upper_bound)
            except EvalError as e:
                logger.error(f"Convergence study skipped, no reference value: {e}")
                return results
        errors, orders = convergence_study(integrator, exact)
        logger.info("\n" + errors.to_string())
        logger.info("\n" + pd.Series(orders, name='observed_order').to_string())

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Numerical Integration Calculator")

    parser.add_argument(
        "--expression", "-f",
        type=str,
        default=INTEGRATION_CONFIG['default_expression'],
        help="Function f(x), e.g. 'x^2', 'sin(x)', 'exp(-x^2)'"
    )
    parser.add_argument(
        "--lower", "-a",
        type=float,
        default=INTEGRATION_CONFIG['lower_bound'],
        help="Lower bound of integration"
    )
    parser.add_argument(
        "--upper", "-b",
        type=float,
        default=INTEGRATION_CONFIG['upper_bound'],
        help="Upper bound of integration"
    )
    parser.add_argument(
        "--subdivisions", "-n",
        type=int,
        default=INTEGRATION_CONFIG['subdivisions'],
        help="Number of subdivisions (default: 1000)"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Evaluate f(x) at sample points"
    )
    parser.add_argument(
        "--points",
        type=float,
        nargs="+",
        help="Sample points used with --sample"
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Show current settings (expression, postfix, bounds, subdivisions)"
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Compare all methods with scipy.integrate.quad"
    )
    parser.add_argument(
        "--convergence",
        action="store_true",
        help="Run a convergence study over several subdivision counts"
    )
    parser.add_argument(
        "--exact",
        type=float,
        default=None,
        help="Exact integral value for the convergence study (default: scipy reference)"
    )
    parser.add_argument(
        "--test", "-t",
        action="store_true",
        help="Run built-in integration tests"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (default: INFO)"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG['format']
    )
    main(args)
