"""参考积分 - 用 scipy.integrate.quad 校验三种规则"""
import logging
import warnings

from scipy.integrate import IntegrationWarning, quad

from config.config import REFERENCE_CONFIG
from core import EvalError
from quadrature.report import outcomes_to_frame

logger = logging.getLogger(__name__)


def reference_integral(f, a, b):
    """
    自适应高斯-克朗罗德积分作为参考值

    Returns:
        (value, abserr)
    Raises:
        EvalError: 被积函数在某个采样点上求值失败
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", category=IntegrationWarning)
        value, abserr = quad(
            f, a, b,
            limit=REFERENCE_CONFIG['quad_limit'],
            epsabs=REFERENCE_CONFIG['epsabs'],
            epsrel=REFERENCE_CONFIG['epsrel'],
        )
    for w in caught:
        if issubclass(w.category, IntegrationWarning):
            logger.warning(f"scipy quad: {w.message}")
    return float(value), float(abserr)


def compare_with_reference(integrator):
    """
    三种规则的结果与scipy参考值对比

    Returns:
        DataFrame（reference 列为参考值；参考值不可用时误差列为NaN）
    """
    outcomes = integrator.compute_all()
    try:
        reference, abserr = reference_integral(
            integrator.f, integrator.lower_bound, integrator.upper_bound
        )
        logger.info(f"Reference (scipy quad): {reference:.12g} (+/- {abserr:.2g})")
    except EvalError as e:
        logger.error(f"Reference integral failed: {e}")
        reference = float('nan')

    frame = outcomes_to_frame(outcomes, reference=reference)
    frame['reference'] = reference
    return frame
