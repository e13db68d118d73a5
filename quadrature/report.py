"""把积分结果整理成 pandas 表格"""
import numpy as np
import pandas as pd

from quadrature.rules import RULE_LABELS
from utils.metrics import absolute_error, relative_error


def outcomes_to_frame(outcomes, reference=None):
    """
    Args:
        outcomes: compute_all() 的输出 {method: RuleOutcome}
        reference: 参考值（精确值或scipy结果），给出时附加误差列
    Returns:
        以 method 为索引的 DataFrame
    """
    rows = []
    for method, outcome in outcomes.items():
        row = {
            'method': method,
            'label': RULE_LABELS.get(method, method),
            'value': outcome.value if outcome.ok else np.nan,
            'error': '' if outcome.ok else str(outcome.error),
        }
        if reference is not None:
            row['abs_error'] = absolute_error(row['value'], reference) if outcome.ok else np.nan
            row['rel_error'] = relative_error(row['value'], reference) if outcome.ok else np.nan
        rows.append(row)
    return pd.DataFrame(rows).set_index('method')


def samples_to_frame(samples):
    """sample_points() 的输出 -> DataFrame(x, f(x), error)"""
    return pd.DataFrame([
        {
            'x': x,
            'f(x)': outcome.value if outcome.ok else np.nan,
            'error': '' if outcome.ok else str(outcome.error),
        }
        for x, outcome in samples.items()
    ])
