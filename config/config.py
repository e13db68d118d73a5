"""配置文件"""
import math

# 积分器默认参数
INTEGRATION_CONFIG = {
    "default_expression": "x^2",
    "lower_bound": 0.0,
    "upper_bound": 1.0,
    "subdivisions": 1000,  # 100 (快), 1000 (平衡), 10000 (精确)
    "min_subdivisions": 1,
}

# 求值器参数
EVALUATOR_CONFIG = {
    "division_epsilon": 1e-15,  # 除数绝对值低于此值视为除零
}

# 采样测试点（原程序的 "Test function at sample points"）
SAMPLING_CONFIG = {
    "test_points": [0.0, 0.5, 1.0, 2.0, -1.0, math.pi, math.e],
}

# scipy参考积分参数
REFERENCE_CONFIG = {
    "quad_limit": 200,
    "epsabs": 1.49e-10,
    "epsrel": 1.49e-10,
}

# 收敛性分析
CONVERGENCE_CONFIG = {
    "subdivisions": [10, 20, 40, 80, 160],
}

LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert 0 < EVALUATOR_CONFIG["division_epsilon"] < 1e-12, "除零阈值必须是极小正数"
    assert INTEGRATION_CONFIG["min_subdivisions"] == 1, "细分数下限为1"
    assert INTEGRATION_CONFIG["subdivisions"] >= INTEGRATION_CONFIG["min_subdivisions"]
    assert INTEGRATION_CONFIG["lower_bound"] <= INTEGRATION_CONFIG["upper_bound"]
    assert all(n >= 1 for n in CONVERGENCE_CONFIG["subdivisions"])
    return True
