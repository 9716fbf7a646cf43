import pytest

from aad_expr_tree.aad import add, mul, div, exp, sin, one, variable, empty


def complex_formula():
    """1 / (1 + exp(x0*x1 + sin(x0)))"""
    x_0 = variable(0)
    x_1 = variable(1)
    x_01 = mul(x_0, x_1)
    sin_x_0 = sin(x_0)
    add_x01_sin = add(x_01, sin_x_0)
    e = exp(add_x01_sin)
    add_1_e = add(one, e)
    return div(one, add_1_e)


@pytest.fixture
def env_1_1():
    return empty().update(0, 1.0).update(1, 1.0)


@pytest.fixture
def env_2_3():
    return empty().update(0, 2.0).update(1, 3.0)
