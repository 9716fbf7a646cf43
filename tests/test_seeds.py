import math

import pytest

from aad_expr_tree.aad import value, grad, grads, grads_list, variable, add, mul, sin, constant


def test_value_from_plain_dict():
    assert value(add(variable(0), variable(1)), {0: 1.5, 1: 2.0}) == 3.5


def test_grad_single_input():
    assert grad(sin(variable(0)), 0.3) == pytest.approx(math.cos(0.3))
    assert grad(constant(2.0), 0.3) == 0.0


def test_grads_dict_keeps_input_order_and_unused_inputs():
    e = mul(variable(0), variable(2))
    g = grads(e, {2: 3.0, 0: 2.0, 5: 1.0})
    assert list(g) == [2, 0, 5]
    assert g == {2: 2.0, 0: 3.0, 5: 0.0}


def test_grads_list():
    # x0*x0 + 3*x1
    e = add(mul(variable(0), variable(0)), mul(constant(3.0), variable(1)))
    assert grads_list(e, [2.0, 4.0]) == [4.0, 3.0]
