"""Symbolic, forward and reverse mode must report the same partials."""

import pytest

from aad_expr_tree.aad import (
    AADConfig, Environment, backward_all_diff, forward_diff, symbolic_diff, variables,
    constant, variable, one, add, sub, mul, div, sin, cos, ln, exp, sqrt, norm_cdf, power, negate,
)

from conftest import complex_formula

x0, x1, x2 = variable(0), variable(1), variable(2)

FORMULAS = {
    "complex": complex_formula(),
    "repeated": add(x0, mul(x0, x1)),
    "quotient": div(sin(mul(x0, x1)), add(one, mul(x2, x2))),
    "logs": ln(add(exp(x0), sqrt(mul(x1, x2)))),
    "trig": sub(cos(mul(x0, x2)), mul(sin(x1), negate(x0))),
    "power": mul(power(3, x0), div(constant(2.0), x1)),
    "normal": mul(norm_cdf(sub(x0, x1)), exp(negate(x2))),
}

ENVS = [
    Environment({0: 1.0, 1: 1.0, 2: 1.0}),
    Environment({0: 0.3, 1: 2.5, 2: 0.7}),
    Environment({0: 1.7, 1: 0.4, 2: 3.1}),
]


@pytest.mark.parametrize("name", sorted(FORMULAS))
@pytest.mark.parametrize("env", ENVS)
def test_three_modes_agree(name, env):
    formula = FORMULAS[name]
    reverse = backward_all_diff(env, formula)
    assert sorted(reverse) == variables(formula)

    for var_id in variables(formula):
        sym = symbolic_diff(env, var_id, formula)
        fwd = forward_diff(env, var_id, formula)
        rev = float(reverse.lookup(var_id))
        assert AADConfig.close(sym, fwd), (name, var_id, sym, fwd)
        assert AADConfig.close(fwd, rev), (name, var_id, fwd, rev)


@pytest.mark.parametrize("var_id, expected", [(0, -0.181974), (1, -0.118142)])
def test_complex_formula_reference_values(env_1_1, var_id, expected):
    formula = complex_formula()
    for diff_eval in (
        lambda: symbolic_diff(env_1_1, var_id, formula),
        lambda: forward_diff(env_1_1, var_id, formula),
        lambda: backward_all_diff(env_1_1, formula).lookup(var_id),
    ):
        assert abs(diff_eval() - expected) < 1e-5


def test_repeated_variable_reference(env_2_3):
    formula = add(variable(0), mul(variable(0), variable(1)))
    assert symbolic_diff(env_2_3, 0, formula) == 4.0
    assert forward_diff(env_2_3, 0, formula) == 4.0
    assert backward_all_diff(env_2_3, formula).lookup(0) == 4.0
