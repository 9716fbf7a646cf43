from aad_expr_tree.aad import (
    format_expr, depth, variables, get_graph_stats, print_graph_summary,
    constant, variable, zero, one, add, mul, div, sin, norm_cdf,
)


def test_format_expr():
    e = div(one, add(variable(0), constant(2.0)))
    assert format_expr(e) == "(1 / (x0 + 2.0))"
    assert format_expr(sin(mul(zero, variable(3)))) == "sin((0 * x3))"
    assert format_expr(norm_cdf(variable(1))) == "norm_cdf(x1)"


def test_depth_and_variables():
    e = add(variable(2), sin(sin(variable(0))))
    assert depth(e) == 4
    assert variables(e) == [0, 2]
    assert variables(one) == []


def test_graph_stats_counts_occurrences():
    x = variable(0)
    e = add(mul(x, x), sin(x))
    stats = get_graph_stats(e)
    assert stats['nodes'] == 6
    assert stats['edges'] == 5
    assert stats['leaves'] == 3
    assert stats['depth'] == 3
    assert stats['variables'] == [0]
    assert stats['operations'] == {'var': 3, 'mul': 1, 'sin': 1, 'add': 1}


def test_print_graph_summary(capsys):
    stats = print_graph_summary(add(one, variable(0)))
    out = capsys.readouterr().out
    assert out.startswith("expr: 3 nodes, 2 leaves, depth 2; variables: x0; ops: ")
    assert "add=1" in out and "var=1" in out and "one=1" in out
    assert stats['nodes'] == 3


def test_print_graph_summary_without_variables(capsys):
    print_graph_summary(mul(constant(2.0), one))
    out = capsys.readouterr().out
    assert "variables: none;" in out
