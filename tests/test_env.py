import numpy as np
import pytest

from aad_expr_tree.aad import Environment, EMPTY, empty, update, lookup, UnboundVariable


def test_empty_has_no_bindings():
    assert len(empty()) == 0
    assert empty() is EMPTY
    assert 0 not in empty()


def test_update_is_non_destructive():
    env0 = empty()
    env1 = update(0, 2.0, env0)
    env2 = update(1, 3.0, env1)

    assert len(env0) == 0
    assert dict(env1) == {0: 2.0}
    assert lookup(0, env2) == 2.0
    assert lookup(1, env2) == 3.0


def test_update_overrides_existing_binding():
    env = empty().update(0, 1.0).update(0, 5.0)
    assert env.lookup(0) == 5.0
    assert len(env) == 1


def test_lookup_missing_raises_unbound_variable():
    with pytest.raises(UnboundVariable) as info:
        lookup(7, empty().update(0, 1.0))
    assert info.value.var_id == 7
    assert "x7" in str(info.value)


def test_unbound_variable_is_a_key_error():
    env = empty().update(0, 1.0)
    assert env.get(3, -1.0) == -1.0
    with pytest.raises(KeyError):
        env[3]


def test_values_are_float64():
    env = Environment({0: 1, 1: 2.5})
    assert isinstance(env.lookup(0), np.float64)
    assert env == {0: 1.0, 1: 2.5}


def test_rejects_bad_ids_and_values():
    with pytest.raises(TypeError):
        empty().update("x", 1.0)
    with pytest.raises(TypeError):
        empty().update(0, "1.0")
    with pytest.raises(TypeError):
        Environment({1.5: 1.0})
