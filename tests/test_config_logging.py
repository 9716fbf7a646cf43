import logging

import numpy as np

from aad_expr_tree.aad import AADConfig, backward_all_diff, Environment, variable, sin
from aad_expr_tree.aad.core import get_aad_logger


def test_errstate_silences_fp_errors():
    with AADConfig.errstate():
        assert np.float64(1.0) / np.float64(0.0) == np.inf


def test_close_uses_default_tolerance():
    assert AADConfig.close(1.0, 1.0 + 1e-6)
    assert not AADConfig.close(1.0, 1.0 + 1e-4)
    assert AADConfig.close(1.0, 1.1, tol=0.2)


def test_logger_level_from_environment(monkeypatch):
    monkeypatch.setenv(AADConfig.LOG_LEVEL_ENV, "debug")
    logger = get_aad_logger("aad_expr_tree.aad.reverse")
    assert logger.name == "aad_expr_tree.aad.reverse"
    assert logging.getLogger("aad_expr_tree").level == logging.DEBUG

    monkeypatch.setenv(AADConfig.LOG_LEVEL_ENV, "WARNING")
    get_aad_logger()
    assert logging.getLogger("aad_expr_tree").level == logging.WARNING


def test_backprop_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="aad_expr_tree"):
        backward_all_diff(Environment({0: 1.0}), sin(variable(0)))
    assert any("backprop" in r.getMessage() for r in caplog.records)
