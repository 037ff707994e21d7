"""Tests for tolerance configuration and the crease logger hierarchy."""
import logging

import pytest

from crease.core.config import DEFAULT_TOLERANCE, Tolerance
from crease.core.constants import EPS
from crease.core.logging_utils import configure_logging, get_logger


class TestTolerance:

    def test_defaults(self):
        assert DEFAULT_TOLERANCE == Tolerance(EPS, EPS, EPS)

    def test_coerce_none_returns_default(self):
        assert Tolerance.coerce(None) is DEFAULT_TOLERANCE

    def test_coerce_float_applies_everywhere(self):
        tol = Tolerance.coerce(0.5)
        assert (tol.distance, tol.angle, tol.separation) == (0.5, 0.5, 0.5)

    def test_coerce_passes_instances_through(self):
        tol = Tolerance(angle=1e-3)
        assert Tolerance.coerce(tol) is tol

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            Tolerance(distance=-1.0)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            Tolerance.coerce(True)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_TOLERANCE.angle = 1.0


class TestLogging:

    def test_child_loggers_live_under_crease(self):
        assert get_logger('separation').name == 'crease.separation'
        assert get_logger('crease.classify').name == 'crease.classify'

    def test_child_inherits_level(self):
        log = get_logger('crease.sometest')
        assert log.level == logging.NOTSET

    def test_explicit_level(self):
        assert get_logger('crease.leveled', 'warning').level == logging.WARNING

    def test_configure_logging_isolated_from_root(self):
        root_handlers = list(logging.getLogger().handlers)
        pkg = configure_logging('DEBUG')
        try:
            assert pkg.name == 'crease'
            assert pkg.level == logging.DEBUG
            assert pkg.propagate is False
            assert any(not isinstance(h, logging.NullHandler) for h in pkg.handlers)
            assert logging.getLogger().handlers == root_handlers
        finally:
            pkg.propagate = True
            pkg.setLevel(logging.NOTSET)

    def test_configure_logging_is_idempotent(self):
        pkg = configure_logging('INFO')
        n = len(pkg.handlers)
        configure_logging('INFO')
        try:
            assert len(pkg.handlers) == n
        finally:
            pkg.propagate = True
            pkg.setLevel(logging.NOTSET)

    def test_separation_logs_decision(self, caplog):
        from crease.core.separation import sep_normal
        caplog.set_level(logging.DEBUG, logger='crease')
        pkg = logging.getLogger('crease')
        pkg.propagate = True
        sep_normal([[0, 0, 0], [1, 0, 0], [0, 1, 0]], [[0, 0, 5], [1, 0, 5], [0, 1, 5]])
        assert any('separated along' in r.getMessage() for r in caplog.records)
