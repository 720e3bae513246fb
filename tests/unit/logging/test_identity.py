"""Tests for application identity detection."""

import sys
from types import SimpleNamespace

import pytest

from globalog.logging.identity import application_identifier


@pytest.fixture
def no_label_env(monkeypatch):
    monkeypatch.delenv("GLOBALOG_LABEL", raising=False)


@pytest.mark.unit
class TestApplicationIdentifier:
    """Label detection order: env, __main__ spec, argv[0]."""

    def test_environment_variable_wins(self, monkeypatch):
        monkeypatch.setenv("GLOBALOG_LABEL", "com.example.billing")
        monkeypatch.setitem(sys.modules, "__main__", SimpleNamespace(__spec__=SimpleNamespace(name="other")))

        assert application_identifier() == "com.example.billing"

    def test_main_spec_top_level_package(self, monkeypatch, no_label_env):
        main = SimpleNamespace(__spec__=SimpleNamespace(name="billing.worker.__main__"))
        monkeypatch.setitem(sys.modules, "__main__", main)

        assert application_identifier() == "billing"

    def test_argv_stem_when_main_has_no_spec(self, monkeypatch, no_label_env):
        monkeypatch.setitem(sys.modules, "__main__", SimpleNamespace(__spec__=None))
        monkeypatch.setattr(sys, "argv", ["/usr/local/bin/report-tool.py", "--daily"])

        assert application_identifier() == "report-tool"

    @pytest.mark.parametrize("argv", [[""], ["-c"], []])
    def test_empty_when_nothing_identifies_the_app(self, monkeypatch, no_label_env, argv):
        monkeypatch.setitem(sys.modules, "__main__", SimpleNamespace(__spec__=None))
        monkeypatch.setattr(sys, "argv", argv)

        assert application_identifier() == ""
