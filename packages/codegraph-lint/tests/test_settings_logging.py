"""
Settings and logging setup.
"""

import json
import logging

import pytest

from codegraph_lint.config import DEFAULT_EXTENSIONS, LintSettings
from codegraph_lint.logging import ROOT_LOGGER_NAME, StructuredFormatter, get_logger, setup_logger


class TestLintSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "STRUCTURED_LOGS", "MAX_FILE_SIZE_KB"):
            monkeypatch.delenv(f"CODEGRAPH_LINT_{name}", raising=False)

        settings = LintSettings()

        assert settings.log_level == "WARNING"
        assert settings.structured_logs is False
        assert settings.max_file_size_kb == 1024
        assert settings.extensions == DEFAULT_EXTENSIONS

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CODEGRAPH_LINT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CODEGRAPH_LINT_STRUCTURED_LOGS", "true")

        settings = LintSettings()

        assert settings.log_level == "DEBUG"
        assert settings.structured_logs is True

    def test_negative_size_rejected(self, monkeypatch):
        monkeypatch.setenv("CODEGRAPH_LINT_MAX_FILE_SIZE_KB", "-1")

        with pytest.raises(ValueError):
            LintSettings()


class TestLogging:
    @pytest.fixture(autouse=True)
    def reset_handlers(self):
        yield
        logging.getLogger(ROOT_LOGGER_NAME).handlers = []

    def test_get_logger_namespace(self):
        assert get_logger().name == ROOT_LOGGER_NAME
        assert get_logger("linter").name == f"{ROOT_LOGGER_NAME}.linter"
        assert get_logger("codegraph_lint.cli").name == "codegraph_lint.cli"

    def test_module_loggers_share_namespace(self):
        from codegraph_lint import linter
        from codegraph_lint.index import restriction_index
        from codegraph_lint.registry import loader

        assert linter.logger.name == "codegraph_lint.linter"
        assert restriction_index.logger.name == "codegraph_lint.index.restriction_index"
        assert loader.logger.name == "codegraph_lint.registry.loader"

    def test_setup_logger_level_name(self):
        logger = setup_logger(level="debug")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logger_replaces_handlers(self):
        setup_logger()
        logger = setup_logger(structured=True)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_structured_formatter_includes_extra(self):
        record = logging.LogRecord(
            name="codegraph_lint.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Loaded %d restrictions",
            args=(3,),
            exc_info=None,
        )
        record.source = "rules.yaml"

        data = json.loads(StructuredFormatter().format(record))

        assert data["message"] == "Loaded 3 restrictions"
        assert data["level"] == "INFO"
        assert data["logger"] == "codegraph_lint.test"
        assert data["source"] == "rules.yaml"
