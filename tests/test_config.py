"""Tests for PlannerConfig and logging setup."""

import logging
from pathlib import Path

import pytest

from src.flight_planner.config import PlannerConfig
from src.flight_planner.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestPlannerConfig:
    def test_defaults(self, monkeypatch):
        for name in ("DATA_DIR", "LOG_LEVEL", "LOG_FILE", "ROUTES_FILE"):
            monkeypatch.delenv(f"FLIGHT_PLANNER_{name}", raising=False)

        config = PlannerConfig.from_env()

        assert config.airports_path == Path("data") / "airports.csv"
        assert config.routes_output_path == Path("data") / "routes_output.csv"
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FLIGHT_PLANNER_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("FLIGHT_PLANNER_ROUTES_FILE", "saved.csv")
        monkeypatch.setenv("FLIGHT_PLANNER_LOG_LEVEL", "debug")
        monkeypatch.setenv("FLIGHT_PLANNER_LOG_FILE", str(tmp_path / "planner.log"))

        config = PlannerConfig.from_env()

        assert config.routes_path == tmp_path / "saved.csv"
        assert config.log_level == "debug"
        assert config.log_file == tmp_path / "planner.log"

    def test_blank_values_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("FLIGHT_PLANNER_FLIGHTS_FILE", "  ")
        assert PlannerConfig.from_env().flights_file == "flights.csv"

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            PlannerConfig(log_level="LOUD")


class TestSetupLogging:
    def test_repeat_calls_do_not_stack_handlers(self, restore_root_logger):
        setup_logging("INFO")
        count = len(restore_root_logger.handlers)
        setup_logging("DEBUG")

        assert len(restore_root_logger.handlers) == count
        assert restore_root_logger.level == logging.DEBUG

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "planner.log"
        setup_logging("WARNING", log_file)

        logging.getLogger("src.flight_planner.test").warning("written to file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_rerun_drops_previous_file_handler(self, restore_root_logger, tmp_path):
        setup_logging("INFO", tmp_path / "first.log")
        setup_logging("INFO")

        file_handlers = [
            h for h in restore_root_logger.handlers if isinstance(h, logging.FileHandler)
        ]
        assert file_handlers == []

    def test_foreign_handlers_are_kept(self, restore_root_logger):
        foreign = logging.NullHandler()
        restore_root_logger.addHandler(foreign)

        setup_logging("INFO")
        setup_logging("INFO")

        assert foreign in restore_root_logger.handlers
