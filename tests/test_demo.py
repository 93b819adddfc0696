"""Tests for the demonstrations and the main entry point"""
import pytest

import main
from config import settings
from src.sorting import format_sequence, run_demonstrations
from src.sorting.demo import (
    demonstrate_parameterized,
    demonstrate_strategy,
    demonstrate_template_method,
)


class TestDemonstrations:
    def test_template_method(self, demo_data):
        assert demonstrate_template_method(demo_data) == [1, 2, 5, 9]

    def test_strategy(self, demo_data):
        assert demonstrate_strategy(demo_data) == [9, 5, 2, 1]

    def test_parameterized(self, demo_data):
        assert demonstrate_parameterized(demo_data) == [1, 2, 5, 9]

    def test_input_is_not_mutated(self, demo_data):
        run_demonstrations(demo_data)
        assert demo_data == [5, 2, 9, 1]

    def test_run_order_and_results(self, demo_data):
        results = run_demonstrations(demo_data)
        assert results == [
            ("template_method", [1, 2, 5, 9]),
            ("strategy", [9, 5, 2, 1]),
            ("parameterized", [1, 2, 5, 9]),
        ]

    def test_format_sequence(self):
        assert format_sequence([1, 2, 5, 9]) == "1 2 5 9"
        assert format_sequence([]) == ""


class TestSettings:
    def test_defaults_are_valid(self):
        assert settings.validate_settings()
        assert settings.DEMO_DATA == [5, 2, 9, 1]

    def test_rejects_non_integer_data(self, monkeypatch):
        monkeypatch.setattr(settings, "DEMO_DATA", [1, "2"])
        with pytest.raises(ValueError):
            settings.validate_settings()

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setattr(settings, "LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            settings.validate_settings()


class TestMain:
    def test_prints_three_lines(self, capsys):
        assert main.main() == 0
        captured = capsys.readouterr()
        assert captured.out == "1 2 5 9\n9 5 2 1\n1 2 5 9\n"

    def test_unknown_log_level_rejected_before_logging_setup(self, monkeypatch):
        monkeypatch.setattr(settings, "LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            main.main()

    def test_run_exits_successfully(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.run()
        assert exc.value.code == 0
        assert capsys.readouterr().out.splitlines() == ["1 2 5 9", "9 5 2 1", "1 2 5 9"]

    def test_keyboard_interrupt_exits_cleanly(self, monkeypatch):
        def interrupted():
            raise KeyboardInterrupt

        monkeypatch.setattr(main, "main", interrupted)
        with pytest.raises(SystemExit) as exc:
            main.run()
        assert exc.value.code == 0
