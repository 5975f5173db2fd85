"""Tests for configuration loading."""

from datetime import date

from pathway_kernel.config import bundled_holidays, load_config, read_holiday_file
from pathway_kernel.deadlines.holidays import HolidayCalendar
from pathway_kernel.models.config import KernelConfig


class TestHolidayFiles:
    def test_bundled_calendar(self):
        holidays = bundled_holidays()
        assert date(2025, 4, 18) in holidays
        assert date(2025, 12, 26) in holidays
        assert holidays == sorted(holidays)

    def test_bare_list(self, tmp_path):
        path = tmp_path / "holidays.yaml"
        path.write_text("- 2030-01-01\n- '2030-12-25'\n")
        assert read_holiday_file(path) == [date(2030, 1, 1), date(2030, 12, 25)]

    def test_mapping(self, tmp_path):
        path = tmp_path / "holidays.yaml"
        path.write_text("division: scotland\ndates:\n  - 2030-01-02\n")
        assert read_holiday_file(path) == [date(2030, 1, 2)]


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PATHWAY_KERNEL_CONFIG", raising=False)
        monkeypatch.delenv("PATHWAY_KERNEL_HOLIDAYS", raising=False)
        config = load_config(str(tmp_path / "missing.yaml"))
        assert config.urgent_threshold_days == 30
        assert config.holiday_division == "england-and-wales"
        assert config.bank_holidays == bundled_holidays()

    def test_yaml_settings(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PATHWAY_KERNEL_HOLIDAYS", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("urgent_threshold_days: 14\n")
        assert load_config(str(path)).urgent_threshold_days == 14

    def test_env_config_path(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PATHWAY_KERNEL_HOLIDAYS", raising=False)
        path = tmp_path / "kernel.yaml"
        path.write_text("urgent_threshold_days: 7\n")
        monkeypatch.setenv("PATHWAY_KERNEL_CONFIG", str(path))
        assert load_config().urgent_threshold_days == 7

    def test_holidays_file_key(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PATHWAY_KERNEL_HOLIDAYS", raising=False)
        holidays = tmp_path / "holidays.yaml"
        holidays.write_text("- 2030-01-01\n")
        path = tmp_path / "config.yaml"
        path.write_text(f"holidays_file: {holidays}\n")
        assert load_config(str(path)).bank_holidays == [date(2030, 1, 1)]

    def test_holidays_env_overrides(self, tmp_path, monkeypatch):
        holidays = tmp_path / "holidays.yaml"
        holidays.write_text("- 2031-05-05\n")
        monkeypatch.setenv("PATHWAY_KERNEL_HOLIDAYS", str(holidays))
        config = load_config(str(tmp_path / "missing.yaml"))
        assert config.bank_holidays == [date(2031, 5, 5)]

    def test_calendar_from_config(self):
        config = KernelConfig(bank_holidays=[date(2030, 1, 1)], holiday_division="scotland")
        calendar = HolidayCalendar.from_config(config)
        assert calendar.division == "scotland"
        assert calendar.is_holiday(date(2030, 1, 1))
