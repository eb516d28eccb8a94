import pytest

from src.paycheck_pal.paycheck_pal.core.exceptions import ValidationError
from src.paycheck_pal.paycheck_pal.payroll.pay_window import PayWindowPolicy
from src.paycheck_pal.paycheck_pal.settings.json_settings_repository import JsonSettingsRepository
from src.paycheck_pal.paycheck_pal.settings.model import PaySettings
from src.paycheck_pal.paycheck_pal.settings.service import SettingsService
from fakes import InMemorySettings


def test_defaults_need_setup():
    svc = SettingsService(InMemorySettings())
    current = svc.current()

    assert svc.needs_setup()
    assert current.wage_per_hour == 0
    assert current.pay_window == PayWindowPolicy(enabled=False, start_minutes=540, end_minutes=1080)


def test_update_wage_persists():
    repo = InMemorySettings()
    svc = SettingsService(repo)

    svc.update_wage("185.5")

    assert not svc.needs_setup()
    assert repo.settings.wage_per_hour == 185.5


@pytest.mark.parametrize("wage", [-1, "abc", None, float("nan")])
def test_update_wage_rejects_bad_values(wage):
    svc = SettingsService(InMemorySettings())
    with pytest.raises(ValidationError):
        svc.update_wage(wage)


def test_update_pay_window():
    repo = InMemorySettings(PaySettings(wage_per_hour=100))
    svc = SettingsService(repo)

    svc.update_pay_window(enabled=True, start_minutes=22 * 60, end_minutes=6 * 60)

    assert repo.settings.pay_window.spans_midnight
    assert repo.settings.wage_per_hour == 100


def test_update_pay_window_rejects_out_of_range():
    svc = SettingsService(InMemorySettings())
    with pytest.raises(ValidationError):
        svc.update_pay_window(enabled=True, start_minutes=0, end_minutes=1440)


def test_failed_save_keeps_value_in_memory():
    svc = SettingsService(InMemorySettings(fail=True))
    svc.update_wage(90)
    assert svc.current().wage_per_hour == 90


def test_json_settings_round_trip(tmp_path):
    repo = JsonSettingsRepository(tmp_path / "pay_settings.json")
    settings = PaySettings(wage_per_hour=210, pay_window=PayWindowPolicy(enabled=True, start_minutes=480, end_minutes=1020))

    repo.save(settings)

    assert JsonSettingsRepository(tmp_path / "pay_settings.json").load() == settings


def test_json_settings_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "pay_settings.json"
    path.write_text('{"wage_per_hour": 100, "pay_window_start_minutes": 5000}', encoding="utf-8")
    assert JsonSettingsRepository(path).load() == PaySettings()


def test_update_pay_window_rejects_string_flag():
    svc = SettingsService(InMemorySettings())
    with pytest.raises(ValidationError):
        svc.update_pay_window(enabled="false", start_minutes=540, end_minutes=1080)
    assert svc.current().pay_window.enabled is False
