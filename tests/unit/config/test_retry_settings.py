"""Unit tests for RetrySettings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses

import pytest

from aretry.backoff import ConstantBuilder, ExponentialBuilder, FibonacciBuilder
from aretry.config import EnvSettingsLoader, RetrySettings
from aretry.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


# ---------------------------------------------------------------------------
# RetrySettings
# ---------------------------------------------------------------------------


class TestRetrySettings:
    def test_defaults_build_exponential(self) -> None:
        builder = RetrySettings().to_builder()
        assert builder == ExponentialBuilder()

    def test_constant_uses_min_delay(self) -> None:
        builder = RetrySettings(strategy="constant", min_delay=0.5, max_times=2).to_builder()
        assert builder == ConstantBuilder(delay=0.5, max_times=2)

    def test_fibonacci(self) -> None:
        builder = RetrySettings(strategy="Fibonacci", max_delay=10.0).to_builder()
        assert isinstance(builder, FibonacciBuilder)
        assert builder.max_delay == 10.0

    def test_unbounded(self) -> None:
        builder = RetrySettings(unbounded=True).to_builder()
        assert isinstance(builder, ExponentialBuilder)
        assert builder.max_times is None

    def test_non_positive_max_delay_disables_cap(self) -> None:
        builder = RetrySettings(max_delay=0).to_builder()
        assert isinstance(builder, ExponentialBuilder)
        assert builder.max_delay is None

    def test_strategy_normalised(self) -> None:
        assert RetrySettings(strategy="  CONSTANT ").strategy == "constant"

    def test_unknown_strategy_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="strategy"):
            RetrySettings(strategy="linear")

    def test_negative_max_times_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="max_times"):
            RetrySettings(max_times=-2)

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"min_delay": -1.0}, "min_delay"),
            ({"min_delay": float("nan")}, "min_delay"),
            ({"min_delay": 10.0, "max_delay": 1.0}, "max_delay"),
            ({"factor": 0.5}, "factor"),
            ({"factor": float("inf")}, "factor"),
        ],
    )
    def test_invalid_values_rejected_at_construction(self, overrides: dict[str, float], field: str) -> None:
        with pytest.raises(ConfigError) as info:
            RetrySettings(**overrides)
        assert isinstance(info.value, InvalidSettingValueError)
        assert info.value.setting_name == field

    def test_constant_ignores_max_delay(self) -> None:
        settings = RetrySettings(strategy="constant", min_delay=120.0, max_delay=60.0)
        assert settings.to_builder() == ConstantBuilder(delay=120.0, max_times=3)

    def test_env_loaded_bad_factor_fails_on_load(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="factor"):
            EnvSettingsLoader({"ARETRY_FACTOR": "0.1"}).load(RetrySettings)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_all_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARETRY_STRATEGY", "constant")
        monkeypatch.setenv("ARETRY_MIN_DELAY", "0.2")
        monkeypatch.setenv("ARETRY_MAX_DELAY", "3")
        monkeypatch.setenv("ARETRY_FACTOR", "1.5")
        monkeypatch.setenv("ARETRY_MAX_TIMES", "7")
        monkeypatch.setenv("ARETRY_UNBOUNDED", "no")

        settings = EnvSettingsLoader().load(RetrySettings)

        assert settings == RetrySettings(
            strategy="constant", min_delay=0.2, max_delay=3.0, factor=1.5, max_times=7, unbounded=False
        )

    def test_missing_vars_fall_back_to_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for field in dataclasses.fields(RetrySettings):
            monkeypatch.delenv(f"ARETRY_{field.name.upper()}", raising=False)
        assert EnvSettingsLoader().load(RetrySettings) == RetrySettings()

    def test_explicit_environ_mapping(self) -> None:
        settings = EnvSettingsLoader({"ARETRY_UNBOUNDED": "true", "ARETRY_STRATEGY": "fibonacci"}).load(
            RetrySettings
        )
        assert settings.unbounded is True
        assert isinstance(settings.to_builder(), FibonacciBuilder)

    @pytest.mark.parametrize("raw", ["1", "true", "True", "yes", "on"])
    def test_truthy_bools(self, raw: str) -> None:
        assert EnvSettingsLoader({"ARETRY_UNBOUNDED": raw}).load(RetrySettings).unbounded is True

    def test_bad_number_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader({"ARETRY_MAX_TIMES": "three"}).load(RetrySettings)
        assert info.value.setting_name == "ARETRY_MAX_TIMES"

    def test_bad_bool_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"ARETRY_UNBOUNDED": "maybe"}).load(RetrySettings)

    def test_validation_errors_propagate_unwrapped(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="strategy"):
            EnvSettingsLoader({"ARETRY_STRATEGY": "random"}).load(RetrySettings)

    def test_missing_required_field(self) -> None:
        @dataclasses.dataclass
        class NeedsKey:
            _prefix = "SVC"
            key: str

        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader({}).load(NeedsKey)
        assert info.value.setting_name == "SVC_KEY"

    def test_construction_failure_wrapped(self) -> None:
        @dataclasses.dataclass
        class Broken:
            _prefix = "BRK"
            value: str = "x"

            def __post_init__(self) -> None:
                raise RuntimeError("boom")

        with pytest.raises(ConfigError, match="boom"):
            EnvSettingsLoader({}).load(Broken)
