"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    _convert_value,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("SCREENDSL_MAX_RESOLVE_DEPTH", raising=False)
        assert get_environment(EnvVar.MAX_RESOLVE_DEPTH) == 32

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("SCREENDSL_BASE_FONT_SIZE", "20")
        assert get_environment(EnvVar.BASE_FONT_SIZE, override=12) == 12

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("SCREENDSL_FULL_RADIUS", "500")
        result = get_environment(EnvVar.FULL_RADIUS)
        assert result == 500
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_float_type_conversion(self, monkeypatch):
        """Float type conversion from string."""
        monkeypatch.setenv("SCREENDSL_SHADOW_OPACITY", "0.5")
        assert get_environment(EnvVar.SHADOW_OPACITY) == 0.5

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("SCREENDSL_BASE_FONT_SIZE", "big")
        assert get_environment(EnvVar.BASE_FONT_SIZE) == 16

    @pytest.mark.unit
    def test_invalid_float_returns_default(self, monkeypatch):
        """Invalid float value returns default."""
        monkeypatch.setenv("SCREENDSL_SHADOW_OPACITY", "dim")
        assert get_environment(EnvVar.SHADOW_OPACITY) == 0.3

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("SCREENDSL_HOME_PAGE", "landing")
        assert get_environment(EnvVar.HOME_PAGE) == "landing"


class TestConvertValue:
    """Tests for the raw string conversion helper."""

    @pytest.mark.unit
    def test_bool_values(self):
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            assert _convert_value(value, bool, None) is True
        for value in ("false", "0", "no", "FALSE", "No"):
            assert _convert_value(value, bool, None) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self):
        assert _convert_value("maybe", bool, True) is True

    @pytest.mark.unit
    def test_declared_types_are_converted(self):
        """Every variable declares a type the converter handles."""
        assert {var.value.var_type for var in EnvVar} <= {str, int, float, bool}


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.MAX_RESOLVE_DEPTH)
        assert isinstance(info, EnvConfig)
        assert info.name == "SCREENDSL_MAX_RESOLVE_DEPTH"
        assert info.default == 32
        assert info.var_type is int
        assert info.category == "resolver"

    @pytest.mark.unit
    def test_all_variables_are_prefixed(self):
        """Every variable lives in the SCREENDSL_ namespace."""
        for var in EnvVar:
            assert var.value.name.startswith("SCREENDSL_")
            assert var.value.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        style_vars = list_environment_variables("style")
        assert EnvVar.BASE_FONT_SIZE in style_vars
        assert EnvVar.FULL_RADIUS in style_vars
        assert EnvVar.LOG_LEVEL not in style_vars
