"""Unit tests for config validation errors."""

from __future__ import annotations

from kube_secrets.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from kube_secrets.kernel.errors import ApplicationError


class TestConfigError:
    def test_is_application_error(self) -> None:
        assert isinstance(ConfigError("bad"), ApplicationError)

    def test_default_code(self) -> None:
        assert ConfigError("bad").code == "config_error"

    def test_custom_code_override(self) -> None:
        assert ConfigError("msg", code="custom_cfg").code == "custom_cfg"


class TestMissingRequiredSettingError:
    def test_setting_name_stored(self) -> None:
        err = MissingRequiredSettingError("KUBE_SECRETS_MOUNT_ROOT")
        assert err.setting_name == "KUBE_SECRETS_MOUNT_ROOT"
        assert "KUBE_SECRETS_MOUNT_ROOT" in err.message
        assert err.code == "missing_required_setting"


class TestInvalidSettingValueError:
    def test_attributes(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "unknown level")
        assert isinstance(err, ConfigError)
        assert err.setting_name == "log_level"
        assert err.value == "LOUD"
        assert err.reason == "unknown level"
        assert err.message == "Setting 'log_level' has invalid value 'LOUD': unknown level"
