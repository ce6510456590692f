"""Tests for ValidationConfig."""

import pytest

from form_validation import ConfigurationError, ValidationConfig


class TestValidationConfig:
    """Test configuration defaults, checks and dict round trips."""

    def test_defaults(self):
        config = ValidationConfig()
        assert config.max_concurrency is None
        assert config.offload_sync_rules is False

    @pytest.mark.parametrize("value", [0, -1, 1.5, "4", True])
    def test_invalid_max_concurrency(self, value):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationConfig(max_concurrency=value)
        assert exc_info.value.context == {"max_concurrency": value}

    def test_from_dict(self):
        config = ValidationConfig.from_dict({"max_concurrency": 3, "offload_sync_rules": True})
        assert config == ValidationConfig(max_concurrency=3, offload_sync_rules=True)
        assert config.to_dict() == {"max_concurrency": 3, "offload_sync_rules": True}

    def test_from_dict_partial(self):
        assert ValidationConfig.from_dict({}) == ValidationConfig()

    def test_from_dict_unknown_option(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationConfig.from_dict({"fail_fast": True, "timeout": 5})
        assert exc_info.value.context["unknown"] == ["fail_fast", "timeout"]
        assert "fail_fast, timeout" in str(exc_info.value)
