"""Tests for pluggable configuration validators."""

from repository_locator.config import (
    ConfigError,
    ConfigValidator,
    RelativePathsValidator,
    RepositoryValidator,
    get_validator,
    list_validators,
    register_validator,
    validate_config_with_validators,
)


class TestConfigError:
    """Tests for ConfigError dataclass."""

    def test_str_without_section(self):
        """Test string representation without section."""
        error = ConfigError("field_name", "error message")
        assert str(error) == "field_name: error message"

    def test_str_with_section(self):
        """Test string representation with section."""
        error = ConfigError("URL", "error message", "REPOSITORY")
        assert str(error) == "REPOSITORY.URL: error message"


class TestValidatorRegistry:
    """Tests for validator registry."""

    def test_list_validators(self):
        """Test listing registered validators."""
        validators = list_validators()
        assert "REPOSITORY" in validators
        assert "REPOSITORY.RELATIVE_PATHS" in validators

    def test_get_validator_exists(self):
        """Test getting a registered validator."""
        assert isinstance(get_validator("REPOSITORY"), RepositoryValidator)
        assert isinstance(get_validator("REPOSITORY.RELATIVE_PATHS"), RelativePathsValidator)

    def test_get_validator_not_exists(self):
        """Test getting a non-existent validator."""
        assert get_validator("NONEXISTENT") is None

    def test_register_custom_validator(self):
        """Test registering a custom validator."""

        @register_validator("CUSTOM.SECTION")
        class CustomValidator(ConfigValidator):
            def validate(self, config):
                return []

        try:
            assert "CUSTOM.SECTION" in list_validators()
            assert isinstance(get_validator("CUSTOM.SECTION"), CustomValidator)
        finally:
            # Clean up
            from repository_locator.config.validators import _VALIDATOR_REGISTRY

            del _VALIDATOR_REGISTRY["CUSTOM.SECTION"]


class TestRepositoryValidator:
    """Tests for RepositoryValidator."""

    def test_valid_config(self):
        """Test a complete section has no errors."""
        config = {"URL": "file:///srv/repo", "TYPE": "file", "RELATIVE_PATHS": {"SEGMENT_AWARE": True}}
        assert RepositoryValidator().validate(config) == []

    def test_missing_url(self):
        """Test a missing URL is reported."""
        errors = RepositoryValidator().validate({})
        assert errors == [ConfigError("URL", "Required field missing", "REPOSITORY")]

    def test_blank_url(self):
        """Test blank or non-string URLs are reported."""
        assert len(RepositoryValidator().validate({"URL": "  "})) == 1
        assert len(RepositoryValidator().validate({"URL": 42})) == 1

    def test_type_must_be_string(self):
        """Test a non-string TYPE is reported."""
        errors = RepositoryValidator().validate({"URL": "/srv/repo", "TYPE": 1})
        assert errors == [ConfigError("TYPE", "Must be a string", "REPOSITORY")]

    def test_not_a_mapping(self):
        """Test a section that is not a mapping is reported."""
        errors = RepositoryValidator().validate(None)
        assert errors == [ConfigError("REPOSITORY", "Must be a mapping")]

    def test_delegates_relative_paths(self):
        """Test RELATIVE_PATHS errors are included."""
        errors = RepositoryValidator().validate({"URL": "/srv/repo", "RELATIVE_PATHS": {"SEGMENT_AWARE": 1}})
        assert errors == [ConfigError("SEGMENT_AWARE", "Must be true or false", "REPOSITORY.RELATIVE_PATHS")]


class TestRelativePathsValidator:
    """Tests for RelativePathsValidator."""

    def test_empty_section(self):
        """Test an empty section is valid."""
        assert RelativePathsValidator().validate({}) == []

    def test_not_a_mapping(self):
        """Test a section that is not a mapping is reported."""
        errors = RelativePathsValidator().validate(True)
        assert errors == [ConfigError("RELATIVE_PATHS", "Must be a mapping", "REPOSITORY")]


class TestValidateConfigWithValidators:
    """Tests for the main validation function."""

    def test_missing_section(self):
        """Test a missing REPOSITORY section is reported."""
        errors = validate_config_with_validators({})
        assert errors == [ConfigError("REPOSITORY", "Required section missing")]

    def test_valid_config(self):
        """Test a valid configuration has no errors."""
        assert validate_config_with_validators({"REPOSITORY": {"URL": "/srv/repo"}}) == []
