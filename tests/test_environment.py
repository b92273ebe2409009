"""Unit tests for environment configuration parsing and validation."""

from image_tag_policy.environment import EnvironmentConfig


class TestFromEnv:
    """Test parsing of environment variables."""

    def test_defaults(self):
        """Test configuration with an empty environment."""
        config = EnvironmentConfig.from_env({})
        assert config.tag_pattern == "glob:*"
        assert config.strict is False
        assert config.policy_file is None
        assert config.container == ""
        assert config.annotation_prefix == "fluxcd.io/"
        assert config.log_level == "INFO"

    def test_all_values(self):
        """Test configuration with every variable set."""
        config = EnvironmentConfig.from_env({
            "TAG_PATTERN": " semver:~1.2 ",
            "STRICT_PATTERN": "TRUE",
            "POLICY_FILE": "deploy.yaml",
            "CONTAINER": "api",
            "ANNOTATION_PREFIX": "flux.weave.works/",
            "LOG_LEVEL": "debug",
        })
        assert config.tag_pattern == "semver:~1.2"
        assert config.strict is True
        assert config.policy_file == "deploy.yaml"
        assert config.container == "api"
        assert config.annotation_prefix == "flux.weave.works/"
        assert config.log_level == "debug"

    def test_blank_pattern_uses_default(self):
        """Test that a blank TAG_PATTERN falls back to match-all."""
        assert EnvironmentConfig.from_env({"TAG_PATTERN": "  "}).tag_pattern == "glob:*"


class TestValidate:
    """Test configuration validation."""

    def test_valid_configuration(self):
        """Test that the default configuration is valid."""
        assert EnvironmentConfig.from_env({}).validate() == []

    def test_invalid_pattern_allowed_when_not_strict(self):
        """Test that invalid patterns are accepted outside strict mode."""
        config = EnvironmentConfig.from_env({"TAG_PATTERN": "semver:garbage"})
        assert config.validate() == []

    def test_invalid_pattern_rejected_when_strict(self):
        """Test that strict mode rejects invalid patterns."""
        config = EnvironmentConfig.from_env({"TAG_PATTERN": "semver:garbage", "STRICT_PATTERN": "true"})
        assert config.validate() == ["Invalid TAG_PATTERN: 'semver:garbage'"]

    def test_container_requires_policy_file(self):
        """Test that CONTAINER cannot be used without POLICY_FILE."""
        config = EnvironmentConfig.from_env({"CONTAINER": "api"})
        assert "CONTAINER requires POLICY_FILE to be set" in config.validate()

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        config = EnvironmentConfig.from_env({"LOG_LEVEL": "chatty"})
        assert config.validate() == ["Invalid LOG_LEVEL 'chatty'"]
