"""Test configuration validation."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import logging

import pytest
from unpkgify.config_validator import ConfigValidator
from unpkgify.core.config_manager import ConfigManager


class TestConfigValidator:
    """Test the ConfigValidator class."""

    def test_packaged_default_is_valid(self):
        """The shipped default.yaml passes validation."""
        validator = ConfigValidator()
        config = ConfigManager().load_package_default_config()

        assert validator.validate_config(config) == []

    def test_empty_config_is_valid(self):
        assert ConfigValidator().validate_config({}) == []

    def test_empty_sections_are_valid(self):
        config = {"cdn": None, "rules": None, "output": None, "logging": None}
        assert ConfigValidator().validate_config(config) == []

    def test_section_must_be_mapping(self):
        errors = ConfigValidator().validate_config({"cdn": "https://unpkg.com"})
        assert errors == ["'cdn' section must be a mapping"]

    @pytest.mark.parametrize("base_url", ["ftp://unpkg.com", "unpkg.com", "", 42])
    def test_invalid_base_url(self, base_url):
        errors = ConfigValidator().validate_config({"cdn": {"base_url": base_url}})
        assert any("cdn.base_url" in error for error in errors)

    def test_default_version_rules(self):
        validator = ConfigValidator()

        errors = validator.validate_config({"cdn": {"default_version": ""}})
        assert any("non-empty" in error for error in errors)

        errors = validator.validate_config({"cdn": {"default_version": "1 2"}})
        assert any("whitespace" in error for error in errors)

        assert validator.validate_config({"cdn": {"default_version": "next"}}) == []

    def test_unknown_rule(self):
        errors = ConfigValidator().validate_config({"rules": {"enabled": ["install_command", "git_clone"]}})
        assert len(errors) == 1
        assert "Unknown rule 'git_clone'" in errors[0]

    def test_non_string_rule_names(self):
        """Mappings and numbers in the rule list are reported, not raised."""
        errors = ConfigValidator().validate_config({"rules": {"enabled": [{"a": 1}, 3, "require_call"]}})
        assert errors == [
            "Rule names in 'rules.enabled' must be strings",
            "Rule names in 'rules.enabled' must be strings",
        ]

    def test_duplicate_rule(self):
        errors = ConfigValidator().validate_config({"rules": {"enabled": ["require_call", "require_call"]}})
        assert errors == ["Rule 'require_call' is listed more than once in 'rules.enabled'"]

    def test_rules_enabled_must_be_list(self):
        errors = ConfigValidator().validate_config({"rules": {"enabled": "require_call"}})
        assert errors == ["'rules.enabled' must be a list of rule names"]

    def test_empty_rule_list_is_allowed(self):
        assert ConfigValidator().validate_config({"rules": {"enabled": []}}) == []

    def test_output_section(self):
        validator = ConfigValidator()
        errors = validator.validate_config({"output": {"format": "xml", "show_labels": "yes"}})
        assert len(errors) == 2
        assert any("output.format" in error for error in errors)
        assert any("output.show_labels" in error for error in errors)

    def test_logging_section(self):
        validator = ConfigValidator()
        errors = validator.validate_config({"logging": {"level": "LOUD", "file": 3}})
        assert len(errors) == 2

        assert validator.validate_config({"logging": {"level": "debug"}}) == []

    def test_log_level(self):
        validator = ConfigValidator()
        assert validator.log_level({"level": "debug"}) == logging.DEBUG
        assert validator.log_level({}) == logging.WARNING
