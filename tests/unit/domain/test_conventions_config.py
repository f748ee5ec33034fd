"""Tests for ConfigurationLoader."""

import logging

from clean_code_conventions.domain.config import ConfigurationLoader


class TestConfigurationLoader:
    def test_defaults(self) -> None:
        config = ConfigurationLoader({})
        assert config.disabled_rules == []
        assert config.enabled_rules is None
        assert config.jobs == 1
        assert config.severity_overrides == {}

    def test_reads_values(self) -> None:
        config = ConfigurationLoader(
            {
                "disable": ["NoPrivateModifier", "CC0004"],
                "enable": ["PublicPascalCase"],
                "jobs": 4,
                "severity": {"PublicPascalCase": "error", "NoUnderscore": "fatal"},
            }
        )
        assert config.disabled_rules == ["NoPrivateModifier", "CC0004"]
        assert config.enabled_rules == ["PublicPascalCase"]
        assert config.jobs == 4
        assert config.severity_overrides == {"PublicPascalCase": "error"}

    def test_invalid_jobs_fall_back_to_one(self) -> None:
        assert ConfigurationLoader({"jobs": 0}).jobs == 1
        assert ConfigurationLoader({"jobs": "many"}).jobs == 1

    def test_warns_about_unknown_rules(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            ConfigurationLoader({"disable": ["NoSuchRule"]})
        assert "unknown rule 'NoSuchRule'" in caplog.text

    def test_warns_about_bad_severity(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            ConfigurationLoader({"severity": {"NoUnderscore": "loud"}})
        assert "severity 'loud'" in caplog.text

    def test_build_catalogue_applies_config(self) -> None:
        config = ConfigurationLoader({"disable": ["CC0001"]})
        catalogue = config.build_catalogue(extra_disabled=("NoUnderscore",))
        assert not catalogue.is_enabled("NoPrivateModifier")
        assert not catalogue.is_enabled("NoUnderscore")
        assert catalogue.is_enabled("PrivateCamelCase")
