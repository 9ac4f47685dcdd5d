"""
Tests for the plugin configuration and logger.
"""

import json
import logging

from acf_pro_installer.acf_installer_config import AcfInstallerConfig
from acf_pro_installer.acf_installer_logger import AcfInstallerLogger


class TestAcfInstallerConfig:
    """Tests for AcfInstallerConfig."""

    def test_defaults(self):
        """Test that the defaults target ACF PRO."""
        config = AcfInstallerConfig()
        assert config.package_name == "advanced-custom-fields/advanced-custom-fields-pro"
        assert config.package_url == "https://connect.advancedcustomfields.com/index.php?p=pro&a=download"
        assert config.key_env_variable == "ACF_PRO_KEY"
        assert config.secret_file_name == ".env"

    def test_from_dict_ignores_unknown_keys(self):
        """Test that from_dict only picks known parameters."""
        config = AcfInstallerConfig.from_dict({"key_env_variable": "MY_KEY", "unknown": 1})
        assert config.key_env_variable == "MY_KEY"
        assert config.package_name == AcfInstallerConfig().package_name

    def test_from_toml(self, tmp_path):
        """Test loading the [tool.acf-pro-installer] table."""
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "site"\n\n'
            '[tool.acf-pro-installer]\n'
            'key-env-variable = "SITE_ACF_KEY"\n'
            'secret-file-name = ".env.local"\n'
        )
        config = AcfInstallerConfig.from_toml(path)
        assert config.key_env_variable == "SITE_ACF_KEY"
        assert config.secret_file_name == ".env.local"
        assert config.package_url == AcfInstallerConfig().package_url

    def test_from_toml_without_table(self, tmp_path):
        """Test that a TOML file without the table gives the defaults."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n')
        assert AcfInstallerConfig.from_toml(path) == AcfInstallerConfig()

    def test_from_missing_toml(self, tmp_path):
        """Test that a missing file gives the defaults."""
        assert AcfInstallerConfig.from_toml(tmp_path / "missing.toml") == AcfInstallerConfig()

    def test_to_dict(self):
        """Test converting back to dict."""
        converted = AcfInstallerConfig().to_dict()
        assert AcfInstallerConfig.from_dict(converted) == AcfInstallerConfig()


class TestAcfInstallerLogger:
    """Tests for AcfInstallerLogger."""

    def test_log_line_is_json(self, caplog):
        """Test that every record is a single JSON line with caller details."""
        logger = AcfInstallerLogger()
        with caplog.at_level(logging.INFO, logger="acf_pro_installer"):
            logger.log("Pinned 'pkg'\nto 1.0.0", logging.INFO)

        line = json.loads(caplog.records[-1].getMessage())
        assert line["level"] == "INFO"
        assert line["message"] == 'Pinned "pkg" to 1.0.0'
        assert line["caller_name"] == "test_log_line_is_json"
        assert line["caller_file"] == "test_config.py"

    def test_sanitized_error_message(self, caplog):
        """Test that the sanitized error message is appended."""
        logger = AcfInstallerLogger()
        with caplog.at_level(logging.ERROR, logger="acf_pro_installer"):
            logger.log("Download failed", logging.ERROR, "bad status")

        line = json.loads(caplog.records[-1].getMessage())
        assert line["message"] == "Download failed (bad status)"
