"""
Tests for package and operation models.
"""

import json
import pathlib

import pytest
from pydantic import ValidationError

from acf_pro_installer.package_models import (
    InstallOperation,
    PackageRef,
    UninstallOperation,
    UpdateOperation,
    package_for_operation,
    parse_operation,
)


@pytest.fixture
def operations_data():
    """Load the operations of a sample install run."""
    path = pathlib.Path(__file__).parent / "data" / "operations.json"
    with open(path) as f:
        return json.load(f)["operations"]


class TestPackageRef:
    """Tests for PackageRef model."""

    def test_load_with_aliases(self, operations_data):
        """Test loading a package from camelCase keys."""
        package = PackageRef.from_dict(operations_data[0]["package"])
        assert package.name == "advanced-custom-fields/advanced-custom-fields-pro"
        assert package.pretty_version == "5.9.10"
        assert package.dist_url.startswith("https://connect.advancedcustomfields.com/")

    def test_populate_by_field_name(self):
        """Test that snake_case field names are accepted too."""
        package = PackageRef(name="a/b", pretty_version="1.0.0", dist_url="https://example.com/b.zip")
        assert package.pretty_version == "1.0.0"

    def test_dist_url_is_mutable(self):
        """Test that hooks can rewrite the dist url in place."""
        package = PackageRef(name="a/b", pretty_version="1.0.0", dist_url="https://example.com/b.zip")
        package.dist_url = "https://example.com/b.zip?t=1.0.0"
        assert package.dist_url == "https://example.com/b.zip?t=1.0.0"

    def test_to_lock_entry_uses_aliases(self, operations_data):
        """Test converting to a lock file entry."""
        package = PackageRef.from_dict(operations_data[0]["package"])
        entry = package.to_lock_entry()

        assert entry["distUrl"] == package.dist_url
        assert entry["prettyVersion"] == "5.9.10"
        # Extra keys of the package manager are kept
        assert entry["type"] == "wordpress-plugin"

    def test_missing_dist_url_is_rejected(self):
        """Test that a package without a dist url is invalid."""
        with pytest.raises(ValidationError):
            PackageRef.from_dict({"name": "a/b", "prettyVersion": "1.0.0"})


class TestOperations:
    """Tests for the operation variants."""

    def test_parse_install(self, operations_data):
        """Test that jobType install selects InstallOperation."""
        operation = parse_operation(operations_data[0])
        assert isinstance(operation, InstallOperation)
        assert operation.job_type == "install"

    def test_parse_update(self, operations_data):
        """Test that jobType update selects UpdateOperation."""
        operation = parse_operation(operations_data[1])
        assert isinstance(operation, UpdateOperation)
        assert operation.initial_package.pretty_version == "5.8.7"
        assert operation.target_package.pretty_version == "5.9.1"

    def test_parse_uninstall(self, operations_data):
        """Test that jobType uninstall selects UninstallOperation."""
        operation = parse_operation(operations_data[2])
        assert isinstance(operation, UninstallOperation)

    def test_unknown_job_type_is_rejected(self, operations_data):
        """Test that an unknown job type does not parse."""
        data = dict(operations_data[0], jobType="markAliasInstalled")
        with pytest.raises(ValidationError):
            parse_operation(data)

    def test_package_for_install(self, operations_data):
        """Test that an install operation yields its package."""
        operation = parse_operation(operations_data[0])
        assert package_for_operation(operation) is operation.package

    def test_package_for_update_is_target(self, operations_data):
        """Test that an update operation yields the target package, not the initial one."""
        operation = parse_operation(operations_data[1])
        package = package_for_operation(operation)
        assert package is operation.target_package
        assert package.pretty_version == "5.9.1"

    def test_package_for_uninstall(self, operations_data):
        """Test that an uninstall operation yields its package."""
        operation = parse_operation(operations_data[2])
        assert package_for_operation(operation).name == "wpackagist-plugin/query-monitor"

    def test_default_job_type(self):
        """Test that variants built in code get their job type by default."""
        package = PackageRef(name="a/b", pretty_version="1.0.0", dist_url="https://example.com/b.zip")
        assert InstallOperation(package=package).job_type == "install"
        assert UpdateOperation(initial_package=package, target_package=package).job_type == "update"
