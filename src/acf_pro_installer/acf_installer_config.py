"""
Configuration parameters for the ACF PRO installer plugin.
"""

import dataclasses
import inspect
import pathlib
import tomllib
from typing import Any, Dict, Union


DEFAULT_PACKAGE_NAME = "advanced-custom-fields/advanced-custom-fields-pro"
DEFAULT_PACKAGE_URL = "https://connect.advancedcustomfields.com/index.php?p=pro&a=download"
DEFAULT_KEY_ENV_VARIABLE = "ACF_PRO_KEY"
DEFAULT_SECRET_FILE_NAME = ".env"

TOML_TABLE = "acf-pro-installer"


@dataclasses.dataclass(frozen=True)
class AcfInstallerConfig:
    """
    Configuration parameters
    """

    # Name of the package whose dist url gets the version appended
    package_name: str = DEFAULT_PACKAGE_NAME
    # Download endpoint (without version and key). Downloads starting with it get the key.
    package_url: str = DEFAULT_PACKAGE_URL
    # Environment variable holding the license key
    key_env_variable: str = DEFAULT_KEY_ENV_VARIABLE
    # Optional file in the working directory with name=value defaults
    secret_file_name: str = DEFAULT_SECRET_FILE_NAME

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "AcfInstallerConfig":
        """
        Create a config from a dictionary, ignoring keys that are not parameters.
        """
        return cls(
            **{k: v for k, v in env.items() if k in inspect.signature(cls).parameters}
        )

    @classmethod
    def from_toml(cls, path: Union[str, pathlib.Path]) -> "AcfInstallerConfig":
        """
        Load the config from the [tool.acf-pro-installer] table of a TOML file.

        Args:
            path: Path to the TOML file, typically pyproject.toml

        Returns:
            The loaded config, or the defaults if the file or table is missing
        """
        path = pathlib.Path(path)
        if not path.is_file():
            return cls()

        with open(path, "rb") as f:
            data = tomllib.load(f)

        table = data.get("tool", {}).get(TOML_TABLE, {})
        # TOML keys are usually kebab-case
        return cls.from_dict({k.replace("-", "_"): v for k, v in table.items()})

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)
