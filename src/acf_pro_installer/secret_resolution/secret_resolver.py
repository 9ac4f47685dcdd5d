"""
License key resolution.

The key comes from the environment, optionally seeded from a secret file
(``.env`` by default) in the working directory. Variables that are already
set are never overwritten by the file, so secrets injected by CI take
precedence over local developer files.
"""

import logging
import os
import pathlib
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from acf_pro_installer.acf_installer_config import DEFAULT_SECRET_FILE_NAME
from acf_pro_installer.acf_installer_exceptions import MissingKeyError
from acf_pro_installer.acf_installer_logger import AcfInstallerLogger


class SecretResolver:
    """
    Resolves the license key from an injected environment and an optional secret file.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        secret_file_name: str = DEFAULT_SECRET_FILE_NAME,
        working_directory: Optional[Union[str, pathlib.Path]] = None,
        logger: Optional[AcfInstallerLogger] = None,
    ):
        """
        Initialize the secret resolver.

        Args:
            environ: Environment to read from. Defaults to a snapshot of os.environ.
            secret_file_name: Name of the optional name=value file
            working_directory: Directory the secret file is looked up in. Defaults to the cwd.
            logger: Logger for progress messages. The key itself is never logged.
        """
        self.environ: Dict[str, str] = dict(os.environ if environ is None else environ)
        self.secret_file_name = secret_file_name
        self.working_directory = pathlib.Path(working_directory or os.getcwd())
        self.logger = logger or AcfInstallerLogger()
        self._keys: Dict[str, str] = {}

    @property
    def secret_file_path(self) -> pathlib.Path:
        return self.working_directory / self.secret_file_name

    def _load_environment(self) -> Dict[str, str]:
        """
        Layer the secret file under the environment.

        Returns:
            The environment with file-provided defaults for unset variables
        """
        environment = dict(self.environ)
        path = self.secret_file_path
        if not path.is_file():
            return environment

        self.logger.log(f"Loading secret file {path}", logging.DEBUG)
        # No ${VAR} expansion: it would read the live os.environ
        for name, value in dotenv_values(path, interpolate=False).items():
            # First writer wins: explicit environment beats the file
            if value is None or name in environment:
                continue
            environment[name] = value
        return environment

    def resolve_key(self, env_var_name: str) -> str:
        """
        Get the license key stored in env_var_name.

        Args:
            env_var_name: Name of the variable holding the key

        Returns:
            The license key

        Raises:
            MissingKeyError: If the variable is unset or empty
        """
        if env_var_name in self._keys:
            return self._keys[env_var_name]

        key = self._load_environment().get(env_var_name)
        if not key:
            raise MissingKeyError(env_var_name, self.secret_file_name)

        self.logger.log(f"License key found in {env_var_name}", logging.DEBUG)
        self._keys[env_var_name] = key
        return key
