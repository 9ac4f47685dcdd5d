"""
Pydantic data model for the packages handed to the plugin by the package manager.

A PackageRef is created and destroyed by the package manager. The plugin only
mutates its dist url in place while the package is being resolved; whatever
the dist url holds afterwards ends up in the lock file.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class PackageRef(BaseModel):
    """
    A resolved package as seen by the lifecycle hooks.

    Identity is the package name. The model is mutable: hooks rewrite the
    dist url of the instance the package manager holds.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., description="Vendor/package name")
    pretty_version: str = Field(
        ..., alias="prettyVersion", description="Version as written by the user"
    )
    dist_url: str = Field(
        ..., alias="distUrl", description="URL the package archive is downloaded from"
    )

    def to_lock_entry(self) -> Dict[str, Any]:
        """
        Convert to the dict the package manager writes to its lock file.

        Returns:
            Dictionary with camelCase keys
        """
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PackageRef":
        """Create a PackageRef from a lock file entry or any camelCase/snake_case dict."""
        return cls.model_validate(data)
