"""
Pydantic data models for the operations the package manager performs on packages.

An operation is a tagged variant discriminated on ``job_type``:

    Operation = InstallOperation{package}
              | UpdateOperation{initial_package, target_package}
              | UninstallOperation{package}
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .package_ref import PackageRef


class InstallOperation(BaseModel):
    """Installation of a single package."""

    model_config = ConfigDict(populate_by_name=True)

    job_type: Literal["install"] = Field("install", alias="jobType")
    package: PackageRef


class UpdateOperation(BaseModel):
    """
    Update from one package version to another.

    Only the target package will be installed, so it is the one whose dist url matters.
    """

    model_config = ConfigDict(populate_by_name=True)

    job_type: Literal["update"] = Field("update", alias="jobType")
    initial_package: PackageRef = Field(..., alias="initialPackage")
    target_package: PackageRef = Field(..., alias="targetPackage")


class UninstallOperation(BaseModel):
    """Removal of a single package."""

    model_config = ConfigDict(populate_by_name=True)

    job_type: Literal["uninstall"] = Field("uninstall", alias="jobType")
    package: PackageRef


Operation = Annotated[
    Union[InstallOperation, UpdateOperation, UninstallOperation],
    Field(discriminator="job_type"),
]

_operation_adapter: TypeAdapter = TypeAdapter(Operation)


def parse_operation(data: dict) -> Union[InstallOperation, UpdateOperation, UninstallOperation]:
    """
    Parse an operation from a dict, selecting the variant from its job type.

    Args:
        data: Dict with a "jobType" (or "job_type") key

    Returns:
        The matching operation model
    """
    return _operation_adapter.validate_python(data)


def package_for_operation(
    operation: Union[InstallOperation, UpdateOperation, UninstallOperation],
) -> PackageRef:
    """
    Get the package an operation is about.

    Update operations carry two packages; the target (new) one is returned.
    Every other operation has exactly one package.
    """
    if isinstance(operation, UpdateOperation):
        return operation.target_package
    return operation.package
