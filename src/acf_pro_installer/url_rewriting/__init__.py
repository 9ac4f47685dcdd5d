"""
Url rewriting.

This package handles:
1. Validating that a version is exact enough for the download endpoint
2. Merging the version and the license key into download urls
"""

from .url_augmenter import add_query_param
from .version_validator import validate_version

__all__ = ["add_query_param", "validate_version"]
