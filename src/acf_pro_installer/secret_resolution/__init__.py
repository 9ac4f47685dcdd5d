"""
License key resolution from the environment and an optional secret file.
"""

from .secret_resolver import SecretResolver

__all__ = ["SecretResolver"]
