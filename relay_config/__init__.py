"""
Relay Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from relay_config.settings import Settings

__all__ = ["Settings"]
