"""Configuration module using Pydantic Settings.

Usage:
    from structcopy.config import CopierSettings

    settings = CopierSettings(strict=True)
"""

from structcopy.config.settings import CopierSettings

__all__ = [
    "CopierSettings",
]
