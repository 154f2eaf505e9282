"""
TubeTalk Backend
GraphQL API for sharing videos and commenting on them
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
