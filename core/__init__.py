"""Core package for the transcript notes tool.

Holds the pure resolvers (video IDs, target directories), shared models,
filename helpers, the saved-directory store and the application settings.
"""

# Re-export convenience imports for users of `core`
from core.settings import AppSettings, settings  # noqa: F401
