"""
Application package initializer.

The project is organised into small layers: ``core`` holds settings,
logging, errors, validation and the backing store; ``schemas`` holds
the Pydantic payload models; ``services`` holds business logic; and
``api/v1/endpoints`` maps HTTP routes onto the services.
"""

from .main import app  # noqa: F401
