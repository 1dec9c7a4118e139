"""Word Frontend Service clients module.

Contains the HTTP client for the backend definitions API.
"""

from services.word_frontend_service.clients.definitions_client import DefinitionsClientImpl

__all__ = ["DefinitionsClientImpl"]
