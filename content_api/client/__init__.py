"""Client for the content platform API."""

from content_api.client.api_client import ContentAPIClient, ContentAPIError
from content_api.client.session import ContentSession

__all__ = ["ContentAPIClient", "ContentAPIError", "ContentSession"]
