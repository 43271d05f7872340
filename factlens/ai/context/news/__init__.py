from .newsapi_client import NewsApiClient

__all__ = ["NewsApiClient"]
