from .google_factcheck_client import GoogleFactCheckClient
from .articles import list_articles

__all__ = ["GoogleFactCheckClient", "list_articles"]
