from . import fact_check, image, news

__all__ = ["fact_check", "image", "news"]
