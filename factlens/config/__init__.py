from .settings import Settings, get_settings, MAX_UPLOAD_BYTES

__all__ = ["Settings", "get_settings", "MAX_UPLOAD_BYTES"]
