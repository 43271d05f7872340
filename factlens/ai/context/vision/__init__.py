from .google_vision_analyzer import GoogleVisionAnalyzer, load_vision_credentials

__all__ = ["GoogleVisionAnalyzer", "load_vision_credentials"]
