"""
model clients used by the claim analysis service.
"""

from factlens.llms.gemini import create_gemini_model
from factlens.llms.zero_shot import HuggingFaceZeroShotClassifier

__all__ = ["create_gemini_model", "HuggingFaceZeroShotClassifier"]
