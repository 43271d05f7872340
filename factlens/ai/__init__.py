from .main_pipeline import FactCheckPipeline

__all__ = ["FactCheckPipeline"]
