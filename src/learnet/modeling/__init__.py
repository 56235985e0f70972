# src/learnet/modeling/__init__.py
"""
Modeling: Models concretos expostos pelo contrato do learnet.

    - sklearn_models  → adapters de estimadores scikit-learn
    - model_registry  → catálogo determinístico de ModelSpecs (v1)
"""

from .model_registry import ModelRegistry, ModelSpec
from .sklearn_models import SklearnClassifier, SklearnRegressor, SklearnTransformer, data_fingerprint

__all__ = [
    "ModelRegistry",
    "ModelSpec",
    "SklearnClassifier",
    "SklearnRegressor",
    "SklearnTransformer",
    "data_fingerprint",
]
