"""
ModelRegistry v1 — catálogo determinístico de Models prontos para `trainable`.

No learnet, Models construídos a partir de scikit-learn são centralizados e
explícitos — sem inferência dinâmica nem discovery automático.

Este módulo fornece:
- ModelSpec: especificação de um Model suportado (estimador + adapter)
- ModelRegistry: ponto único de verdade para Models (v1)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Type

from sklearn.linear_model import LinearRegression, LogisticRegression, Ridge
from sklearn.preprocessing import StandardScaler

from .sklearn_models import SklearnClassifier, SklearnRegressor, SklearnTransformer


@dataclass(frozen=True)
class ModelSpec:
    """Especificação canônica de um Model suportado pelo registry."""

    model_id: str
    estimator_cls: Type[Any]
    adapter_cls: Type[Any]
    default_params: Dict[str, Any] = field(default_factory=dict)
    version: str = "v1"

    @property
    def supervision(self) -> Any:
        return self.adapter_cls.supervision

    def build(self, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Instancia o Model com default_params + overrides.

        Não treina, não valida, não inspeciona dados.
        """
        params = dict(self.default_params)
        if overrides:
            params.update(overrides)
        return self.adapter_cls(self.estimator_cls(**params))


class ModelRegistry:
    """Registry determinístico de ModelSpec.

    Extensibilidade é explícita: novos Models podem ser registrados via `register()`.
    """

    def __init__(self, specs: Optional[Iterable[ModelSpec]] = None):
        self._specs: Dict[str, ModelSpec] = {}
        if specs:
            for s in specs:
                self.register(s)

    @classmethod
    def v1(cls) -> "ModelRegistry":
        """Factory do catálogo v1 (scaler, regressões lineares, regressão logística)."""
        return cls(specs=_default_specs_v1())

    def register(self, spec: ModelSpec) -> None:
        if not isinstance(spec, ModelSpec):
            raise TypeError("spec must be a ModelSpec")
        if not isinstance(spec.model_id, str) or not spec.model_id.strip():
            raise ValueError("model_id must be a non-empty string")
        if spec.model_id in self._specs:
            raise ValueError(f"model_id already registered: {spec.model_id}")
        self._specs[spec.model_id] = spec

    def list_ids(self) -> List[str]:
        return sorted(self._specs.keys())

    def get(self, model_id: str) -> ModelSpec:
        if model_id not in self._specs:
            raise KeyError(f"unknown model_id: {model_id}")
        return self._specs[model_id]

    def build(self, model_id: str, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Instancia um Model (sem treinar)."""
        return self.get(model_id).build(overrides=overrides)


def _default_specs_v1() -> List[ModelSpec]:
    scaler = ModelSpec(
        model_id="standard_scaler",
        estimator_cls=StandardScaler,
        adapter_cls=SklearnTransformer,
    )

    linear = ModelSpec(
        model_id="linear_regression",
        estimator_cls=LinearRegression,
        adapter_cls=SklearnRegressor,
    )

    ridge = ModelSpec(
        model_id="ridge",
        estimator_cls=Ridge,
        adapter_cls=SklearnRegressor,
        default_params={"alpha": 1.0},
    )

    lr = ModelSpec(
        model_id="logistic_regression",
        estimator_cls=LogisticRegression,
        adapter_cls=SklearnClassifier,
        default_params={
            "C": 1.0,
            "max_iter": 1000,
            "solver": "lbfgs",
        },
    )

    return [scaler, linear, ridge, lr]
