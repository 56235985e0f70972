"""
Adapters scikit-learn para o contrato de Model do learnet.

Cada adapter guarda um estimador não treinado (os hiperparâmetros). O
`fit` treina um clone, de modo que o estimador original nunca é mutado e
pode ter parâmetros alterados entre chamadas (`set_params`).

`update` reaproveita o fitresult anterior quando nem os hiperparâmetros nem
os dados de treino mudaram (comparação por hash); caso contrário, refaz o
fit do zero. O cache guarda exatamente esses dois hashes.
"""

from __future__ import annotations

import hashlib
from typing import Any, Dict, Tuple

import numpy as np
import pandas as pd
from sklearn.base import clone

from learnet.core.config.hashing import compute_config_hash
from learnet.core.model import Model, Supervision
from learnet.core.network.rows import count_rows


def data_fingerprint(*args: Any) -> str:
    """SHA-256 do conteúdo de um ou mais argumentos de treino."""
    h = hashlib.sha256()
    for arg in args:
        if isinstance(arg, (pd.DataFrame, pd.Series)):
            h.update(pd.util.hash_pandas_object(arg, index=True).values.tobytes())
            if isinstance(arg, pd.DataFrame):
                h.update("|".join(map(str, arg.columns)).encode("utf-8"))
        else:
            arr = np.ascontiguousarray(np.asarray(arg))
            h.update(str((arr.shape, arr.dtype.str)).encode("utf-8"))
            if arr.dtype == object:
                h.update(repr(arr.tolist()).encode("utf-8"))
            else:
                h.update(arr.tobytes())
    return h.hexdigest()


class _SklearnModel(Model):
    def __init__(self, estimator: Any) -> None:
        self.estimator = estimator

    def params(self) -> Dict[str, Any]:
        return self.estimator.get_params(deep=False)

    def set_params(self, **params: Any) -> "_SklearnModel":
        self.estimator.set_params(**params)
        return self

    def _cache_for(self, *args: Any) -> Dict[str, str]:
        return {
            "params_hash": compute_config_hash(self.params()),
            "data_hash": data_fingerprint(*args),
        }

    def fit(self, verbosity: int, *args: Any) -> Tuple[Any, Any, Any]:
        fitted = clone(self.estimator)
        fitted.fit(*args)
        report = {
            "estimator": type(fitted).__name__,
            "n_samples": count_rows(args[0]),
            "n_features_in": getattr(fitted, "n_features_in_", None),
        }
        return fitted, self._cache_for(*args), report

    def update(self, verbosity: int, fitresult: Any, cache: Any, *args: Any) -> Tuple[Any, Any, Any]:
        if isinstance(cache, dict) and cache == self._cache_for(*args):
            return fitresult, cache, None
        return self.fit(verbosity, *args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.estimator!r})"


class SklearnRegressor(_SklearnModel):
    """Estimador supervisionado de regressão (`predict`)."""

    supervision = Supervision.SUPERVISED
    operations = frozenset({"predict"})

    def predict(self, fitresult: Any, X: Any) -> Any:
        return fitresult.predict(X)


class SklearnClassifier(_SklearnModel):
    """Classificador supervisionado; `predict_mode` é a classe mais provável."""

    supervision = Supervision.SUPERVISED
    operations = frozenset({"predict", "predict_mode"})

    def predict(self, fitresult: Any, X: Any) -> Any:
        return fitresult.predict(X)

    def predict_mode(self, fitresult: Any, X: Any) -> Any:
        return fitresult.predict(X)

    def fit(self, verbosity: int, *args: Any) -> Tuple[Any, Any, Any]:
        fitted, cache, report = super().fit(verbosity, *args)
        report["classes"] = [c.item() if hasattr(c, "item") else c for c in fitted.classes_]
        return fitted, cache, report


class SklearnTransformer(_SklearnModel):
    """Transformador não supervisionado; `inverse_transform` quando o estimador o expõe."""

    supervision = Supervision.UNSUPERVISED

    def __init__(self, estimator: Any) -> None:
        super().__init__(estimator)
        ops = {"transform"}
        if hasattr(estimator, "inverse_transform"):
            ops.add("inverse_transform")
        self.operations = frozenset(ops)

    def transform(self, fitresult: Any, X: Any) -> Any:
        return fitresult.transform(X)

    def inverse_transform(self, fitresult: Any, X: Any) -> Any:
        return fitresult.inverse_transform(X)
