# tests/e2e/test_sklearn_network_e2e.py
"""
Teste E2E — StandardScaler + Ridge como learning network.

O resultado da rede deve coincidir com o mesmo fluxo executado
manualmente com scikit-learn, e o retreino incremental deve reaproveitar
os fitresults de sub-modelos inalterados.
"""

import numpy as np
import pandas as pd
import pytest
from sklearn.linear_model import Ridge
from sklearn.preprocessing import StandardScaler

from learnet import EntryStatus, TrainingContext, fit, predict, source, trainable, transform
from learnet.modeling import ModelRegistry


@pytest.fixture
def data():
    rng = np.random.default_rng(7)
    X = pd.DataFrame({"a": rng.normal(10, 3, 40), "b": rng.normal(-2, 0.5, 40)})
    y = pd.Series(3.0 * X["a"] - 2.0 * X["b"] + rng.normal(0, 0.1, 40), name="y")
    X_new = pd.DataFrame({"a": [9.0, 12.0], "b": [-2.5, -1.0]})
    return X, y, X_new


def _reference(X, y, X_new, alpha):
    scaler = StandardScaler().fit(X)
    ridge = Ridge(alpha=alpha).fit(scaler.transform(X), y)
    return ridge.predict(scaler.transform(X)), ridge.predict(scaler.transform(X_new))


def test_sklearn_network_matches_manual_pipeline(data):
    X_data, y_data, X_new = data
    reg = ModelRegistry.v1()

    X = source(X_data)
    y = source(y_data)
    scaler = trainable(reg.build("standard_scaler"), X)
    Xs = transform(scaler, X)
    ridge = trainable(reg.build("ridge"), Xs, y)
    yhat = predict(ridge, Xs)

    ctx = TrainingContext.new()
    assert fit(yhat, verbosity=0, ctx=ctx) is yhat
    assert ctx.last_result.with_status(EntryStatus.TRAINED) == [scaler.entry_id, ridge.entry_id]

    on_train, on_new = _reference(X_data, y_data, X_new, alpha=1.0)
    np.testing.assert_allclose(yhat(), on_train)
    np.testing.assert_allclose(yhat(X_new), on_new)
    assert ridge.report["n_samples"] == 40


def test_sklearn_network_incremental_retrain(data):
    X_data, y_data, X_new = data
    reg = ModelRegistry.v1()

    X = source(X_data)
    y = source(y_data)
    scaler = trainable(reg.build("standard_scaler"), X)
    ridge = trainable(reg.build("ridge"), transform(scaler, X), y)
    yhat = predict(ridge, transform(scaler, X))
    fit(yhat, verbosity=0)

    scaler_fitted, ridge_fitted = scaler.fitresult, ridge.fitresult
    fit(yhat, verbosity=0)
    assert scaler.fitresult is scaler_fitted
    assert ridge.fitresult is ridge_fitted

    ridge.model.set_params(alpha=25.0)
    fit(yhat, verbosity=0)
    assert scaler.fitresult is scaler_fitted
    assert ridge.fitresult is not ridge_fitted

    _, on_new = _reference(X_data, y_data, X_new, alpha=25.0)
    np.testing.assert_allclose(yhat(X_new), on_new)
