# tests/modeling/test_sklearn_models.py
"""
Testes dos adapters scikit-learn.

Os testes asseguram que:
- `fit` treina um clone (o estimador original permanece não treinado)
- `update` reaproveita o fitresult quando hiperparâmetros e dados não mudam
- mudanças em hiperparâmetros ou dados levam a um novo fit
- capacidades declaradas refletem o estimador
"""

import numpy as np
import pandas as pd
import pytest
from sklearn.linear_model import LinearRegression, LogisticRegression, Ridge
from sklearn.preprocessing import StandardScaler

from learnet import UnsupportedOperationError, fit, predict, predict_mode, source, trainable, transform
from learnet.modeling import SklearnClassifier, SklearnRegressor, SklearnTransformer, data_fingerprint


@pytest.fixture
def frame():
    return pd.DataFrame({"a": [1.0, 2.0, 3.0, 4.0, 5.0], "b": [0.5, 0.1, 0.9, 0.3, 0.7]})


@pytest.fixture
def target():
    return pd.Series([1.0, 2.1, 2.9, 4.2, 5.1], name="y")


def test_data_fingerprint_is_content_based(frame):
    assert data_fingerprint(frame) == data_fingerprint(frame.copy())
    changed = frame.copy()
    changed.loc[0, "a"] = 99.0
    assert data_fingerprint(frame) != data_fingerprint(changed)
    assert data_fingerprint(np.arange(3)) != data_fingerprint(np.arange(3).reshape(3, 1))
    assert data_fingerprint(frame, frame["a"]) != data_fingerprint(frame)


def test_fit_trains_a_clone(frame, target):
    model = SklearnRegressor(LinearRegression())
    fitted, cache, report = model.fit(0, frame, target)

    assert fitted is not model.estimator
    assert not hasattr(model.estimator, "coef_")
    assert set(cache) == {"params_hash", "data_hash"}
    assert report == {"estimator": "LinearRegression", "n_samples": 5, "n_features_in": 2}


def test_update_reuses_fitresult_when_nothing_changed(frame, target):
    model = SklearnRegressor(Ridge(alpha=1.0))
    fitted, cache, _ = model.fit(0, frame, target)

    same, same_cache, report = model.update(0, fitted, cache, frame, target)
    assert same is fitted
    assert same_cache == cache
    assert report is None


def test_update_refits_on_new_params_or_data(frame, target):
    model = SklearnRegressor(Ridge(alpha=1.0))
    fitted, cache, _ = model.fit(0, frame, target)

    model.set_params(alpha=50.0)
    refitted, new_cache, report = model.update(0, fitted, cache, frame, target)
    assert refitted is not fitted
    assert refitted.alpha == 50.0
    assert new_cache["params_hash"] != cache["params_hash"]
    assert new_cache["data_hash"] == cache["data_hash"]
    assert report["n_samples"] == 5

    _, other_cache, _ = model.update(0, refitted, new_cache, frame.iloc[:3], target.iloc[:3])
    assert other_cache["data_hash"] != new_cache["data_hash"]


def test_transformer_capabilities_follow_estimator():
    scaler = SklearnTransformer(StandardScaler())
    assert scaler.operations == frozenset({"transform", "inverse_transform"})
    assert SklearnRegressor(Ridge()).operations == frozenset({"predict"})


def test_transformer_rejects_predict(frame):
    t = trainable(SklearnTransformer(StandardScaler()), frame)
    with pytest.raises(UnsupportedOperationError):
        predict(t, source(frame))


def test_classifier_reports_classes_and_predicts_mode(frame):
    labels = pd.Series([0, 0, 1, 1, 1])
    t = trainable(SklearnClassifier(LogisticRegression()), frame, labels)
    fit(t, verbosity=0)

    assert t.report["classes"] == [0, 1]
    np.testing.assert_array_equal(predict_mode(t, frame), predict(t, frame))


def test_trained_transformer_through_accessors(frame):
    t = trainable(SklearnTransformer(StandardScaler()), frame)
    fit(t, verbosity=0)

    Xs = transform(t, source(frame))()
    np.testing.assert_allclose(Xs.mean(axis=0), [0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(t.fitresult.inverse_transform(Xs), frame.to_numpy())
