# tests/core/network/test_learning_node_call.py
"""
Testes de avaliação de LearningNodes.

Os testes asseguram que:
- `node()` avalia recursivamente o grafo com os dados das sources
- `node(x)` substitui `x` em todas as sources alcançadas, sem mutação
- avaliar através de um TrainableModel não treinado falha com UntrainedError
- nodes são imutáveis e `depth` reflete o caminho mais longo até uma source
"""

import pytest

from learnet import (
    InvalidNodeError,
    UntrainedError,
    fit,
    node,
    predict,
    source,
    sources,
    trainable,
    transform,
)


def test_static_node_composes_upstream_values():
    s = source([1, 2, 3])
    total = node(sum, s)
    assert total() == 6
    assert total([10, 20]) == 30


def test_substitution_reaches_every_source():
    a = source([1, 2])
    b = source([10, 20])
    added = node(lambda p, q: [x + y for x, y in zip(p, q)], a, b)
    assert added() == [11, 22]
    assert added([5, 5]) == [10, 10]
    assert a.data == [1, 2] and b.data == [10, 20]


def test_substitution_matches_temporary_replacement(doubling_model):
    s = source([1.0, 2.0, 3.0])
    t = trainable(doubling_model, s)
    n = predict(t, s)
    fit(n, verbosity=0)

    substituted = n([7.0, 8.0])
    original = s.data
    s.data = [7.0, 8.0]
    replaced = n()
    s.data = original

    assert substituted == replaced
    assert s.data == [1.0, 2.0, 3.0]


def test_call_through_untrained_trainable_fails(doubling_model):
    s = source([1.0])
    n = predict(trainable(doubling_model, s), s)
    with pytest.raises(UntrainedError) as info:
        n()
    assert info.value.details["model"] == "DoublingModel"


def test_depth_is_longest_path_to_source(centering):
    X = source([1.0, 2.0])
    u = trainable(centering, X)
    Xc = transform(u, X)
    twice = node(lambda v: v + v, Xc)
    joined = node(lambda p, q: p + q, twice, X)
    assert Xc.depth == 1
    assert twice.depth == 2
    assert joined.depth == 3


def test_learning_node_is_immutable():
    n = node(len, source([1]))
    with pytest.raises(AttributeError):
        n.depth = 99


def test_arguments_cannot_be_rewired(centering):
    """Argumentos são fixados na construção: nenhum node passa a depender de si mesmo."""
    s = source([1.0, 2.0])
    t = trainable(centering, s)
    n = transform(t, s)
    with pytest.raises(AttributeError):
        n._args = (n,)
    with pytest.raises(AttributeError):
        t.args = (n,)
    assert isinstance(n.args, tuple) and n.args == (s,)
    assert t.args == (s,)


def test_node_requires_node_arguments():
    with pytest.raises(InvalidNodeError):
        node(len, [1, 2, 3])
    with pytest.raises(InvalidNodeError):
        node(len)


def test_sources_follow_data_edges_only(centered_network):
    yhat = centered_network["yhat"]
    assert sources(yhat) == [centered_network["X"]]
