# src/learnet/core/network/rows.py
"""Seleção de linhas usada para materializar argumentos de treino."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
import pandas as pd


def _index_array(rows: Any) -> np.ndarray:
    selector = np.asarray(rows)
    if selector.dtype == bool:
        return selector
    # lista vazia vira float64; índices precisam ser inteiros
    return selector.astype(int) if selector.size == 0 else selector


def select_rows(data: Any, rows: Any) -> Any:
    """Retorna o subconjunto `rows` de `data`; `rows=None` significa todas as linhas.

    - pandas DataFrame/Series → `iloc` (posicional)
    - numpy ndarray → indexação na primeira dimensão
    - demais sequências → slice nativo ou lista dos elementos selecionados
    """
    if rows is None:
        return data
    if isinstance(rows, range):
        rows = list(rows)

    if isinstance(data, (pd.DataFrame, pd.Series)):
        return data.iloc[rows]

    if isinstance(data, np.ndarray):
        if isinstance(rows, slice):
            return data[rows]
        return data[_index_array(rows)]

    if isinstance(rows, slice):
        return data[rows]

    selector = np.asarray(rows)
    if selector.dtype == bool:
        return [item for item, keep in zip(data, selector) if keep]
    return [data[int(i)] for i in selector]


def count_rows(data: Any) -> Optional[int]:
    """Número de linhas de `data`, ou None quando não é possível determinar."""
    shape = getattr(data, "shape", None)
    if shape:
        return int(shape[0])
    try:
        return len(data)
    except TypeError:
        return None
