from __future__ import annotations

import numpy as np

__all__ = [
    "pq_norm",
    "normalize_pq",
]


def pq_norm(P: np.ndarray, Q: np.ndarray, w: np.ndarray) -> float:
    r"""旋量径向部分的范数平方 :math:`\int (P^2 + Q^2)\,dr`。

    Parameters
    ----------
    P, Q : numpy.ndarray
        大、小分量在网格上的值。
    w : numpy.ndarray
        积分权重（见 :func:`hydrogenic.grid.trapezoid_weights`）。

    Returns
    -------
    float
        积分近似值。
    """
    P = np.asarray(P, dtype=float)
    Q = np.asarray(Q, dtype=float)
    if not (P.shape == Q.shape == w.shape):
        raise ValueError("P, Q, w 的形状必须一致")
    return float(np.sum(w * (P * P + Q * Q)))


def normalize_pq(P: np.ndarray, Q: np.ndarray, w: np.ndarray) -> tuple[np.ndarray, np.ndarray, float]:
    r"""把 :math:`(P, Q)` 归一化到 :math:`\int (P^2+Q^2)\,dr = 1`。

    Returns
    -------
    P_norm, Q_norm : numpy.ndarray
        归一化后的分量。
    norm : float
        原始范数 :math:`\sqrt{\int (P^2+Q^2)\,dr}`。

    Notes
    -----
    - 不包含体积因子 :math:`4\pi r^2`，:math:`P, Q` 已含 :math:`r` 因子。
    """
    norm = float(np.sqrt(max(pq_norm(P, Q, w), 1e-300)))
    return np.asarray(P) / norm, np.asarray(Q) / norm, norm
