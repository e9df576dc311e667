import numpy as np

__all__ = [
    "radial_grid",
    "trapezoid_weights",
]


def trapezoid_weights(r: np.ndarray) -> np.ndarray:
    r"""单调递增径向网格上的梯形积分权重。

    .. math::
        \int_{r_0}^{r_{N-1}} f(r)\,\mathrm{d}r \approx \sum_i w_i f(r_i)

    每个区间 :math:`[r_i, r_{i+1}]` 的半步长分别计入两端点。

    Parameters
    ----------
    r : numpy.ndarray
        严格单调递增的一维数组。

    Returns
    -------
    numpy.ndarray
        权重 :math:`w_i`。
    """
    r = np.asarray(r, dtype=float)
    if r.ndim != 1:
        raise ValueError("r 必须是一维数组")
    if np.any(np.diff(r) <= 0):
        raise ValueError("r 必须严格单调递增")
    half = 0.5 * np.diff(r)
    w = np.zeros_like(r)
    w[:-1] += half
    w[1:] += half
    return w


def radial_grid(
    n: int,
    rmax: float,
    rmin: float = 0.0,
    kind: str = "linear",
) -> tuple[np.ndarray, np.ndarray]:
    r"""生成径向网格及其梯形权重，用于在网格上求 :math:`P, Q` 并积分。

    Parameters
    ----------
    n : int
        网格点数，要求 :math:`n \ge 2`。
    rmax : float
        径向上限。
    rmin : float, optional
        径向下限，默认 0（线性网格包含原点，便于检查 :math:`P(0)=Q(0)=0`）。
    kind : {"linear", "log"}
        ``"linear"`` 为等间距；``"log"`` 为 :math:`\ln r` 等差，要求 ``rmin > 0``，
        在核附近加密采样。

    Returns
    -------
    r : numpy.ndarray
        网格坐标。
    w : numpy.ndarray
        梯形权重。
    """
    if n < 2:
        raise ValueError("n 必须 >= 2")
    if rmin < 0:
        raise ValueError("rmin 必须 >= 0")
    if rmax <= rmin:
        raise ValueError("要求 rmax > rmin")
    if kind == "linear":
        r = np.linspace(rmin, rmax, n)
    elif kind == "log":
        if rmin <= 0:
            raise ValueError("对数网格要求 rmin > 0")
        r = np.geomspace(rmin, rmax, n)
    else:
        raise ValueError(f"未知网格类型 {kind!r}，可选 'linear' 或 'log'")
    return r, trapezoid_weights(r)
