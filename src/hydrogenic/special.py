"""特殊函数适配层
================

对 :mod:`scipy.special` 的薄封装，向能级与径向解模块提供：

- :func:`gamma`：Gamma 函数 :math:`\\Gamma(x)`
- :func:`genlaguerre`：广义 Laguerre 多项式 :math:`L_k^{(a)}(x)`
- :func:`factorial`：非负整数阶乘

本包不自行实现这些特殊函数。
"""

from __future__ import annotations

import numpy as np
from scipy import special as _sp

__all__ = [
    "gamma",
    "genlaguerre",
    "factorial",
]


def gamma(x):
    r"""计算 :math:`\Gamma(x)`。

    Parameters
    ----------
    x : float or numpy.ndarray
        自变量。

    Returns
    -------
    float or numpy.ndarray
        :math:`\Gamma(x)`；标量输入返回 ``float``。

    Raises
    ------
    FloatingPointError
        结果非有限（:math:`x` 落在非正整数极点上或溢出）。
    """
    value = _sp.gamma(x)
    if not np.all(np.isfinite(value)):
        raise FloatingPointError(f"Γ({x}) 不是有限值（极点或溢出）")
    if np.ndim(value) == 0:
        return float(value)
    return value


def genlaguerre(degree: int, parameter: float, x):
    r"""广义 Laguerre 多项式 :math:`L_k^{(a)}(x)` 的逐点求值。

    Parameters
    ----------
    degree : int
        多项式次数 :math:`k \ge 0`。
    parameter : float
        参数 :math:`a > -1`。
    x : float or numpy.ndarray
        求值点。

    Returns
    -------
    float or numpy.ndarray
        与 ``x`` 同形状的多项式值。
    """
    if degree < 0:
        raise ValueError(f"Laguerre 多项式次数必须非负，当前值: {degree}")
    return _sp.eval_genlaguerre(int(degree), float(parameter), x)


def factorial(k: int) -> int:
    """精确整数阶乘 :math:`k!`。"""
    if k < 0:
        raise ValueError(f"阶乘参数必须非负，当前值: {k}")
    return int(_sp.factorial(int(k), exact=True))
