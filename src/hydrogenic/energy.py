r"""Dirac 氢样原子能级
=====================

点核库仑势 :math:`V(r)=-Z/r` 中单电子束缚态的精确相对论能量（含静能）：

.. math::

    E_{n\kappa}(Z) = \frac{1}{\alpha^2}
    \left(1+\left[\frac{Z\alpha}{n-|\kappa|+\sqrt{\Delta}}\right]^2\right)^{-1/2},
    \qquad \Delta = \kappa^2 - (Z\alpha)^2

两个入口：

- :func:`energy`：实数分支。:math:`\Delta<0`（超过临界电荷 :math:`|\kappa|/\alpha`）时
  抛出 :class:`CriticalChargeError`。
- :func:`energy_complex`：解析延拓分支。先把 :math:`\Delta` 提升为复数再取主值平方根，
  超临界时返回虚部非零的复能量（共振/不稳定态）。

两个入口都接受 ``(Z, n, kappa)`` 或 ``(Z, orbital)``，``orbital`` 为轨道标签或带
``n``/``kappa`` 属性的描述符。

Examples
--------
>>> round(energy_complex(200, "1s").imag, 6)
19962.685928
"""

from __future__ import annotations

import numpy as np

from .constants import ALPHA
from .orbitals import as_quantum_numbers

__all__ = [
    "CriticalChargeError",
    "critical_charge",
    "energy",
    "energy_complex",
]


class CriticalChargeError(ValueError):
    """核电荷超过给定 κ 的临界电荷，实数能量无定义。"""

    def __init__(self, Z: float, kappa: int):
        self.Z = Z
        self.kappa = kappa
        super().__init__(
            f"Z={Z} 超过 κ={kappa} 的临界电荷 |κ|/α={critical_charge(kappa):.6f}，"
            "实数能量无定义；如需解析延拓请使用 energy_complex"
        )


def critical_charge(kappa: int) -> float:
    r"""临界电荷 :math:`Z_c = |\kappa|/\alpha`。"""
    return abs(kappa) / ALPHA


def _delta(Z: float, kappa: int) -> float:
    return kappa**2 - (Z * ALPHA) ** 2


def _energy_from_root(Z: float, n: int, kappa: int, root):
    """由 :math:`\\sqrt{\\Delta}` 计算能量，实数与复数分支共用。"""
    shifted = n - abs(kappa) + root
    if shifted == 0:
        # Zα/shifted 发散，能量取极限值 0
        return 0.0 * shifted
    ratio = Z * ALPHA / shifted
    w = ratio * ratio
    if np.iscomplexobj(w):
        # 实部加 1，虚部（含零的符号）原样保留，决定主值平方根落在割线哪一侧
        radicand = complex(1.0 + w.real, w.imag)
    else:
        radicand = 1.0 + w
    return 1.0 / (ALPHA**2 * np.sqrt(radicand))


def energy(Z: float, n, kappa: int | None = None) -> float:
    r"""相对论能级 :math:`E_{n\kappa}(Z)`（实数分支，原子单位）。

    Parameters
    ----------
    Z : float
        核电荷 :math:`Z \ge 0`。
    n : int or str or orbital
        主量子数；或轨道标签（如 ``"2p-"``）/轨道描述符，此时省略 ``kappa``。
    kappa : int, optional
        相对论角量子数 :math:`\kappa`。

    Returns
    -------
    float
        能量，包含静能 :math:`1/\alpha^2`。

    Raises
    ------
    CriticalChargeError
        :math:`\kappa^2 < (Z\alpha)^2`。

    Notes
    -----
    - :math:`Z=0` 时 :math:`E=1/\alpha^2`。
    - :math:`Z=1/\alpha`、1s 态时 :math:`\Delta=0`，束缚能恰好抵消静能，:math:`E=0`。
    - 不检查 :math:`n \ge |\kappa|`。
    """
    n, kappa = as_quantum_numbers(n, kappa)
    delta = _delta(Z, kappa)
    if delta < 0:
        raise CriticalChargeError(Z, kappa)
    return float(_energy_from_root(Z, n, kappa, np.sqrt(delta)))


def energy_complex(Z: float, n, kappa: int | None = None) -> complex:
    r"""相对论能级的复数解析延拓。

    参数同 :func:`energy`。:math:`\Delta` 先转为复数再取主值平方根，因此对任意
    :math:`Z` 都有定义；超过临界电荷后返回虚部非零的复数。

    Examples
    --------
    >>> round(energy_complex(138, 1, -1).imag, 6)
    2231.35234
    """
    n, kappa = as_quantum_numbers(n, kappa)
    root = np.sqrt(complex(_delta(Z, kappa)))
    return complex(_energy_from_root(Z, n, kappa, root))
