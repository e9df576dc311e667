r"""Dirac 方程径向解析解
======================

束缚态旋量写作

.. math::

    \psi_{n\kappa m}(r,\theta,\varphi) = \frac{1}{r}
    \begin{pmatrix}
        P_{n\kappa}(r)\,\chi_{\kappa m}(\theta,\varphi) \\
        i\,Q_{n\kappa}(r)\,\chi_{-\kappa m}(\theta,\varphi)
    \end{pmatrix}

本模块给出大分量 :math:`P` 与小分量 :math:`Q`。

设计
====

- :class:`DiracSolution`：径向解"变体"的抽象基类，唯一能力为 ``pq(r)``。
- :class:`ReferenceSolution`：闭式解析解（Wikipedia 形式），由 ``(Z, n, kappa)`` 构造。
- :data:`SOLUTION_VARIANTS` 与 :func:`make_solution`：按名称选择变体，
  新的数值格式在此注册即可，不影响能级模块与调用方。
- :func:`evaluate_radial`：单点或逐点序列求值；序列可按块在线程池中并行。

公式中的派生量（每次调用重新计算）：

.. math::

    \gamma = \sqrt{\kappa^2 - (Z\alpha)^2},\qquad C = Z/n,\qquad \rho = 2 C r

References
----------
.. [Wiki] https://en.wikipedia.org/wiki/Hydrogen-like_atom#Solution_to_Dirac_equation
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from . import special
from .constants import ALPHA
from .energy import CriticalChargeError, energy as dirac_energy
from .orbitals import as_quantum_numbers
from .special import factorial, genlaguerre

__all__ = [
    "DiracSolution",
    "ReferenceSolution",
    "SOLUTION_VARIANTS",
    "EvalConfig",
    "make_reference_solution",
    "make_solution",
    "evaluate_radial",
]

logger = logging.getLogger(__name__)


class DiracSolution(ABC):
    """Dirac 径向解变体的公共接口。

    子类实现 :meth:`pq`：对标量 ``r`` 返回 ``(P, Q)`` 两个 ``float``，
    对数组 ``r`` 返回与之同形状的两个数组。各半径点相互独立求值。
    """

    @abstractmethod
    def pq(self, r):
        """返回 ``(P(r), Q(r))``。"""

    def __call__(self, r):
        return self.pq(r)


@dataclass(frozen=True)
class ReferenceSolution(DiracSolution):
    r"""闭式解析径向解（参考解）。

    Attributes
    ----------
    Z : float
        核电荷，要求 :math:`0 < Z < |\kappa|/\alpha`（:math:`\gamma` 为正实数）。
    n : int
        主量子数。
    kappa : int
        相对论角量子数。

    Notes
    -----
    分两种情形，由整数等式 ``n == -kappa`` 精确选择：

    **n = -κ**（最大 j 子壳层，无径向节点）：

    .. math::

        A &= \sqrt{\frac{C}{2n(n+\gamma)\gamma\,\Gamma(2\gamma)}} \\
        P &= A (n+\gamma) \rho^\gamma e^{-\rho/2},\qquad
        Q = A Z\alpha\, \rho^\gamma e^{-\rho/2}

    **一般情形**：使用 :math:`L_1=L^{(2\gamma+1)}_{n-|\kappa|-1}(\rho)` 与
    :math:`L_2=L^{(2\gamma+1)}_{n-|\kappa|}(\rho)`，

    .. math::

        P &= A \rho^\gamma e^{-\rho/2}\left[Z\alpha\rho L_1
             + (\gamma-\kappa)\left(\frac{\gamma}{\alpha^2}-\kappa E\right)\frac{\alpha}{C} L_2\right] \\
        Q &= A \rho^\gamma e^{-\rho/2}\left[(\gamma-\kappa)\rho L_1
             + Z\alpha\left(\frac{\gamma}{\alpha^2}-\kappa E\right)\frac{\alpha}{C} L_2\right]

    归一化常数见 :meth:`normalization`。
    """

    Z: float
    n: int
    kappa: int

    def __post_init__(self):
        if self.Z <= 0:
            raise ValueError(f"参考解要求 Z > 0，当前值: {self.Z}")
        if self.kappa**2 < (self.Z * ALPHA) ** 2:
            raise CriticalChargeError(self.Z, self.kappa)

    @property
    def stretched(self) -> bool:
        """是否为 ``n == -kappa`` 的无节点情形。"""
        return self.n == -self.kappa

    @property
    def energy(self) -> float:
        """实数分支能量 :math:`E_{n\\kappa}(Z)`。"""
        return dirac_energy(self.Z, self.n, self.kappa)

    @property
    def gamma(self) -> float:
        r""":math:`\gamma = \sqrt{\kappa^2 - Z^2\alpha^2}`。"""
        return float(np.sqrt(self.kappa**2 - (self.Z * ALPHA) ** 2))

    @property
    def decay_constant(self) -> float:
        r"""径向衰减常数 :math:`C = Z/n`（:math:`\mu=1,\ \hbar=1,\ \alpha c^2/c=1`）。"""
        return self.Z / self.n

    def normalization(self) -> float:
        """归一化常数 :math:`A`。"""
        Z, n, k = self.Z, self.n, self.kappa
        C, g = self.decay_constant, self.gamma
        if self.stretched:
            return float(np.sqrt(C / (2 * n * (n + g) * g * special.gamma(2 * g))))
        nr = n - abs(k)
        x = ALPHA**2 * self.energy * k / g
        return float(
            np.sqrt(
                0.5
                * (C / (nr + g))
                * (factorial(nr - 1) / special.gamma(nr + 2 * g + 1))
                * (x**2 + x)
            )
            / np.sqrt(2 * k * (k - g))
        )

    def pq(self, r):
        r_arr = np.asarray(r, dtype=float)
        if np.any(r_arr < 0):
            raise ValueError("半径 r 必须非负")
        Z, n, k = self.Z, self.n, self.kappa
        C, g = self.decay_constant, self.gamma
        A = self.normalization()
        rho = 2.0 * C * r_arr
        envelope = rho**g * np.exp(-rho / 2)

        if self.stretched:
            P = A * (n + g) * envelope
            Q = A * Z * ALPHA * envelope
        else:
            E = self.energy
            nr = n - abs(k)
            L1 = genlaguerre(nr - 1, 2 * g + 1, rho)
            L2 = genlaguerre(nr, 2 * g + 1, rho)
            tail = (g / ALPHA**2 - k * E) * L2 * ALPHA / C
            P = A * envelope * (Z * ALPHA * rho * L1 + (g - k) * tail)
            Q = A * envelope * ((g - k) * rho * L1 + Z * ALPHA * tail)

        if r_arr.ndim == 0:
            return float(P), float(Q)
        return P, Q


# 径向解变体注册表：名称 -> 构造器 (Z, n, kappa)
SOLUTION_VARIANTS: dict[str, type[DiracSolution]] = {
    "reference": ReferenceSolution,
}


def make_solution(kind: str, Z: float, n, kappa: int | None = None) -> DiracSolution:
    """按名称构造径向解变体。

    Parameters
    ----------
    kind : str
        :data:`SOLUTION_VARIANTS` 中的名称，如 ``"reference"``。
    Z : float
        核电荷。
    n, kappa
        量子数，或以轨道标签/描述符代替（此时省略 ``kappa``）。
    """
    try:
        cls = SOLUTION_VARIANTS[kind]
    except KeyError:
        raise ValueError(
            f"未知的径向解变体 {kind!r}，可选: {sorted(SOLUTION_VARIANTS)}"
        ) from None
    n, kappa = as_quantum_numbers(n, kappa)
    solution = cls(float(Z), n, kappa)
    logger.debug("构造径向解 %s: Z=%s n=%d kappa=%d", kind, Z, n, kappa)
    return solution


def make_reference_solution(Z: float, n, kappa: int | None = None) -> ReferenceSolution:
    """构造闭式参考解，等价于 ``make_solution("reference", Z, n, kappa)``。"""
    return make_solution("reference", Z, n, kappa)


@dataclass(frozen=True)
class EvalConfig:
    r"""序列求值配置。

    Attributes
    ----------
    max_workers : int | None
        线程数；``None`` 或 1 表示串行。
    chunk_size : int
        每块半径点数（块内向量化求值）。
    """

    max_workers: int | None = None
    chunk_size: int = 4096

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers 必须 >= 1，当前值: {self.max_workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size 必须 >= 1，当前值: {self.chunk_size}")

    @classmethod
    def from_env(cls) -> "EvalConfig":
        """从环境变量 ``HYDROGENIC_MAX_WORKERS`` / ``HYDROGENIC_CHUNK_SIZE`` 读取配置。"""
        workers = os.environ.get("HYDROGENIC_MAX_WORKERS")
        chunk = os.environ.get("HYDROGENIC_CHUNK_SIZE")
        return cls(
            max_workers=int(workers) if workers else None,
            chunk_size=int(chunk) if chunk else cls.chunk_size,
        )


def evaluate_radial(
    solution: DiracSolution,
    r: float | Sequence[float] | np.ndarray,
    config: EvalConfig | None = None,
):
    """求径向解在一个或一组半径处的 ``(P, Q)``。

    Parameters
    ----------
    solution : DiracSolution
        径向解变体实例。
    r : float or sequence of float
        半径（非负）。
    config : EvalConfig, optional
        序列求值配置；默认 :meth:`EvalConfig.from_env`。

    Returns
    -------
    tuple[float, float] or list[tuple[float, float]]
        标量输入返回单个 ``(P, Q)``；序列输入返回等长、同序的 ``(P, Q)`` 列表。

    Notes
    -----
    各半径点独立求值，不共享可变状态；分块并行后按原顺序拼接。
    """
    if np.ndim(r) == 0:
        return solution.pq(float(r))

    radii = np.asarray(r, dtype=float).ravel()
    if radii.size == 0:
        return []
    cfg = config if config is not None else EvalConfig.from_env()
    chunks = [radii[i:i + cfg.chunk_size] for i in range(0, radii.size, cfg.chunk_size)]
    workers = cfg.max_workers or 1

    if workers > 1 and len(chunks) > 1:
        logger.debug("并行求值 %d 个半径点：%d 块，%d 线程", radii.size, len(chunks), workers)
        with ThreadPoolExecutor(max_workers=min(workers, len(chunks))) as pool:
            parts = list(pool.map(solution.pq, chunks))
    else:
        parts = [solution.pq(chunk) for chunk in chunks]

    P = np.concatenate([p for p, _ in parts])
    Q = np.concatenate([q for _, q in parts])
    return list(zip(P.tolist(), Q.tolist()))
