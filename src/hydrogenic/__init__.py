"""hydrogenic 包
================

相对论（Dirac）氢样原子的闭式数值求值：点核库仑势 :math:`V(r)=-Z/r` 中单电子的
束缚态能级与径向波函数。

- 能级：实数分支 :func:`energy` 与复数解析延拓 :func:`energy_complex`
- 径向解：大/小分量 :math:`(P, Q)`，闭式参考解 :class:`ReferenceSolution`
- 轨道标签：``"1s"``、``"2p-"`` 等到 :math:`(n, \\kappa)` 的映射
- 辅助：径向网格、梯形权重与 :math:`\\int (P^2+Q^2)\\,dr` 归一化

所有数值均为原子单位：:math:`m=1`，:math:`\\hbar=1`，:math:`c=1/\\alpha`。

注：本项目所有文档与注释均使用中文，Docstring 采用 Sphinx + NumPy 风格，公式使用 ``:math:`` 标记。
"""

from hydrogenic.constants import ALPHA
from hydrogenic.energy import CriticalChargeError, critical_charge, energy, energy_complex
from hydrogenic.orbitals import RelativisticOrbital, parse_orbital
from hydrogenic.dirac import (
    DiracSolution,
    EvalConfig,
    ReferenceSolution,
    evaluate_radial,
    make_reference_solution,
    make_solution,
)
from hydrogenic.grid import radial_grid, trapezoid_weights
from hydrogenic.utils import pq_norm, normalize_pq

__all__ = [
    "ALPHA",
    "CriticalChargeError",
    "critical_charge",
    "energy",
    "energy_complex",
    "RelativisticOrbital",
    "parse_orbital",
    "DiracSolution",
    "EvalConfig",
    "ReferenceSolution",
    "evaluate_radial",
    "make_reference_solution",
    "make_solution",
    "radial_grid",
    "trapezoid_weights",
    "pq_norm",
    "normalize_pq",
]

__version__ = "0.1.0"
