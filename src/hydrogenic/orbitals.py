from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "RelativisticOrbital",
    "parse_orbital",
    "as_quantum_numbers",
    "kappa_to_l_j",
]


# 角动量符号（跳过 j，与原子光谱惯例一致）
_L_SYMBOLS = "spdfghiklmnoqrtuv"

_LABEL_RE = re.compile(r"^\s*(\d+)([a-z])(-?)\s*$")


def kappa_to_l_j(kappa: int) -> tuple[int, float]:
    r"""由相对论角量子数 :math:`\kappa` 求 :math:`(\ell, j)`。

    :math:`\kappa<0` 对应 :math:`j=\ell+1/2`，:math:`\kappa=-(\ell+1)`；
    :math:`\kappa>0` 对应 :math:`j=\ell-1/2`，:math:`\kappa=\ell`。
    """
    if kappa == 0:
        raise ValueError("κ 不能为 0")
    l = kappa if kappa > 0 else -kappa - 1
    return int(l), abs(kappa) - 0.5


@dataclass(frozen=True)
class RelativisticOrbital:
    r"""相对论轨道描述符（仅携带量子数）

    Attributes
    ----------
    n : int
        主量子数 :math:`n \ge 1`。
    kappa : int
        相对论角量子数 :math:`\kappa \ne 0`。

    Notes
    -----
    构造时检查 :math:`n \ge \ell + 1`；数值核心本身不做此检查。
    """

    n: int
    kappa: int

    def __post_init__(self):
        if self.n < 1:
            raise ValueError(f"主量子数 n 必须 >= 1，当前值: {self.n}")
        l, _ = kappa_to_l_j(self.kappa)
        if self.n < l + 1:
            raise ValueError(f"轨道不存在: n={self.n}, l={l}（要求 n >= l+1）")

    @property
    def l(self) -> int:
        return kappa_to_l_j(self.kappa)[0]

    @property
    def j(self) -> float:
        return kappa_to_l_j(self.kappa)[1]

    @property
    def label(self) -> str:
        """人类可读标签，如 ``"2p-"``（:math:`j=\\ell-1/2` 带 ``-`` 后缀）。"""
        suffix = "-" if self.kappa > 0 else ""
        return f"{self.n}{_L_SYMBOLS[self.l]}{suffix}"

    def __str__(self) -> str:
        return self.label


def parse_orbital(label: str) -> RelativisticOrbital:
    """解析轨道标签为 :class:`RelativisticOrbital`。

    标签格式为 ``<n><l 符号>[-]``，例如 ``"1s"``、``"2p-"``、``"5p"``。
    末尾 ``-`` 选择 :math:`\\kappa=\\ell`，否则 :math:`\\kappa=-(\\ell+1)`。

    Raises
    ------
    ValueError
        标签无法解析、角动量符号未知，或 ``s-`` 这类 :math:`\\kappa=0` 组合。
    """
    m = _LABEL_RE.match(label)
    if m is None:
        raise ValueError(f"无法解析轨道标签: {label!r}")
    n_str, symbol, minus = m.groups()
    l = _L_SYMBOLS.find(symbol)
    if l < 0:
        raise ValueError(f"未知的角动量符号 {symbol!r}（标签 {label!r}）")
    if minus:
        if l == 0:
            raise ValueError(f"s 轨道不存在 j=l-1/2 分支: {label!r}")
        kappa = l
    else:
        kappa = -(l + 1)
    return RelativisticOrbital(int(n_str), kappa)


def as_quantum_numbers(orbital, kappa: int | None = None) -> tuple[int, int]:
    """把 ``(n, kappa)``、轨道描述符或标签统一成 ``(n, kappa)``。

    ``orbital`` 可以是整数 ``n``（此时必须给出 ``kappa``）、字符串标签，
    或任何带 ``n`` 与 ``kappa`` 属性的对象。
    """
    if kappa is not None:
        return int(orbital), int(kappa)
    if isinstance(orbital, str):
        orbital = parse_orbital(orbital)
    try:
        return int(orbital.n), int(orbital.kappa)
    except AttributeError:
        raise TypeError(
            f"需要 (n, kappa)、轨道标签或带 n/kappa 属性的对象，收到: {orbital!r}"
        ) from None
