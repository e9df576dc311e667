"""物理常量集中维护
==================

本包使用原子单位制：电子质量 :math:`m=1`，:math:`\\hbar=1`，光速 :math:`c=1/\\alpha`。

参考来源：CODATA 2014 推荐值。
"""

from __future__ import annotations

__all__ = ["ALPHA"]

# 精细结构常数 α（CODATA 2014）
ALPHA = 0.0072973525664
