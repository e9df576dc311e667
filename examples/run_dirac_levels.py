"""氢样离子 Dirac 能级与 1s/2s 径向波函数

运行示例：

    python examples/run_dirac_levels.py

打印若干 Z 下的能级（束缚能 E - 1/α²），超临界时给出复数能量，
并保存 Z=1 的 1s、2s 径向波函数到 CSV。
"""
from __future__ import annotations

import numpy as np

from hydrogenic import (
    ALPHA,
    CriticalChargeError,
    energy,
    energy_complex,
    evaluate_radial,
    make_reference_solution,
    pq_norm,
    radial_grid,
)


def main() -> None:
    for Z in (1, 80, 138):
        for label in ("1s", "2s", "2p-", "2p"):
            try:
                print(f"Z={Z:3d} {label:>3s}: E - 1/α² = {energy(Z, label) - ALPHA**-2:.10f} Ha")
            except CriticalChargeError:
                print(f"Z={Z:3d} {label:>3s}: 超临界，E = {energy_complex(Z, label)}")

    r, w = radial_grid(2001, rmax=40.0)
    for label in ("1s", "2s"):
        s = make_reference_solution(1, label)
        PQ = np.array(evaluate_radial(s, r))
        print(f"{label}: ∫(P²+Q²)dr ≈ {pq_norm(PQ[:, 0], PQ[:, 1], w):.8f}")
        fn = f"dirac_{label}_Z1.csv"
        np.savetxt(fn, np.column_stack([r, PQ]), delimiter=",", header="r,P(r),Q(r)")
        print("已保存:", fn)


if __name__ == "__main__":
    main()
