"""Dirac 径向解析解单元测试

测试 dirac.py 中参考解 P/Q 的边界行为、序列求值与回归值。
"""

import mpmath as mp
import numpy as np
import pytest

from hydrogenic.constants import ALPHA
from hydrogenic.dirac import (
    SOLUTION_VARIANTS,
    DiracSolution,
    EvalConfig,
    ReferenceSolution,
    evaluate_radial,
    make_reference_solution,
    make_solution,
)
from hydrogenic.energy import CriticalChargeError
from hydrogenic.grid import radial_grid
from hydrogenic.utils import pq_norm


STATES = [
    (1, 1, -1),
    (1, 2, -1),
    (1, 2, 1),
    (1, 2, -2),
    (1, 3, 2),
    (1, 3, -3),
    (26, 3, -1),
    (80, 1, -1),
    (80, 4, 3),
]


def _mp_reference_pq(Z, n, kappa, r):
    """用 mpmath 高精度独立计算闭式 P/Q（仅用于回归比对）。"""
    with mp.workdps(40):
        a = mp.mpf(ALPHA)
        Z = mp.mpf(Z)
        r = mp.mpf(r)
        g = mp.sqrt(kappa**2 - (Z * a) ** 2)
        nr = n - abs(kappa)
        E = 1 / (a**2 * mp.sqrt(1 + (Z * a / (nr + g)) ** 2))
        C = Z / n
        rho = 2 * C * r
        env = rho**g * mp.exp(-rho / 2)
        if n == -kappa:
            A = mp.sqrt(C / (2 * n * (n + g) * g * mp.gamma(2 * g)))
            return float(A * (n + g) * env), float(A * Z * a * env)
        x = a**2 * E * kappa / g
        A = mp.sqrt(
            mp.mpf("0.5") * (C / (nr + g)) * (mp.factorial(nr - 1) / mp.gamma(nr + 2 * g + 1)) * (x**2 + x)
        ) / mp.sqrt(2 * kappa * (kappa - g))
        L1 = mp.laguerre(nr - 1, 2 * g + 1, rho)
        L2 = mp.laguerre(nr, 2 * g + 1, rho)
        tail = (g / a**2 - kappa * E) * L2 * a / C
        P = A * env * (Z * a * rho * L1 + (g - kappa) * tail)
        Q = A * env * ((g - kappa) * rho * L1 + Z * a * tail)
        return float(P), float(Q)


@pytest.mark.radial
@pytest.mark.quick
@pytest.mark.parametrize("Z, n, kappa", STATES)
def test_pq_vanishes_at_origin(Z, n, kappa):
    """ρ^γ 因子 (γ>0) 保证 P(0)=Q(0)=0。"""
    s = make_reference_solution(Z, n, kappa)
    P, Q = evaluate_radial(s, 0.0)
    assert P == 0.0
    assert Q == 0.0


@pytest.mark.radial
@pytest.mark.quick
def test_scalar_evaluation_returns_float_pair():
    s = make_reference_solution(1, "1s")
    P, Q = evaluate_radial(s, 1.0)
    assert isinstance(P, float) and isinstance(Q, float)
    assert (P, Q) == s.pq(1.0) == s(1.0)


@pytest.mark.radial
@pytest.mark.quick
@pytest.mark.parametrize("Z, n, kappa", STATES)
def test_sequence_matches_pointwise(Z, n, kappa):
    s = make_reference_solution(Z, n, kappa)
    rs = [0.0, 0.01, 0.3, 1.0, 2.5, 7.0, 15.0]
    seq = evaluate_radial(s, rs)
    assert len(seq) == len(rs)
    for r, (P, Q) in zip(rs, seq):
        P1, Q1 = evaluate_radial(s, r)
        assert np.isclose(P, P1, rtol=1e-13, atol=1e-300)
        assert np.isclose(Q, Q1, rtol=1e-13, atol=1e-300)


@pytest.mark.radial
def test_threaded_evaluation_preserves_order():
    """分块并行求值与串行结果一致且顺序不变。"""
    s = make_reference_solution(1, 3, 2)
    rs = np.linspace(0.0, 40.0, 1001)[::-1]
    serial = evaluate_radial(s, rs, EvalConfig(max_workers=None, chunk_size=64))
    threaded = evaluate_radial(s, rs, EvalConfig(max_workers=4, chunk_size=37))
    assert len(threaded) == rs.size
    assert np.allclose(np.array(serial), np.array(threaded), rtol=1e-14, atol=0)
    P_vec, Q_vec = s.pq(rs)
    assert np.allclose(np.array(threaded)[:, 0], P_vec, rtol=1e-14, atol=0)
    assert np.allclose(np.array(threaded)[:, 1], Q_vec, rtol=1e-14, atol=0)


@pytest.mark.radial
def test_empty_sequence():
    s = make_reference_solution(1, 1, -1)
    assert evaluate_radial(s, []) == []


@pytest.mark.radial
@pytest.mark.quick
@pytest.mark.parametrize("Z, n, kappa", STATES)
@pytest.mark.parametrize("r", [0.05, 0.7, 2.0, 6.0])
def test_regression_against_high_precision(Z, n, kappa, r):
    """与 mpmath 高精度独立实现的闭式表达式比对。"""
    r = r / Z
    P, Q = make_reference_solution(Z, n, kappa).pq(r)
    P_ref, Q_ref = _mp_reference_pq(Z, n, kappa, r)
    assert np.isclose(P, P_ref, rtol=1e-8, atol=1e-14), f"P: {P} vs {P_ref}"
    assert np.isclose(Q, Q_ref, rtol=1e-8, atol=1e-14), f"Q: {Q} vs {Q_ref}"


@pytest.mark.radial
@pytest.mark.quick
def test_hydrogen_1s_nonrelativistic_limit():
    """Z=1, 1s（n=-κ 情形）：P ≈ 2 r e^{-r}，Q ≈ α r e^{-r}，修正为 α² 量级。"""
    s = make_reference_solution(1, 1, -1)
    assert s.stretched
    r = np.array([0.25, 0.5, 1.0, 2.0, 5.0])
    P, Q = s.pq(r)
    assert np.allclose(P, 2 * r * np.exp(-r), rtol=1e-3, atol=0)
    assert np.allclose(Q, ALPHA * r * np.exp(-r), rtol=1e-3, atol=0)


@pytest.mark.radial
@pytest.mark.quick
def test_hydrogen_2s_regression():
    """Z=1, n=2, κ=-1（一般情形）：领头阶 P ≈ ρ(4-ρ)e^{-ρ/2}/(2√2)，Q ≈ αρ(8-ρ)e^{-ρ/2}/(8√2)。"""
    s = make_reference_solution(1, 2, -1)
    assert not s.stretched
    r = np.array([0.5, 1.0, 2.0, 6.0, 10.0])  # ρ = r，避开 ρ=4 与 ρ=8 的节点
    P, Q = s.pq(r)
    P_lead = r * (4 - r) * np.exp(-r / 2) / (2 * np.sqrt(2))
    Q_lead = ALPHA * r * (8 - r) * np.exp(-r / 2) / (8 * np.sqrt(2))
    assert np.allclose(P, P_lead, rtol=1e-3, atol=0)
    assert np.allclose(Q, Q_lead, rtol=1e-3, atol=0)


@pytest.mark.radial
@pytest.mark.parametrize("Z, n", [(1, 1), (1, 2), (1, 3), (50, 1), (80, 1), (80, 2)])
def test_stretched_states_are_normalized(Z, n):
    """n=-κ 情形的闭式解严格满足 ∫(P²+Q²)dr = 1。"""
    s = make_reference_solution(Z, n, -n)
    r, w = radial_grid(40001, rmax=30.0 * n * n / Z)
    P, Q = s.pq(r)
    assert np.isclose(pq_norm(P, Q, w), 1.0, rtol=0, atol=1e-4)


@pytest.mark.radial
def test_stretched_component_ratio():
    """n=-κ 情形 Q/P = Zα/(n+γ) 与 r 无关。"""
    s = make_reference_solution(60, 2, -2)
    r = np.array([0.01, 0.1, 0.5])
    P, Q = s.pq(r)
    assert np.allclose(Q / P, 60 * ALPHA / (2 + s.gamma), rtol=1e-13)


@pytest.mark.radial
def test_hydrogen_2s_norm_close_to_one():
    s = make_reference_solution(1, "2s")
    r, w = radial_grid(40001, rmax=80.0)
    P, Q = s.pq(r)
    assert np.isclose(pq_norm(P, Q, w), 1.0, atol=1e-3)


@pytest.mark.radial
def test_derived_quantities():
    s = ReferenceSolution(10, 3, 2)
    assert np.isclose(s.gamma, np.sqrt(4 - (10 * ALPHA) ** 2))
    assert s.decay_constant == pytest.approx(10 / 3)
    assert s.normalization() > 0
    assert s.energy < ALPHA**-2


@pytest.mark.radial
@pytest.mark.quick
def test_orbital_label_constructor():
    assert make_reference_solution(5, "3p-") == ReferenceSolution(5.0, 3, 1)


@pytest.mark.radial
def test_invalid_solutions_rejected():
    with pytest.raises(ValueError, match="Z > 0"):
        make_reference_solution(0, 1, -1)
    with pytest.raises(CriticalChargeError):
        make_reference_solution(140, 1, -1)
    with pytest.raises(ValueError, match="未知的径向解变体"):
        make_solution("series", 1, 1, -1)


@pytest.mark.radial
def test_negative_radius_rejected():
    s = make_reference_solution(1, 1, -1)
    with pytest.raises(ValueError, match="非负"):
        evaluate_radial(s, [0.0, -1.0])


@pytest.mark.radial
def test_new_variant_plugs_into_evaluator(monkeypatch):
    """注册新变体后，工厂与序列求值无需改动即可使用。"""

    class HalfReference(DiracSolution):
        def __init__(self, Z, n, kappa):
            self.ref = ReferenceSolution(Z, n, kappa)

        def pq(self, r):
            P, Q = self.ref.pq(r)
            return 0.5 * P, 0.5 * Q

    monkeypatch.setitem(SOLUTION_VARIANTS, "half", HalfReference)
    s = make_solution("half", 1, "2p")
    ref = make_reference_solution(1, "2p")
    got = evaluate_radial(s, [0.5, 1.5])
    want = evaluate_radial(ref, [0.5, 1.5])
    assert np.allclose(np.array(got), 0.5 * np.array(want))


@pytest.mark.radial
def test_eval_config_from_env(monkeypatch):
    monkeypatch.setenv("HYDROGENIC_MAX_WORKERS", "3")
    monkeypatch.setenv("HYDROGENIC_CHUNK_SIZE", "128")
    cfg = EvalConfig.from_env()
    assert cfg.max_workers == 3
    assert cfg.chunk_size == 128

    monkeypatch.delenv("HYDROGENIC_MAX_WORKERS")
    monkeypatch.delenv("HYDROGENIC_CHUNK_SIZE")
    assert EvalConfig.from_env() == EvalConfig()


@pytest.mark.radial
def test_eval_config_validation():
    with pytest.raises(ValueError):
        EvalConfig(max_workers=0)
    with pytest.raises(ValueError):
        EvalConfig(chunk_size=0)
