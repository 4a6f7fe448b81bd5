"""
Coefficients of a*x^2 + b*xy + c*y^2 + d*x + e*y + f = 0, as a 6-tuple (a, b, c, d, e, f).

Transforms are expressed as changes of coordinates:
    translate(coeffs, h, k): new origin at (h, k), i.e. x -> x + h, y -> y + k
    rotate(coeffs, theta):   axes rotated by theta, i.e. (x, y) -> R(theta) @ (x, y)
so that a point p in the new coordinates is R(theta) @ p + (h, k) in the old ones.
"""

import logging
import numpy as np
from common.utils.typings import *
from common.utils.linalg import rotation_matrix
from conics.config import cfg
from conics.conic_errors import SingularSystemError, InvalidConicError

logger = logging.getLogger(__name__)


def evaluate(coeffs, x, y):
    A, B, C, D, E, F = coeffs
    z = A * x ** 2 + B * x * y + C * y ** 2 + D * x + E * y + F
    return z


def quadratic_form(coeffs) -> NpMatrix:
    A, B, C = coeffs[:3]
    return np.array([[A, B / 2], [B / 2, C]], float)


def homogeneous_matrix(coeffs) -> NpMatrix:
    """ symmetric M s.t. [x, y, 1] @ M @ [x, y, 1] == evaluate(coeffs, x, y) """
    A, B, C, D, E, F = coeffs
    return np.array([[A, B / 2, D / 2], [B / 2, C, E / 2], [D / 2, E / 2, F]], float)


def from_homogeneous(M: NpMatrix) -> Coeffs:
    assert M.shape == (3, 3)
    return (float(M[0, 0]), float(M[0, 1] + M[1, 0]), float(M[1, 1]),
            float(M[0, 2] + M[2, 0]), float(M[1, 2] + M[2, 1]), float(M[2, 2]))


def normalize(coeffs) -> Coeffs:
    """ scale s.t. max(|a|, |b|, |c|) == 1. the locus is unchanged. """
    scale = np.max(np.abs(coeffs[:3]))
    if scale == 0:
        return tuple(float(c) for c in coeffs)
    return tuple(float(c / scale) for c in coeffs)


def is_zero(x: float, tol: float = None) -> bool:
    return abs(x) <= (cfg.tol.zero if tol is None else tol)


def is_valid(coeffs) -> bool:
    return any(c != 0 for c in coeffs[:3])


def is_central(coeffs, tol: float = None) -> bool:
    """ quadratic form is non singular -> unique center """
    return not is_zero(np.linalg.det(quadratic_form(normalize(coeffs))), tol)


def translate(coeffs, h: float, k: float) -> Coeffs:
    A, B, C, D, E, F = coeffs
    D_ = 2 * A * h + B * k + D
    E_ = 2 * C * k + B * h + E
    F_ = evaluate(coeffs, h, k)
    return A, B, C, D_, E_, F_


def rotate(coeffs, theta: float) -> Coeffs:
    A, B, C, D, E, F = coeffs
    R = rotation_matrix(theta)
    Q = R.T @ quadratic_form(coeffs) @ R
    L = R.T @ np.array([D, E], float)
    A_, B_, C_ = Q[0, 0], 2 * Q[0, 1], Q[1, 1]
    scale = max(1., abs(A), abs(B), abs(C))
    assert abs((A_ + C_) - (A + C)) <= cfg.tol.verify * scale, "Rotation changed the trace of the quadratic form"
    return float(A_), float(B_), float(C_), float(L[0]), float(L[1]), float(F)


def change_basis(coeffs, H: NpMatrix) -> Coeffs:
    """ coefficients in new coordinates, given the homogeneous map H: new -> old """
    M = homogeneous_matrix(coeffs)
    return from_homogeneous(H.T @ M @ H)


def center(coeffs, tol: float = None) -> tuple[float, float]:
    """ (h, k) solving Q @ (h, k) = -(d, e) / 2 """
    _check_valid(coeffs)
    if not is_central(coeffs, tol):
        raise SingularSystemError(f"Singular quadratic form, no unique center. coeffs={coeffs}")
    h, k = np.linalg.solve(quadratic_form(coeffs), -.5 * np.array(coeffs[3:5], float))
    return float(h), float(k)


def rotation_theta(coeffs, tol: float = None) -> float:
    """ rotation angle that eliminates the cross term """
    A, B, C = normalize(coeffs)[:3]
    if is_zero(B, tol):
        return 0.
    if is_zero(A - C, tol):
        return np.pi / 4
    return .5 * np.arctan2(B, A - C)


def canonical_transform(coeffs, tol: float = None) -> tuple[float, float, float]:
    """
    (h, k, theta) s.t. rotate(translate(coeffs, h, k), theta) is canonical.
    For central conics (h, k) is the center. Otherwise, it is the vertex (parabola),
    or a point on the middle line (parallel, coincident, or imaginary lines).
    """
    _check_valid(coeffs)
    theta = rotation_theta(coeffs, tol)
    try:
        h, k = center(coeffs, tol)
    except SingularSystemError:
        logger.debug("No unique center, translating along the symmetry axis instead")
        vertex = _vertex_in_rotated(rotate(coeffs, theta), tol)
        h, k = rotation_matrix(theta) @ vertex
    return float(h), float(k), float(theta)


def canonicalize(coeffs, tol: float = None) -> tuple[Coeffs, tuple[float, float, float]]:
    """
    Returns:
        canonical_coeffs: b == 0. d == e == 0 for central conics. for non-central, one
            of a, c is zero, the linear term of the other is zero, and f == 0 for a parabola.
        (h, k, theta): the canonical transform
    """
    h, k, theta = canonical_transform(coeffs, tol)
    canonical = dict(zip('ABCDEF', rotate(translate(coeffs, h, k), theta)))

    expected_zeros = ['B']
    if is_central(coeffs, tol):
        expected_zeros += ['D', 'E']
    elif abs(canonical['A']) >= abs(canonical['C']):
        expected_zeros += ['C', 'D'] + (['E'] if is_zero(canonical['E'] / canonical['A'], tol) else ['F'])
    else:
        expected_zeros += ['A', 'E'] + (['D'] if is_zero(canonical['D'] / canonical['C'], tol) else ['F'])

    scale = max(abs(canonical['A']), abs(canonical['C']))
    for name in expected_zeros:
        residual = canonical[name]
        if abs(residual) > cfg.tol.verify * scale:
            logger.warning(f"Canonical coefficient {name.lower()}={residual:g} is not zero. coeffs={coeffs}")
        elif cfg.canonical.snap_residuals:
            canonical[name] = 0.

    if cfg.canonical.snap_residuals:
        canonical['B'] = 0.

    logger.debug(f"Canonical transform h={h:g} k={k:g} theta={theta:g}")
    return tuple(canonical[name] for name in 'ABCDEF'), (h, k, theta)


def _vertex_in_rotated(coeffs, tol: float = None) -> NpVec:
    """
    for a singular conic that is already rotated (b == 0, one of a, c is zero), the point that
    completes the square in the quadratic variable and, if the other variable appears linearly,
    zeroes the constant term.
    """
    A, _, C, D, E, F = coeffs
    if abs(A) >= abs(C):
        h = -D / (2 * A)
        k = 0. if is_zero(E / A, tol) else -(F - D ** 2 / (4 * A)) / E
    else:
        k = -E / (2 * C)
        h = 0. if is_zero(D / C, tol) else -(F - E ** 2 / (4 * C)) / D
    return np.array([h, k], float)


def _check_valid(coeffs):
    if not is_valid(coeffs):
        raise InvalidConicError(f"Not a second degree curve, a = b = c = 0. coeffs={coeffs}")
