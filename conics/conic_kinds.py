import numpy as np
from conics import conic_coeffs
from conics.config import cfg

ELLIPSE = 'ellipse'
CIRCLE = 'circle'
HYPERBOLA = 'hyperbola'
PARABOLA = 'parabola'
POINT = 'point'
PARALLEL_LINES = 'parallel_lines'
INTERSECTING_LINES = 'intersecting_lines'
COINCIDENT_LINES = 'coincident_lines'
IMAGINARY = 'imaginary'
UNDEFINED = 'undefined'

ALL_KINDS = (ELLIPSE, CIRCLE, HYPERBOLA, PARABOLA, POINT, PARALLEL_LINES,
             INTERSECTING_LINES, COINCIDENT_LINES, IMAGINARY, UNDEFINED)

DEGENERATE_KINDS = (POINT, PARALLEL_LINES, INTERSECTING_LINES, COINCIDENT_LINES)


def identify(canonical_coeffs, tol: float = None) -> str:
    """
    Classify a conic in canonical form (b == 0, see conic_coeffs.canonicalize)
    """

    if not conic_coeffs.is_valid(canonical_coeffs):
        return UNDEFINED

    A, B, C, D, E, F = conic_coeffs.normalize(canonical_coeffs)
    assert abs(B) <= cfg.tol.verify, f"Expected canonical coefficients, got b={B}"
    tol = cfg.tol.zero if tol is None else tol

    a_zero, c_zero = conic_coeffs.is_zero(A, tol), conic_coeffs.is_zero(C, tol)
    if a_zero and c_zero:
        return UNDEFINED

    M = conic_coeffs.homogeneous_matrix((A, B, C, D, E, F))

    if not (a_zero or c_zero):
        same_sign = np.sign(A) == np.sign(C)
        # det(M) / (a * c) is the constant term of the centered conic
        if conic_coeffs.is_zero(np.linalg.det(M) / (A * C), tol):
            return POINT if same_sign else INTERSECTING_LINES
        if not same_sign:
            return HYPERBOLA
        if np.sign(F) == np.sign(A):
            return IMAGINARY
        return CIRCLE if conic_coeffs.is_zero(A - C, tol) else ELLIPSE

    rank = np.linalg.matrix_rank(M, tol=tol)
    if rank == 3:
        return PARABOLA
    if rank == 1:
        return COINCIDENT_LINES
    quad_coeff = C if a_zero else A
    return PARALLEL_LINES if np.sign(F) != np.sign(quad_coeff) else IMAGINARY
