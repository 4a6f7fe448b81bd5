import numpy as np
from common.utils.typings import *


def quadratic_roots(qa: float, qb: float, qc: float) -> NpVec:
    """
    Roots of qa*t^2 + qb*t + qc = 0.
    Returns:
        array of two roots. complex when the discriminant is negative.
        when qa == 0 the equation is linear: (root, nan). when qa == qb == 0: (nan, nan).
    """
    if qa == 0:
        if qb == 0:
            return np.array([np.nan, np.nan])
        return np.array([-qc / qb, np.nan])

    sqrt_disc = np.lib.scimath.sqrt(qb ** 2 - 4 * qa * qc)

    # avoid cancellation: compute the larger-magnitude root first, the other via the product of roots
    q = -.5 * (qb + (np.sign(qb) if qb != 0 else 1) * sqrt_disc)
    if q == 0:
        return np.array([0., 0.])
    roots = np.array([q / qa, qc / q])
    if np.isrealobj(sqrt_disc):
        roots = np.sort(roots)
    return roots
