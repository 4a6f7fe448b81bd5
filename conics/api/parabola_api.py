import numpy as np
from common.utils.typings import *
from common.utils.linalg import vec2
from conics import conic_kinds
from conics.api.conics_api import conic_api


class parabola_api(conic_api):
    """ a*x^2 + e*y = 0, or c*y^2 + d*x = 0. vertex at the origin. """

    @staticmethod
    def kind():
        return conic_kinds.PARABOLA

    @staticmethod
    def focal_param(coeffs) -> tuple[float, NpVec]:
        """
        p, u: signed vertex-to-focus distance and the symmetry axis direction.
        along u the curve is x^2 = 4*p*y
        """
        A, _, C, D, E, _ = coeffs
        if abs(A) >= abs(C):
            return -E / (4 * A), vec2(0., 1.)
        return -D / (4 * C), vec2(1., 0.)

    @staticmethod
    def vertex_pts(coeffs):
        return np.zeros((1, 2), float)

    @staticmethod
    def focus_pts(coeffs):
        p, u = parabola_api.focal_param(coeffs)
        return np.array([p * u])

    @staticmethod
    def focus_to_vertex_dist(coeffs) -> float:
        return abs(parabola_api.focal_param(coeffs)[0])

    @staticmethod
    def axis(coeffs):
        return vec2(0., 0.), parabola_api.focal_param(coeffs)[1]

    @staticmethod
    def eccentricity(coeffs):
        return 1.

    @staticmethod
    def semi_latus(coeffs):
        return 2 * parabola_api.focus_to_vertex_dist(coeffs)
