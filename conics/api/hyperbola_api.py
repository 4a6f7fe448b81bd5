import numpy as np
from common.utils.typings import *
from common.utils.linalg import vec2
from conics import conic_kinds
from conics.api.conics_api import conic_api


class hyperbola_api(conic_api):
    """ a*x^2 + c*y^2 + f = 0, with a, c of opposite signs and f != 0 """

    @staticmethod
    def kind():
        return conic_kinds.HYPERBOLA

    @staticmethod
    def center(coeffs):
        return vec2(0., 0.)

    @staticmethod
    def semi_axes(coeffs):
        """ semi axes along the canonical x and y """
        A, _, C, _, _, F = coeffs
        return float(np.sqrt(abs(F / A))), float(np.sqrt(abs(F / C)))

    @staticmethod
    def transverse_dir(coeffs) -> NpVec:
        A, _, _, _, _, F = coeffs
        return vec2(1., 0.) if -F / A > 0 else vec2(0., 1.)

    @staticmethod
    def radii(coeffs) -> tuple[float, float]:
        """ (transverse, conjugate) """
        ax, ay = hyperbola_api.semi_axes(coeffs)
        return (ax, ay) if hyperbola_api.transverse_dir(coeffs)[0] else (ay, ax)

    @staticmethod
    def vertex_pts(coeffs):
        a, _ = hyperbola_api.radii(coeffs)
        u = hyperbola_api.transverse_dir(coeffs)
        return np.array([-a * u, a * u])

    @staticmethod
    def focus_pts(coeffs):
        a, b = hyperbola_api.radii(coeffs)
        c = np.sqrt(a ** 2 + b ** 2)
        u = hyperbola_api.transverse_dir(coeffs)
        return np.array([-c * u, c * u])

    @staticmethod
    def axis(coeffs):
        return hyperbola_api.center(coeffs), hyperbola_api.transverse_dir(coeffs)

    @staticmethod
    def asymptotes(coeffs):
        ax, ay = hyperbola_api.semi_axes(coeffs)
        n = np.hypot(ax, ay)
        center = hyperbola_api.center(coeffs)
        return [(center, vec2(ax / n, ay / n)), (center, vec2(ax / n, -ay / n))]

    @staticmethod
    def eccentricity(coeffs):
        a, b = hyperbola_api.radii(coeffs)
        return float(np.sqrt(1 + (b / a) ** 2))

    @staticmethod
    def semi_latus(coeffs):
        a, b = hyperbola_api.radii(coeffs)
        return (b ** 2) / a
