import numpy as np
from scipy.special import ellipe
from common.utils.typings import *
from common.utils.linalg import vec2
from conics import conic_kinds
from conics.api.conics_api import conic_api


class ellipse_api(conic_api):
    """ a*x^2 + c*y^2 + f = 0, with a, c of the same sign and f of the opposite sign """

    @staticmethod
    def kind():
        return conic_kinds.ELLIPSE

    @staticmethod
    def center(coeffs):
        return vec2(0., 0.)

    @staticmethod
    def semi_axes(coeffs):
        """ semi axes along the canonical x and y """
        A, _, C, _, _, F = coeffs
        return float(np.sqrt(-F / A)), float(np.sqrt(-F / C))

    @staticmethod
    def radii(coeffs) -> tuple[float, float]:
        """ (major, minor) """
        return tuple(sorted(ellipse_api.semi_axes(coeffs), reverse=True))

    @staticmethod
    def major_dir(coeffs) -> NpVec:
        ax, ay = ellipse_api.semi_axes(coeffs)
        return vec2(1., 0.) if ax >= ay else vec2(0., 1.)

    @staticmethod
    def vertex_pts(coeffs):
        a, _ = ellipse_api.radii(coeffs)
        u = ellipse_api.major_dir(coeffs)
        return np.array([-a * u, a * u])

    @staticmethod
    def focus_to_center_dist(coeffs) -> float:
        a, b = ellipse_api.radii(coeffs)
        return float(np.sqrt(a ** 2 - b ** 2))

    @staticmethod
    def focus_pts(coeffs):
        c = ellipse_api.focus_to_center_dist(coeffs)
        u = ellipse_api.major_dir(coeffs)
        return np.array([-c * u, c * u])

    @staticmethod
    def axis(coeffs):
        return ellipse_api.center(coeffs), ellipse_api.major_dir(coeffs)

    @staticmethod
    def eccentricity(coeffs):
        a, b = ellipse_api.radii(coeffs)
        return float(np.sqrt(1 - (b / a) ** 2))

    @staticmethod
    def semi_latus(coeffs):
        a, b = ellipse_api.radii(coeffs)
        return (b ** 2) / a

    @staticmethod
    def perimeter(coeffs):
        a, _ = ellipse_api.radii(coeffs)
        e = ellipse_api.eccentricity(coeffs)
        return float(4 * a * ellipe(e ** 2))


class circle_api(ellipse_api):
    """ an ellipse whose axes, and vertices, are not unique. both foci are at the center. """

    @staticmethod
    def kind():
        return conic_kinds.CIRCLE

    @classmethod
    def vertex_pts(cls, coeffs):
        cls.unsupported('vertices')

    @classmethod
    def axis(cls, coeffs):
        cls.unsupported('axis')

    @staticmethod
    def focus_pts(coeffs):
        return np.array([circle_api.center(coeffs)])

    @staticmethod
    def radius(coeffs) -> float:
        return circle_api.radii(coeffs)[0]
