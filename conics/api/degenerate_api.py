import numpy as np
from common.utils.linalg import vec2
from conics import conic_kinds, conic_coeffs
from conics.api.conics_api import conic_api


def _is_x_quadratic(coeffs) -> bool:
    """ for non-central canonical conics: the remaining quadratic term is x^2 """
    return abs(coeffs[0]) >= abs(coeffs[2])


class point_api(conic_api):

    @staticmethod
    def kind():
        return conic_kinds.POINT

    @staticmethod
    def center(coeffs):
        return vec2(0., 0.)


class intersecting_lines_api(conic_api):
    """ a*x^2 + c*y^2 = 0, with a, c of opposite signs """

    @staticmethod
    def kind():
        return conic_kinds.INTERSECTING_LINES

    @staticmethod
    def center(coeffs):
        return vec2(0., 0.)

    @staticmethod
    def lines(coeffs):
        A, _, C = coeffs[:3]
        m = np.sqrt(-A / C)
        n = np.hypot(1, m)
        center = intersecting_lines_api.center(coeffs)
        return [(center, vec2(1 / n, m / n)), (center, vec2(1 / n, -m / n))]


class parallel_lines_api(conic_api):
    """ a*x^2 + f = 0, or c*y^2 + f = 0, with f of the opposite sign """

    @staticmethod
    def kind():
        return conic_kinds.PARALLEL_LINES

    @staticmethod
    def lines(coeffs):
        A, _, C, _, _, F = coeffs
        if _is_x_quadratic(coeffs):
            r = np.sqrt(-F / A)
            return [(vec2(-r, 0.), vec2(0., 1.)), (vec2(r, 0.), vec2(0., 1.))]
        r = np.sqrt(-F / C)
        return [(vec2(0., -r), vec2(1., 0.)), (vec2(0., r), vec2(1., 0.))]


class coincident_lines_api(conic_api):
    """ a*x^2 = 0, or c*y^2 = 0 """

    @staticmethod
    def kind():
        return conic_kinds.COINCIDENT_LINES

    @staticmethod
    def lines(coeffs):
        u = vec2(0., 1.) if _is_x_quadratic(coeffs) else vec2(1., 0.)
        return [(vec2(0., 0.), u)]


class imaginary_api(conic_api):
    """ no real points. imaginary ellipses still have a real center; imaginary parallel lines do not. """

    @staticmethod
    def kind():
        return conic_kinds.IMAGINARY

    @classmethod
    def center(cls, coeffs):
        if not conic_coeffs.is_central(coeffs):
            cls.unsupported('center')
        return vec2(0., 0.)


class undefined_api(conic_api):

    @staticmethod
    def kind():
        return conic_kinds.UNDEFINED
