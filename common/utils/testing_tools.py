import numpy as np

from common.utils.typings import *
from common.utils.linalg import rotate
from conics import conic_coeffs


def random_coeffs(seed: int = 0, scale: float = 5.) -> Coeffs:
    rng = np.random.default_rng(seed)
    return tuple(float(v) for v in scale * rng.standard_normal(6))


def random_rigid(seed: int = 0, max_offset: float = 10.) -> tuple[float, float, float]:
    """ random (h, k, theta) """
    rng = np.random.default_rng(seed)
    h, k = max_offset * (2 * rng.random(2) - 1)
    theta = (2 * rng.random() - 1) * np.pi
    return float(h), float(k), float(theta)


def min_dists(pts: NpPoints, ref_pts: NpPoints) -> NpVec:
    """ for each ref point, the distance to the nearest point in pts """
    pts = np.atleast_2d(pts)
    ref_pts = np.atleast_2d(ref_pts)
    return np.array([np.min(np.linalg.norm(pts - ref_pt, axis=1)) for ref_pt in ref_pts])


def is_parallel(u: NpVec, v: NpVec, tol: float = 1e-8) -> bool:
    u = np.asarray(u, float) / np.linalg.norm(u)
    v = np.asarray(v, float) / np.linalg.norm(v)
    return abs(u[0] * v[1] - u[1] * v[0]) < tol


class conicsbank:
    """
    Coefficients of conics with known geometry.
    loc = center (vertex for parabola), ang = rotation of the canonical axes, in radians.
    """

    @staticmethod
    def place(canonical_coeffs, loc=(0., 0.), ang: float = 0.) -> Coeffs:
        """ coefficients of the canonical curve, rotated by ang and then moved to loc """
        coeffs = conic_coeffs.rotate(canonical_coeffs, -ang)
        return conic_coeffs.translate(coeffs, -loc[0], -loc[1])

    @staticmethod
    def ellipse(a: float, b: float, loc=(0., 0.), ang: float = 0.) -> Coeffs:
        """ x^2/a^2 + y^2/b^2 = 1 """
        return conicsbank.place((1 / a ** 2, 0, 1 / b ** 2, 0, 0, -1), loc, ang)

    @staticmethod
    def circle(r: float, loc=(0., 0.)) -> Coeffs:
        return conicsbank.ellipse(r, r, loc)

    @staticmethod
    def hyperbola(a: float, b: float, loc=(0., 0.), ang: float = 0.) -> Coeffs:
        """ x^2/a^2 - y^2/b^2 = 1 """
        return conicsbank.place((1 / a ** 2, 0, -1 / b ** 2, 0, 0, -1), loc, ang)

    @staticmethod
    def parabola(p: float, loc=(0., 0.), ang: float = 0.) -> Coeffs:
        """ x^2 = 4py """
        return conicsbank.place((1, 0, 0, 0, -4 * p, 0), loc, ang)

    @staticmethod
    def ellipse_pts(a: float, b: float, loc=(0., 0.), ang: float = 0., n: int = 50) -> NpPoints:
        t = np.linspace(-np.pi, np.pi, n)
        x, y = rotate(a * np.cos(t), b * np.sin(t), rad=ang)
        return np.c_[x + loc[0], y + loc[1]]

    @staticmethod
    def hyperbola_pts(a: float, b: float, loc=(0., 0.), ang: float = 0., n: int = 50) -> NpPoints:
        t = np.linspace(-2, 2, n)
        sgn = np.sign(np.linspace(-1, 1, n) + .5 / n)
        x, y = rotate(sgn * a * np.cosh(t), b * np.sinh(t), rad=ang)
        return np.c_[x + loc[0], y + loc[1]]

    @staticmethod
    def parabola_pts(p: float, loc=(0., 0.), ang: float = 0., n: int = 50) -> NpPoints:
        t = np.linspace(-3, 3, n)
        x, y = rotate(t, t ** 2 / (4 * p), rad=ang)
        return np.c_[x + loc[0], y + loc[1]]
