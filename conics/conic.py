import logging
import numpy as np
from common.utils.typings import *
from common.utils.coordsys import CoordSys
from common.utils.linalg import vec2, planar
from common.utils.polytools import quadratic_roots
from common.utils import strtools
from conics import conic_coeffs, conic_kinds
from conics.api import get_conic_api
from conics.config import cfg
from conics.conic_errors import InvalidConicError, NotCanonicalizedError

logger = logging.getLogger(__name__)

"""
spaces, i.e. the coordinates features are reported in:
    canonical = canonical coordinates of the current coefficients
    current   = coordinates of the coordsys the conic is currently attached to
    original  = coordinates the conic was constructed in
    world     = world coordinates of the coordsys
"""


class Conic:
    """
    a*x^2 + b*xy + c*y^2 + d*x + e*y + f = 0, in the coordinates of a planar coordinate system.

    The coordinate system is referenced, not owned. Clones refer to the same CoordSys instance,
    and simplify() / translate() / rotate() move it, so every conic attached to that CoordSys
    sees the move. Attach coordsys.copy() to keep them independent.

    Feature queries (center, vertices, ...) canonicalize a copy internally and never mutate,
    unless cfg.canonical.auto is off, in which case they require simplify() to be called first.
    """

    def __init__(self, a: float, b: float, c: float, d: float, e: float, f: float, coordsys: CoordSys = None):
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)
        self.d = float(d)
        self.e = float(e)
        self.f = float(f)
        self.coordsys = CoordSys() if coordsys is None else coordsys
        # current coordinates -> original coordinates
        self.tform = np.eye(3)

    @classmethod
    def from_coeffs(cls, coeffs, coordsys: CoordSys = None) -> 'Conic':
        assert len(coeffs) == 6
        return cls(*coeffs, coordsys=coordsys)

    @classmethod
    def from_conic(cls, other: 'Conic') -> 'Conic':
        """ copy of other's coefficients, attached to the same coordsys instance """
        conic = cls(*other.coeffs, coordsys=other.coordsys)
        conic.tform = other.tform.copy()
        return conic

    def clone(self) -> 'Conic':
        return type(self).from_conic(self)

    def to_json(self):
        return {'coeffs': list(self.coeffs), 'coordsys': self.coordsys.name}

    @classmethod
    def from_json(cls, d: dict, coordsys: CoordSys = None) -> 'Conic':
        if coordsys is None:
            coordsys = CoordSys(d['coordsys'])
        return cls.from_coeffs(d['coeffs'], coordsys=coordsys)

    @property
    def coeffs(self) -> Coeffs:
        return self.a, self.b, self.c, self.d, self.e, self.f

    def _set_coeffs(self, coeffs):
        self.a, self.b, self.c, self.d, self.e, self.f = (float(v) for v in coeffs)

    @property
    def is_valid(self) -> bool:
        return conic_coeffs.is_valid(self.coeffs)

    @property
    def is_canonical(self) -> bool:
        if not self.is_valid:
            return False
        transform = conic_coeffs.canonical_transform(self.coeffs)
        return all(conic_coeffs.is_zero(v, cfg.tol.verify) for v in transform)

    def __str__(self):
        return f'{self.identify()} {strtools.to_str(self.coeffs, f="2.3")} @{self.coordsys.name}'

    def __repr__(self):
        return f'Conic({self})'

    # ----- evaluation

    def eval_xy(self, x, y):
        """ left hand side at (x, y). x, y can be arrays """
        return conic_coeffs.evaluate(self.coeffs, x, y)

    def eval_curve_at(self, x: float) -> NpPoint:
        """
        the two y values on the curve at x, as roots of c*y^2 + (b*x + e)*y + (a*x^2 + d*x + f) = 0.
        complex when the vertical line at x misses the curve. nan for missing roots when c == 0.
        """
        qa = self.c
        qb = self.b * x + self.e
        qc = self.a * x ** 2 + self.d * x + self.f
        return vec2(*quadratic_roots(qa, qb, qc))

    # ----- transforms

    def translate(self, h: float, k: float):
        """ move origin of the coefficients, and of the coordsys, to (h, k) """
        self._commit(conic_coeffs.translate(self.coeffs, h, k), h=h, k=k)

    def rotate(self, theta: float):
        """ rotate axes of the coefficients, and of the coordsys, by theta """
        self._commit(conic_coeffs.rotate(self.coeffs, theta), theta=theta)

    def simplify(self) -> tuple[float, float, float]:
        """
        Bring to canonical form: translate to the center (or vertex), then rotate to the principal axes.
        Coefficients, coordsys, and tform are updated together, or not at all.
        Returns:
            (h, k, theta) applied
        """
        coeffs, (h, k, theta) = conic_coeffs.canonicalize(self.coeffs)
        self._commit(coeffs, h=h, k=k, theta=theta)
        logger.debug(f"Simplified to {strtools.to_str(self.coeffs, f='2.3')} @{self.coordsys}")
        return h, k, theta

    def change_coordsys(self, coordsys: CoordSys):
        """ express the same curve in another coordinate system, and attach to it """
        H = coordsys.homogeneous_to(self.coordsys)
        coeffs = conic_coeffs.change_basis(self.coeffs, H)
        self.tform = self.tform @ H
        self.coordsys = coordsys
        self._set_coeffs(coeffs)
        logger.debug(f"Moved to coordsys {coordsys}")

    def _commit(self, coeffs, h: float = 0., k: float = 0., theta: float = 0.):
        """ set coefficients that result from translating by (h, k) and then rotating by theta """
        tform = self.tform @ planar.build(ang=theta, t=(h, k))
        self.coordsys.translate(h, k)
        self.coordsys.rotate(theta)
        self.tform = tform
        self._set_coeffs(coeffs)

    # ----- classification

    def identify(self) -> str:
        if not self.is_valid:
            return conic_kinds.UNDEFINED
        canonical_coeffs, _ = conic_coeffs.canonicalize(self.coeffs)
        return conic_kinds.identify(canonical_coeffs)

    # ----- features

    def center(self, space: Space = 'original') -> NpPoint:
        pt, A = self._feature('center', space)
        return vec2(*planar.apply(A, pt)[0])

    def vertices(self, space: Space = 'original') -> NpPoints:
        pts, A = self._feature('vertex_pts', space)
        return planar.apply(A, pts)

    def foci(self, space: Space = 'original') -> NpPoints:
        pts, A = self._feature('focus_pts', space)
        return planar.apply(A, pts)

    def axis(self, space: Space = 'original') -> Line:
        line, A = self._feature('axis', space)
        return _map_line(A, line)

    def asymptotes(self, space: Space = 'original') -> list[Line]:
        lines, A = self._feature('asymptotes', space)
        return [_map_line(A, line) for line in lines]

    def lines(self, space: Space = 'original') -> list[Line]:
        """ the lines making up a degenerate conic """
        lines, A = self._feature('lines', space)
        return [_map_line(A, line) for line in lines]

    def semi_axes(self) -> tuple[float, float]:
        return self._feature('semi_axes')[0]

    def eccentricity(self) -> float:
        return self._feature('eccentricity')[0]

    def semi_latus(self) -> float:
        return self._feature('semi_latus')[0]

    def perimeter(self) -> float:
        return self._feature('perimeter')[0]

    def _feature(self, feature: str, space: Space = 'canonical'):
        """
        Returns:
            value of the feature in canonical coordinates
            homogeneous matrix from canonical coordinates to the requested space
        """
        if not self.is_valid:
            raise InvalidConicError(f"Not a second degree curve: {strtools.to_str(self.coeffs)}")
        if not cfg.canonical.auto and not self.is_canonical:
            raise NotCanonicalizedError(f"Querying {feature} requires a canonical conic, call simplify() first")
        canonical_coeffs, (h, k, theta) = conic_coeffs.canonicalize(self.coeffs)
        api = get_conic_api(conic_kinds.identify(canonical_coeffs))
        value = getattr(api, feature)(canonical_coeffs)
        return value, self._space_mtx(planar.build(ang=theta, t=(h, k)), space)

    def _space_mtx(self, A: NpMatrix, space: Space) -> NpMatrix:
        """ A: canonical -> current. returns: canonical -> space """
        if space == 'canonical':
            return np.eye(3)
        elif space == 'current':
            return A
        elif space == 'original':
            return self.tform @ A
        elif space == 'world':
            return self.coordsys.to_world_mtx() @ A
        else:
            raise ValueError(f"Unknown space {space}")


def _map_line(A: NpMatrix, line: Line) -> Line:
    pt, u = line
    return vec2(*planar.apply(A, pt)[0]), vec2(*planar.apply_linear(A, u)[0])
