from common.utils.typings import *
from conics.conic_errors import ConicTypeError


class conic_api:
    """
    Features of a conic, computed from its canonical coefficients (see conic_coeffs.canonicalize),
    in canonical coordinates. Features that are undefined for a kind raise ConicTypeError.
    """

    @staticmethod
    def kind() -> str: raise NotImplementedError()

    @classmethod
    def unsupported(cls, feature: str):
        raise ConicTypeError(cls.kind(), feature)

    @classmethod
    def center(cls, coeffs) -> NpPoint: cls.unsupported('center')

    @classmethod
    def vertex_pts(cls, coeffs) -> NpPoints: cls.unsupported('vertices')

    @classmethod
    def focus_pts(cls, coeffs) -> NpPoints: cls.unsupported('foci')

    @classmethod
    def axis(cls, coeffs) -> Line: cls.unsupported('axis')

    @classmethod
    def asymptotes(cls, coeffs) -> list[Line]: cls.unsupported('asymptotes')

    @classmethod
    def lines(cls, coeffs) -> list[Line]: cls.unsupported('lines')

    @classmethod
    def semi_axes(cls, coeffs) -> tuple[float, float]: cls.unsupported('semi axes')

    @classmethod
    def eccentricity(cls, coeffs) -> float: cls.unsupported('eccentricity')

    @classmethod
    def semi_latus(cls, coeffs) -> float: cls.unsupported('semi latus')

    @classmethod
    def perimeter(cls, coeffs) -> float: cls.unsupported('perimeter')
