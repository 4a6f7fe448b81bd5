import numpy as np
from common.utils.typings import *
from common.utils.linalg import planar, rotation_matrix
from common.utils import strtools


class CoordSys:
    """
    Named planar coordinate system: an origin and an orthonormal basis, both given in world coordinates.
    Coordinates p in this system correspond to the world point origin + basis @ p.

    Frames are mutable and meant to be shared: objects attached to a frame hold a reference to it,
    and see any change made through translate() / rotate(). Use copy() to get an independent frame.
    """

    def __init__(self, name: str = 'world', origin=(0., 0.), basis: NpMatrix = None):
        self.name = name
        self.origin = np.array(origin, float)
        self.basis = np.eye(2) if basis is None else np.array(basis, float)
        assert self.origin.shape == (2,)
        assert self.basis.shape == (2, 2)

    def translate(self, h: float, k: float):
        """ move origin to (h, k), given in this system's coordinates """
        self.origin = self.origin + self.basis @ np.array([h, k], float)

    def rotate(self, theta: float):
        """ rotate the axes by theta radians (counter clockwise) """
        self.basis = self.basis @ rotation_matrix(theta)

    def to_world_mtx(self) -> NpMatrix:
        return planar.to_homogeneous(self.basis, self.origin)

    def matrix_to(self, other: 'CoordSys') -> NpMatrix:
        """ 2x2 change of basis: vector coordinates in self -> vector coordinates in other """
        return np.linalg.solve(other.basis, self.basis)

    def homogeneous_to(self, other: 'CoordSys') -> NpMatrix:
        """ 3x3 homogeneous map: point coordinates in self -> point coordinates in other """
        offset = np.linalg.solve(other.basis, self.origin - other.origin)
        return planar.to_homogeneous(self.matrix_to(other), offset)

    def to_world(self, pts) -> NpPoints:
        return planar.apply(self.to_world_mtx(), pts)

    def from_world(self, pts) -> NpPoints:
        return planar.apply_inv(self.to_world_mtx(), pts)

    def copy(self, name: str = None) -> 'CoordSys':
        return CoordSys(self.name if name is None else name, origin=self.origin, basis=self.basis)

    def __str__(self):
        ang = np.degrees(np.arctan2(self.basis[1, 0], self.basis[0, 0]))
        return f'{self.name} origin={strtools.to_str(self.origin, f="2.3")} ang={ang:2.2f}'

    def __repr__(self):
        return f'CoordSys({self})'
