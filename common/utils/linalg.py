import numpy as np

from common.utils.typings import *


def vec2(x, y) -> NpPoint:
    """ immutable 2d vector """
    v = np.array([x, y])
    v.flags.writeable = False
    return v


def rotation_matrix(rad: float) -> NpMatrix:
    c, s = np.cos(rad), np.sin(rad)
    return np.array([[c, -s], [s, c]])


def rotate(x: np.ndarray | float, y: np.ndarray | float, rad: float = None, deg: float = None, ax=None):
    if hasattr(x, '__len__'):
        x = np.asarray(x)
        y = np.asarray(y)
    if deg is not None:
        assert rad is None
        rad = np.radians(deg)
    if ax is not None:
        x, y = x - ax[0], y - ax[1]
    c, s = np.cos(rad), np.sin(rad)
    x, y = c * x - s * y, s * x + c * y
    if ax is not None:
        x += ax[0]
        y += ax[1]
    return x, y


class planar:
    """ homogeneous 3x3 rigid transforms of the plane. angles are in radians. """

    @staticmethod
    def _check_mtx(A):
        """ check that matrix is either 2x2, or homogeneous 3x3 """
        assert A.shape in ((2, 2), (3, 3))
        if A.shape == (3, 3):
            assert abs(A[2, 0]) < 1e-8 and abs(A[2, 1]) < 1e-8 and abs(A[2, 2] - 1) < 1e-8

    @staticmethod
    def to_homogeneous(R: NpMatrix, t=0.0) -> NpMatrix:
        planar._check_mtx(R)
        if R.shape == (3, 3):
            assert np.all(np.asarray(t) == 0)
            return R
        A = np.eye(3)
        A[:2, :2] = R
        A[:2, -1] = t
        return A

    @staticmethod
    def build(ang: float = 0.0, t=0.0) -> NpMatrix:
        """ p -> R(ang) @ p + t """
        return planar.to_homogeneous(rotation_matrix(ang), t)

    @staticmethod
    def apply(A: NpMatrix, X: NpPoints) -> NpPoints:
        planar._check_mtx(A)
        X = np.atleast_2d(np.asarray(X, float))
        return (planar.to_homogeneous(A) @ _pad_to_homogeneous(X).T).T[:, :2]

    @staticmethod
    def apply_linear(A: NpMatrix, V: NpPoints) -> NpPoints:
        """ apply only the linear part, e.g. to direction vectors """
        planar._check_mtx(A)
        V = np.atleast_2d(np.asarray(V, float))
        return (A[:2, :2] @ V.T).T

    @staticmethod
    def apply_inv(A: NpMatrix, X: NpPoints) -> NpPoints:
        return planar.apply(np.linalg.inv(planar.to_homogeneous(A)), X)


def _pad_to_homogeneous(X):
    if X.shape[1] == 2:
        return np.c_[X, np.ones(len(X))]
    elif X.shape[1] == 3:
        return X
    else:
        raise ValueError(f"Expected 2 or 3 columns, got {X.shape[1]}")
