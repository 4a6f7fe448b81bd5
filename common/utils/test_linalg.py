import unittest
import numpy as np
from common.utils.linalg import planar, vec2, rotation_matrix, rotate


class TestVec2(unittest.TestCase):

    def test_values(self):
        v = vec2(1.5, -2)
        self.assertEqual(v.shape, (2,))
        self.assertEqual(v[0], 1.5)
        self.assertEqual(v[1], -2)

    def test_immutable(self):
        v = vec2(1., 2.)
        with self.assertRaises(ValueError):
            v[0] = 3.


class TestTform(unittest.TestCase):

    def test_check_mtx(self):
        # Valid matrices
        planar._check_mtx(np.eye(2))
        planar._check_mtx(np.eye(3))

        # Invalid matrices
        with self.assertRaises(AssertionError):
            planar._check_mtx(np.array([[1, 2], [3, 4], [5, 6]]))
        with self.assertRaises(AssertionError):
            planar._check_mtx(np.ones((3, 3)))

    def test_rotation_matrix(self):
        for ang in np.linspace(-np.pi, np.pi, 13):
            R = rotation_matrix(ang)
            np.testing.assert_array_almost_equal(R @ R.T, np.eye(2))
            self.assertAlmostEqual(np.linalg.det(R), 1)
        np.testing.assert_array_almost_equal(rotation_matrix(np.pi / 2) @ [1, 0], [0, 1])

    def test_build(self):
        A = planar.build(ang=np.pi / 2, t=[1.0, 2.0])
        self.assertEqual(A.shape, (3, 3))
        np.testing.assert_array_almost_equal(planar.apply(A, [[1, 0]]), [[1, 3]])

    def test_apply_and_apply_inv(self):
        A = planar.build(ang=.3, t=(-2, 5))
        X = np.array([[1, 2], [3, 4], [-1, 0]])
        Y = planar.apply(A, X)
        np.testing.assert_array_almost_equal(X, planar.apply_inv(A, Y))

    def test_apply_linear(self):
        A = planar.build(ang=np.pi, t=(10, 10))
        np.testing.assert_array_almost_equal(planar.apply_linear(A, [1, 0]), [[-1, 0]])

    def test_roundtrip_random(self):
        rng = np.random.default_rng(1)
        for _ in range(50):
            A = planar.build(ang=(2 * rng.random() - 1) * np.pi, t=10 * rng.standard_normal(2))
            X = rng.standard_normal((5, 2))
            np.testing.assert_array_almost_equal(planar.apply_inv(A, planar.apply(A, X)), X)
            # rigid: distances are kept
            self.assertAlmostEqual(np.linalg.norm(planar.apply(A, X[:1]) - planar.apply(A, X[1:2])),
                                   np.linalg.norm(X[0] - X[1]))

    def test_rotate_points(self):
        x, y = rotate([1, 0], [0, 1], deg=90)
        np.testing.assert_array_almost_equal(x, [0, -1])
        np.testing.assert_array_almost_equal(y, [1, 0])
        x, y = rotate(2, 1, rad=np.pi, ax=(1, 1))
        self.assertAlmostEqual(x, 0)
        self.assertAlmostEqual(y, 1)


if __name__ == '__main__':
    unittest.main()
