import unittest
import numpy as np
from common.utils.coordsys import CoordSys
from common.utils.linalg import rotation_matrix


class TestCoordSys(unittest.TestCase):

    def test_default_is_world(self):
        cs = CoordSys()
        self.assertEqual(cs.name, 'world')
        pts = np.array([[1, 2], [-3, 4]])
        np.testing.assert_array_almost_equal(cs.to_world(pts), pts)

    def test_translate(self):
        cs = CoordSys('cs')
        cs.translate(2, 3)
        np.testing.assert_array_almost_equal(cs.origin, [2, 3])
        np.testing.assert_array_almost_equal(cs.to_world([0, 0]), [[2, 3]])

    def test_rotate_then_translate(self):
        cs = CoordSys('cs')
        cs.rotate(np.pi / 2)
        cs.translate(1, 0)
        # translation is in the rotated coordinates
        np.testing.assert_array_almost_equal(cs.origin, [0, 1])
        np.testing.assert_array_almost_equal(cs.to_world([[1, 0]]), [[0, 2]])

    def test_world_roundtrip(self):
        cs = CoordSys('cs', origin=(3, -1), basis=rotation_matrix(.7))
        pts = np.random.default_rng(0).standard_normal((20, 2))
        np.testing.assert_array_almost_equal(cs.from_world(cs.to_world(pts)), pts)

    def test_matrix_to(self):
        cs1 = CoordSys('cs1', basis=rotation_matrix(.2))
        cs2 = CoordSys('cs2', origin=(5, 5), basis=rotation_matrix(-.5))
        M = cs1.matrix_to(cs2)
        self.assertEqual(M.shape, (2, 2))
        np.testing.assert_array_almost_equal(M, rotation_matrix(.7))
        np.testing.assert_array_almost_equal(M @ cs2.matrix_to(cs1), np.eye(2))

    def test_homogeneous_to(self):
        cs1 = CoordSys('cs1', origin=(1, 2), basis=rotation_matrix(.2))
        cs2 = CoordSys('cs2', origin=(-4, 0), basis=rotation_matrix(1.1))
        H = cs1.homogeneous_to(cs2)
        pts = np.random.default_rng(1).standard_normal((10, 2))
        expected = cs2.from_world(cs1.to_world(pts))
        np.testing.assert_array_almost_equal((H @ np.c_[pts, np.ones(len(pts))].T).T[:, :2], expected)

    def test_copy_is_independent(self):
        cs = CoordSys('cs', origin=(1, 1))
        cs_copy = cs.copy()
        cs_copy.translate(1, 0)
        np.testing.assert_array_almost_equal(cs.origin, [1, 1])
        self.assertEqual(cs_copy.name, 'cs')
        self.assertEqual(cs.copy('other').name, 'other')


if __name__ == '__main__':
    unittest.main()
