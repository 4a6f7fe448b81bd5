import unittest
import numpy as np
from common.utils.polytools import quadratic_roots


class TestQuadraticRoots(unittest.TestCase):

    def test_real(self):
        np.testing.assert_array_almost_equal(quadratic_roots(1, -3, 2), [1, 2])
        np.testing.assert_array_almost_equal(quadratic_roots(-2, 0, 8), [-2, 2])

    def test_double(self):
        np.testing.assert_array_almost_equal(quadratic_roots(1, -4, 4), [2, 2])
        np.testing.assert_array_almost_equal(quadratic_roots(3, 0, 0), [0, 0])

    def test_complex(self):
        roots = quadratic_roots(1, 0, 1)
        self.assertTrue(np.iscomplexobj(roots))
        np.testing.assert_array_almost_equal(sorted(roots, key=np.imag), [-1j, 1j])
        roots = quadratic_roots(1, 2, 5)
        np.testing.assert_array_almost_equal(sorted(roots, key=np.imag), [-1 - 2j, -1 + 2j])

    def test_linear(self):
        roots = quadratic_roots(0, 2, -4)
        self.assertAlmostEqual(roots[0], 2)
        self.assertTrue(np.isnan(roots[1]))

    def test_constant(self):
        self.assertTrue(np.all(np.isnan(quadratic_roots(0, 0, 1))))

    def test_roots_solve(self):
        rng = np.random.default_rng(0)
        for _ in range(50):
            qa, qb, qc = rng.standard_normal(3)
            for t in quadratic_roots(qa, qb, qc):
                self.assertAlmostEqual(abs(qa * t ** 2 + qb * t + qc), 0)

    def test_cancellation(self):
        # small root of t^2 - 1e8*t + 1, close to 1e-8
        roots = quadratic_roots(1, -1e8, 1)
        self.assertAlmostEqual(roots[0] * 1e8, 1)


if __name__ == '__main__':
    unittest.main()
