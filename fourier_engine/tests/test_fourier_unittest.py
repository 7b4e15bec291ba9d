import unittest

import numpy as np

from fourier_engine.analysis.engine import FourierEngine


class TestEngineFourier(unittest.TestCase):
    def test_cosine_on_bin_direct_and_fast(self):
        N = 16
        n_h = 5

        k = np.arange(N)
        theta = 2.0 * np.pi * k / float(N)
        x = np.cos(n_h * theta)

        eng = FourierEngine(N, normalization="forward")

        for run in (eng.run_direct, eng.run_fast):
            self.assertTrue(run(x))
            c = eng.coefficients()
            self.assertTrue(np.allclose(c[n_h], 0.5 + 0j, atol=1e-12, rtol=0.0))
            self.assertTrue(np.allclose(c[N - n_h], 0.5 + 0j, atol=1e-12, rtol=0.0))
            for m in [0, 1, 2, 3, 4, 6, 7, 8]:
                self.assertTrue(np.allclose(c[m], 0.0 + 0j, atol=1e-12, rtol=0.0))

    def test_sine_phase_is_plus_half_pi(self):
        N = 8
        k = np.arange(N)
        x = np.sin(2.0 * np.pi * k / float(N))

        eng = FourierEngine(N)
        self.assertTrue(eng.run_fast(x))
        self.assertAlmostEqual(eng.amplitude()[1], N / 2.0, places=12)
        self.assertAlmostEqual(eng.phase()[1], np.pi / 2.0, places=12)
        self.assertAlmostEqual(eng.phase()[N - 1], -np.pi / 2.0, places=12)


if __name__ == "__main__":
    unittest.main()
