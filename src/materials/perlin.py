# materials/perlin.py
import math
import numpy as np
from core.vector import Vector3

POINT_COUNT = 256

def _perlin_interp(c, u: float, v: float, w: float) -> float:
    # Hermite smoothing removes the grid artifacts of plain trilinear blending.
    uu = u * u * (3 - 2 * u)
    vv = v * v * (3 - 2 * v)
    ww = w * w * (3 - 2 * w)
    accum = 0.0
    for i in range(2):
        for j in range(2):
            for k in range(2):
                weight_v = Vector3(u - i, v - j, w - k)
                accum += ((i * uu + (1 - i) * (1 - uu))
                          * (j * vv + (1 - j) * (1 - vv))
                          * (k * ww + (1 - k) * (1 - ww))
                          * c[i][j][k].dot(weight_v))
    return accum

class Perlin:
    """
    Gradient noise over a lattice of 256 random unit vectors.

    The tables are drawn once from `rng` (a numpy Generator, a seed, or None
    for fresh entropy) and never change afterwards.
    """
    def __init__(self, rng=None):
        rng = np.random.default_rng(rng)
        ranvec = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        ranvec /= np.linalg.norm(ranvec, axis=1, keepdims=True)
        # Plain lists: per-sample indexing into numpy arrays is slow.
        self.ranvec = [Vector3(*row) for row in ranvec.tolist()]
        self.perm_x = rng.permutation(POINT_COUNT).tolist()
        self.perm_y = rng.permutation(POINT_COUNT).tolist()
        self.perm_z = rng.permutation(POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        c = [[[self.ranvec[self.perm_x[(i + di) & 255]
                           ^ self.perm_y[(j + dj) & 255]
                           ^ self.perm_z[(k + dk) & 255]]
               for dk in range(2)]
              for dj in range(2)]
             for di in range(2)]
        return _perlin_interp(c, u, v, w)

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` octaves of noise, each at twice the frequency and half the weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
