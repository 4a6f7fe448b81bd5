from typing import Literal

from numpy.typing import NDArray

NpVec = NDArray
NpMatrix = NDArray

NpPoints = NDArray
NpPoint = NDArray

Coeffs = tuple[float, float, float, float, float, float]

# (point, unit direction)
Line = tuple[NpPoint, NpVec]

Space = Literal['original', 'current', 'canonical', 'world']
