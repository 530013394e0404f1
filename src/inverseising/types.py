from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TypeAlias

import numpy as np
import numpy.typing as npt

SpinArray: TypeAlias = npt.NDArray[np.int8]
SpinBatch: TypeAlias = npt.NDArray[np.int8]
FloatArray: TypeAlias = npt.NDArray[np.float64]
IntArray: TypeAlias = npt.NDArray[np.int64]
BiasMap: TypeAlias = Mapping[Hashable, float]
InteractionMap: TypeAlias = Mapping[tuple[Hashable, Hashable], float]
