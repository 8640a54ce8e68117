import numba
import numpy as np


@numba.njit
def round_half_away(value):
    # 13.5 -> 14, -13.5 -> -14; adding 0.5 before flooring misrounds 0.49999999999999994
    magnitude = np.abs(value)
    whole = np.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1.0
    if value < 0.0:
        return -whole
    return whole
