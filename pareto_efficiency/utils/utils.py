import functools
import time

import numpy as np


def sign(x) -> int:
    """reduce a comparison result of any magnitude to -1, 0 or 1, NaN being a tie"""
    s = np.sign(x)
    return 0 if np.isnan(s) else int(s)


def timeit(func):
    @functools.wraps(func)
    def __func__(ref, *arg, **kwargv):
        t0 = time.time()
        out = func(ref, *arg, **kwargv)
        if hasattr(ref, "logger"):
            ref.logger.debug(f"{func.__name__} takes {time.time() - t0:.4f}s")
        return out

    return __func__
