from typing import Callable

import array_api_compat
import numpy as np
import torch


def absolute(x: float) -> float:
    """Absolute value of a double; nan is returned unchanged."""
    if 0.0 <= x:
        return x
    return -x


def to_numpy(x) -> np.ndarray:
    """Detach `x` from any torch graph/device and view it as a numpy array.

    Floating point inputs are promoted to float64, which the scalar kernels assume.
    """
    if array_api_compat.is_torch_array(x):
        x = x.detach().cpu().numpy()
    x = np.asarray(x)
    if np.issubdtype(x.dtype, np.floating):
        return x.astype(np.float64, copy=False)
    return x


def like(result: np.ndarray, ref):
    """Convert a float64 numpy result back to the array type of `ref`."""
    if array_api_compat.is_torch_array(ref):
        dtype = ref.dtype if ref.is_floating_point() else torch.get_default_dtype()
        return torch.as_tensor(result, dtype=dtype, device=ref.device)
    return result


def elementwise(fn: Callable[..., float], *args) -> np.ndarray:
    """Broadcast `args` against each other and apply the scalar `fn` to each element."""
    return np.vectorize(fn, otypes=[np.float64])(*map(to_numpy, args))
