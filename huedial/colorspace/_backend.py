"""Backend dispatch for numpy/torch compatibility.

Provides unified math operations that work with Python floats, numpy arrays
and torch tensors. Torch is imported lazily on first use to avoid loading it
when not needed.

Two power-function strategies are exposed and may be passed to the
transforms as ``power=``:

- ``pow``: general ``x ** y``, the host path
- ``powr``: ``exp2(y * log2(x))``, the GPU-style path defined for ``x >= 0``
"""

import numpy as np
from typing import Any, Callable

Array = Any  # float, numpy.ndarray or torch.Tensor
PowerFunction = Callable[[Array, float], Array]

# Lazy torch reference - only imported when needed
_torch = None


def _get_torch():
    """Get torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """Check if x is a torch tensor."""
    return type(x).__module__.startswith('torch')


# === Power strategies ===

def pow(x: Array, exp: float) -> Array:
    if is_torch(x):
        return _get_torch().pow(x, exp)
    return np.power(x, exp)


def powr(x: Array, exp: float) -> Array:
    """Power for non-negative bases via exp2/log2, as GPU powr does it."""
    if is_torch(x):
        torch = _get_torch()
        return torch.exp2(exp * torch.log2(x))
    with np.errstate(divide='ignore'):
        return np.exp2(exp * np.log2(x))


# === Dispatched operations ===

def atan2(y: Array, x: Array) -> Array:
    if is_torch(y):
        return _get_torch().atan2(y, x)
    return np.arctan2(y, x)


def sqrt(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sqrt(x)
    return np.sqrt(x)


def clip(x: Array, lo: float, hi: float) -> Array:
    if is_torch(x):
        return _get_torch().clamp(x, lo, hi)
    return np.clip(x, lo, hi)


def maximum(x: Array, value: float) -> Array:
    """Elementwise max against a scalar floor."""
    if is_torch(x):
        return _get_torch().clamp(x, min=value)
    return np.maximum(x, value)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        return _get_torch().where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)


def stack(arrays: list[Array], axis: int = -1) -> Array:
    """Stack arrays along a new axis."""
    if is_torch(arrays[0]):
        return _get_torch().stack(arrays, dim=axis)
    return np.stack(arrays, axis=axis)


def to_numpy(x: Array) -> np.ndarray:
    """Convert to numpy array (moves from GPU if needed)."""
    if is_torch(x):
        return x.detach().cpu().numpy()
    return np.asarray(x)


def from_numpy(arr: np.ndarray, reference: Array) -> Array:
    """Convert numpy array to same type/device as reference."""
    if is_torch(reference):
        torch = _get_torch()
        dtype = reference.dtype if reference.is_floating_point() else torch.float64
        return torch.from_numpy(np.ascontiguousarray(arr)).to(device=reference.device, dtype=dtype)
    return arr
