import numpy as np


def lowbit(i):
    """ Value of the lowest set bit of *i* (0 for i == 0). """
    return i & -i


def parent(i):
    """ Next node on the update path of 1-based node *i*. """
    return i + (i & -i)


def as_seed(arr, dtype=np.int64):
    """
    Validate a seed sequence and return it as a fresh 1-d integer array.

    :param array-like arr:
        Sequence of integers used to seed a tree.

    :param dtype: (default=np.int64)
        Storage type of the returned array.

    :returns: np.ndarray of shape (len(arr),)

    :raises ValueError: If ``arr`` is None, empty or not one-dimensional.
    :raises TypeError: If the values are not integers.
    """
    if arr is None:
        raise ValueError("Array must not be empty")
    values = np.asarray(arr)
    if values.ndim != 1:
        raise ValueError("Array must be one-dimensional, got shape {0}".format(values.shape))
    if values.shape[0] == 0:
        raise ValueError("Array must not be empty")
    if values.dtype.kind not in "iub":
        raise TypeError("Array must contain integers, got dtype {0}".format(values.dtype))
    return values.astype(dtype, copy=True)
