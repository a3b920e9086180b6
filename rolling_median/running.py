import numpy as np

from rolling_median.stream_median import StreamMedian


def running_median(seq):
    seq = np.asarray(seq, dtype=float)
    cummedian = StreamMedian()
    res = np.zeros(seq.size)
    for n, i in enumerate(seq):
        cummedian.push(i)
        res[n] = cummedian.get()
    return res


def running_median_bounds(seq):
    seq = np.asarray(seq, dtype=float)
    cummedian = StreamMedian()
    return np.array([cummedian(i) for i in seq], dtype=float).reshape(-1, 2)


def naive_running_median(seq):
    """Reference running median, O(n^2) memory.

    Row i of the prefix matrix holds seq[:i+1] and NaN elsewhere, so a
    row-wise nanmedian gives the median after every step.
    """
    seq = np.asarray(seq, dtype=float)
    if seq.size == 0:
        return np.zeros(0)
    elements = np.tile(seq, (seq.size, 1))
    elements[np.triu_indices(seq.size, k=1)] = np.nan
    return np.nanmedian(elements, axis=1)
