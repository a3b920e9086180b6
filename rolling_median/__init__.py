from rolling_median.stream_median import StreamMedian, midpoint, is_nan
from rolling_median.running import running_median, running_median_bounds, naive_running_median

__all__ = ['StreamMedian', 'midpoint', 'is_nan',
           'running_median', 'running_median_bounds', 'naive_running_median']
