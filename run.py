import numpy as np

from rolling_median.utils import timeit
from rolling_median.stream_median import StreamMedian
from rolling_median.running import running_median, naive_running_median

VALUES = [3.27, 4.60, 5.95, 9.93, 7.79, 4.73, 3.33, 6.35, 4.97, 4.06]
N_SAMPLES = 2000


@timeit
def main():
    rolling_median = StreamMedian()
    for value in VALUES:
        rolling_median.push(value)
        print("Median, so far:", rolling_median.get())
    print("Final median:", rolling_median.get())

    np.random.seed(20)
    x = np.random.normal(size=N_SAMPLES)

    @timeit
    def streaming(x):
        return running_median(x)

    @timeit
    def naive(x):
        return naive_running_median(x)

    m, m_naive = streaming(x), naive(x)
    print("max abs difference", np.max(np.abs(m - m_naive)))
    return rolling_median, m, m_naive


if __name__ == "__main__":
    main()
