import time
from functools import wraps


def timeit(func):
    @wraps(func)
    def _(*args, **kwargs):
        start = time.time()
        res = func(*args, **kwargs)
        end = time.time() - start
        print('Func: %s, runtime: %.6f' % (func.__name__, end))
        return res
    return _
