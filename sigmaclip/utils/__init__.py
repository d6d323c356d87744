from .select import kth_smallest, fast_median
