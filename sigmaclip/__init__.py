from .version import VERSION
from .clipper import SigmaClip, compute_bounds, clip_to_mask, clip_in_place, clip_copy
from .utils.select import kth_smallest, fast_median
