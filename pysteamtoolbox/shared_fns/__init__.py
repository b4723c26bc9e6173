from .shared_fns import bisect_solve
