import numpy as np

def expand_roots(roots)->np.ndarray:
    """Expand prod_k (x - r_k) by enumerating every subset of the roots.

    Bit j of the pattern selects the factor -r_j; the signed product of a
    subset of size k lands in ``term[k]``, the coefficient of x^(s-k).
    All 2^s patterns are visited, so the cost doubles with each root.
    """
    r=[float(v) for v in roots]
    s=len(r)
    term=np.zeros(s+1,float)
    for pattern in range(1<<s):
        unit=1.0
        for j in range(s):
            if (pattern>>j)&1: unit*=-r[j]
        term[bin(pattern).count("1")]+=unit
    return term
