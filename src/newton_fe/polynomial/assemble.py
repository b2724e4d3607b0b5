import numpy as np
from .permute import expand_roots

def assemble_coefficients(x, differences)->np.ndarray:
    # P(x) = sum_s fdd[s] * prod_{k<s} (x - x_k), collected by power of x
    x=np.asarray(x,float); fdd=np.asarray(differences,float)
    n=fdd.size
    coef=np.zeros(n,float)
    term=np.ones(1,float)
    for s in range(n):
        # term[s-t] is the x^t coefficient of the degree-s product
        for t in range(term.size):
            coef[t]+=fdd[s]*term[term.size-t-1]
        if s+1<n: term=expand_roots(x[:s+1])
    return coef
