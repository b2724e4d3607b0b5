import numpy as np

def forward_divided_differences(x, y)->np.ndarray:
    # f[x0], f[x0,x1], ..., f[x0..x_{n-1}]; the working column shrinks by one per step
    x=np.asarray(x,float); col=np.asarray(y,float).copy()
    n=col.size
    fdd=np.empty(n,float)
    if n==0: return fdd
    fdd[0]=col[0]
    for s in range(1,n):
        col=(col[1:]-col[:-1])/(x[s:]-x[:n-s])
        fdd[s]=col[0]
    return fdd
