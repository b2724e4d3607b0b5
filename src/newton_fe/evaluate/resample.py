import sys, numpy as np
from typing import Tuple

DEFAULT_DOMAIN=(0.0, 1.0)
PLOT_FORMAT=("%.4f", "%.8f")

def build_grid(lower: float, upper: float, steps: int)->np.ndarray:
    # steps+1 evenly spaced points, both ends included
    if steps<0: raise ValueError("steps must be >= 0")
    if steps==0: return np.array([float(lower)])
    if upper<=lower: raise ValueError("domain upper bound must be > lower bound")
    return lower+np.arange(steps+1)*((upper-lower)/steps)

def evaluate_polynomial(coef, x):
    # coef[i] multiplies x^i
    y=np.polynomial.polynomial.polyval(np.asarray(x,float), np.asarray(coef,float))
    return float(y) if np.ndim(y)==0 else y

def resample_polynomial(coef, steps: int, domain: Tuple[float,float]=DEFAULT_DOMAIN):
    grid=build_grid(domain[0], domain[1], steps)
    return grid, np.asarray(evaluate_polynomial(coef, grid), float).reshape(-1)

def write_plot(path: str, xs, ys)->bool:
    try:
        np.savetxt(path, np.column_stack([xs, ys]), fmt=PLOT_FORMAT, delimiter=", ")
    except OSError:
        sys.stderr.write(f"[ERR] file {path} cannot be opened\n"); return False
    return True
