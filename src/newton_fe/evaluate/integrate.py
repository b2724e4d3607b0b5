import numpy as np

def polynomial_integral(coef, lower: float, upper: float)->float:
    # term-by-term antiderivative of sum c_i x^i, no quadrature error
    c=np.asarray(coef,float)
    power=np.arange(1,c.size+1,dtype=float)
    return float(np.sum((upper**power/power)*c-(lower**power/power)*c))

def trapezoid(x, y)->float:
    # raw samples in load order; fewer than two points enclose no area
    x=np.asarray(x,float); y=np.asarray(y,float)
    if x.size<2: return 0.0
    return float(np.sum((y[1:]+y[:-1])*0.5*np.diff(x)))
