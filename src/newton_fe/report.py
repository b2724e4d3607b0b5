from __future__ import annotations
import pandas as pd

def render_polynomial(coef)->str:
    lines=["Degree, Coefficients"]
    for i,c in enumerate(coef):
        lines.append(f"{i:6d}, {c:.8f}")
    return "\n".join(lines)

def render_free_energy(integral: float, trapezoid: float)->str:
    # "Lagrange" is the historical label for the polynomial integral
    lines=["Free energy difference",
           f" Lagrange: {integral:.8f}",
           f"Trapezoid: {trapezoid:.8f}"]
    return "\n".join(lines)

def coefficient_frame(coef)->pd.DataFrame:
    return pd.DataFrame({"degree": list(range(len(coef))), "coefficient": list(coef)})
