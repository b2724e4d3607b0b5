from __future__ import annotations
import os, sys, argparse
from typing import Optional, List, Tuple
from .io.readers import read_samples
from .interpolator import Interpolator, MAX_SAMPLES
from .evaluate.resample import DEFAULT_DOMAIN
from .errors import InterpolationError
from .report import render_polynomial, render_free_energy, coefficient_frame
from .types import FitSummary

def fit_file(input_file: str, max_samples: int=MAX_SAMPLES)->Tuple[Interpolator, FitSummary]:
    x,y=read_samples(input_file)
    interp=Interpolator.from_arrays(x, y, max_samples=max_samples)
    summary=FitSummary(interp.samples, interp.coefficients, interp.integral(), interp.quadrature())
    return interp, summary

def run_file(input_file: str, plot_file: Optional[str]=None, data_points: Optional[int]=None,
             domain: Tuple[float,float]=DEFAULT_DOMAIN, max_samples: int=MAX_SAMPLES,
             coefficients_csv: Optional[str]=None)->int:
    if not os.path.isfile(input_file):
        sys.stderr.write(f"[ERR] file {input_file} cannot be opened\n"); return 1
    try: interp, summary=fit_file(input_file, max_samples)
    except OSError as e: sys.stderr.write(f"[ERR] file {input_file} cannot be opened: {e}\n"); return 1
    except InterpolationError as e: sys.stderr.write(f"[ERR] Fit error: {e}\n"); return 1
    except ValueError as e: sys.stderr.write(f"[ERR] Read error: {e}\n"); return 1

    print(render_polynomial(summary.coefficients))
    print(render_free_energy(summary.integral, summary.trapezoid))

    if plot_file:
        steps=len(interp) if data_points is None else data_points
        try: ok=interp.estimate(plot_file, steps, domain)
        except ValueError as e: sys.stderr.write(f"[ERR] Grid error: {e}\n"); return 1
        if not ok: return 1
        print(f"[OK] plot -> {plot_file}  (points={steps+1})")

    if coefficients_csv:
        try: coefficient_frame(summary.coefficients).to_csv(coefficients_csv, index=False)
        except OSError:
            sys.stderr.write(f"[ERR] file {coefficients_csv} cannot be opened\n"); return 1
        print(f"[OK] coefficients -> {coefficients_csv}")
    return 0

def non_negative_int(s: str)->int:
    v=int(s)
    if v<0: raise argparse.ArgumentTypeError("must be >= 0")
    return v

def build_parser()->argparse.ArgumentParser:
    ap=argparse.ArgumentParser(prog="newton-fe", description="Newton interpolating polynomial -> free energy difference")
    ap.add_argument("input_file")
    ap.add_argument("plot_file", nargs="?", default=None)
    ap.add_argument("data_points", nargs="?", type=non_negative_int, default=None)
    ap.add_argument("--domain", nargs=2, type=float, default=list(DEFAULT_DOMAIN), metavar=("LO","HI"))
    ap.add_argument("--max-samples", type=int, default=MAX_SAMPLES)
    ap.add_argument("--coefficients-csv", type=str, default=None)
    return ap

def main(argv: Optional[List[str]] = None)->int:
    args=build_parser().parse_args(argv)
    return run_file(args.input_file, args.plot_file, args.data_points,
                    tuple(args.domain), args.max_samples, args.coefficients_csv)
