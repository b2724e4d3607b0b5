# interpolator.py
"""
Newton interpolating polynomial for free-energy estimates.

Conventions:
- Samples are kept in load order. Nothing is sorted; x-values only have to be
  distinct.
- coefficients[i] is the coefficient of x^i, len(coefficients) == len(samples).
- integral() runs from the first-loaded x to the last-loaded x. If the samples
  were loaded in descending x the sign flips.
- resample()/estimate() use the [0, 1] lambda domain unless a domain is given.

States:
  Empty  (no samples; only load() is valid)
  Ready  (coefficients built; every query is valid)
load() always clears first, so a failed load leaves the instance Empty.

Accuracy:
  The monomial expansion enumerates 2^s subsets for degree s and divided
  differences divide by (x_j - x_i). Both lose precision quickly past a dozen
  points; nothing here compensates for it.
"""
from __future__ import annotations
import math
import numpy as np
from typing import Iterable, Optional, Sequence, Tuple
from .types import Sample
from .errors import (SampleLengthError, EmptySampleError, DuplicateAbscissaError,
                     DegreeLimitError, NotReadyError, NonFiniteSampleError)
from .polynomial.divided import forward_divided_differences
from .polynomial.assemble import assemble_coefficients
from .evaluate.integrate import polynomial_integral, trapezoid
from .evaluate.resample import DEFAULT_DOMAIN, evaluate_polynomial, resample_polynomial, write_plot

# expand_roots visits 2^n subsets; past ~20 samples a fit takes seconds and doubles per sample
MAX_SAMPLES=20

def as_samples(pairs: Iterable)->Tuple[Sample, ...]:
    out=[]
    for p in pairs:
        if isinstance(p, Sample): out.append(p); continue
        x,y=p
        out.append(Sample(float(x), float(y)))
    return tuple(out)

def check_samples(samples: Sequence[Sample]):
    # NaN never compares equal, so it has to be caught before the duplicate lookup
    seen={}
    for i,s in enumerate(samples):
        if not (math.isfinite(s.x) and math.isfinite(s.y)): raise NonFiniteSampleError(s.x, s.y, i)
        if s.x in seen: raise DuplicateAbscissaError(s.x, seen[s.x], i)
        seen[s.x]=i

class Interpolator:
    def __init__(self, samples: Optional[Iterable]=None, *, max_samples: int=MAX_SAMPLES):
        self.max_samples=int(max_samples)
        self._samples: Tuple[Sample, ...]=()
        self._x=np.zeros(0,float); self._y=np.zeros(0,float)
        self._coef=np.zeros(0,float)
        if samples is not None: self.load(samples)

    @classmethod
    def from_arrays(cls, x, y, *, max_samples: int=MAX_SAMPLES)->"Interpolator":
        obj=cls(max_samples=max_samples)
        obj.load(x, y)
        return obj

    # --- data store ---
    def load(self, samples, y=None)->Tuple[Sample, ...]:
        """Replace the sample set and rebuild the polynomial.

        ``load(pairs)`` takes a sequence of (x, y) pairs or Samples;
        ``load(xs, ys)`` zips two parallel sequences of equal length.
        """
        self.clear()
        if y is None:
            pts=as_samples(samples)
        else:
            xs=list(samples); ys=list(y)
            if len(xs)!=len(ys): raise SampleLengthError(len(xs), len(ys))
            pts=as_samples(zip(xs, ys))
        if not pts: raise EmptySampleError()
        if len(pts)>self.max_samples: raise DegreeLimitError(len(pts), self.max_samples)
        check_samples(pts)
        x=np.array([p.x for p in pts], float); yv=np.array([p.y for p in pts], float)
        coef=assemble_coefficients(x, forward_divided_differences(x, yv))
        coef.setflags(write=False)
        self._samples=pts; self._x=x; self._y=yv; self._coef=coef
        return self._samples

    def clear(self):
        self._samples=()
        self._x=np.zeros(0,float); self._y=np.zeros(0,float)
        self._coef=np.zeros(0,float)

    @property
    def ready(self)->bool: return len(self._samples)>0

    def _require_ready(self):
        if not self.ready: raise NotReadyError()

    def __len__(self): return len(self._samples)

    @property
    def samples(self)->Tuple[Sample, ...]: return self._samples

    @property
    def x(self)->np.ndarray: return self._x.copy()

    @property
    def y(self)->np.ndarray: return self._y.copy()

    @property
    def degree(self)->int:
        self._require_ready()
        return len(self._samples)-1

    # --- polynomial ---
    @property
    def coefficients(self)->np.ndarray:
        # read-only; rebuilt, never patched, on load()
        self._require_ready()
        return self._coef

    def divided_differences(self)->np.ndarray:
        self._require_ready()
        return forward_divided_differences(self._x, self._y)

    def evaluate(self, x):
        self._require_ready()
        return evaluate_polynomial(self._coef, x)

    __call__=evaluate

    # --- evaluator ---
    def integral(self, lower: Optional[float]=None, upper: Optional[float]=None)->float:
        self._require_ready()
        lo=self._samples[0].x if lower is None else float(lower)
        hi=self._samples[-1].x if upper is None else float(upper)
        return polynomial_integral(self._coef, lo, hi)

    def quadrature(self)->float:
        self._require_ready()
        return trapezoid(self._x, self._y)

    def resample(self, steps: int, domain: Tuple[float,float]=DEFAULT_DOMAIN):
        self._require_ready()
        return resample_polynomial(self._coef, steps, domain)

    def estimate(self, path: str, steps: int, domain: Tuple[float,float]=DEFAULT_DOMAIN)->bool:
        # writes "x, y" lines; False (and a message on stderr) if path cannot be opened
        xs, ys=self.resample(steps, domain)
        return write_plot(path, xs, ys)

    def __repr__(self):
        if not self.ready: return "Interpolator(empty)"
        return f"Interpolator(n={len(self._samples)}, x=[{self._samples[0].x:g} .. {self._samples[-1].x:g}])"
