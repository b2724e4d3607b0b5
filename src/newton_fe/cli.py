from __future__ import annotations
from .pipeline import main as fit_main

def main():
    raise SystemExit(fit_main())
