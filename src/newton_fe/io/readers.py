from __future__ import annotations
import os, re
from typing import Callable, Tuple, List
import numpy as np
import pandas as pd

# --- Reader レジストリ（プラグイン） ---
ReaderFunc = Callable[[str], Tuple[np.ndarray, np.ndarray]]

class Reader:
    def __init__(self, name: str, loader: ReaderFunc, extensions: Tuple[str, ...] = (), priority: int = 100):
        self.name = name
        self.loader = loader
        self.extensions = tuple(e.lower() for e in extensions)
        self.priority = int(priority)

_REGISTRY: List[Reader] = []

def register_reader(reader: Reader):
    _REGISTRY.append(reader)
    _REGISTRY.sort(key=lambda r: r.priority)

def iter_readers()->List[Reader]:
    return list(_REGISTRY)

COMMENT_PREFIXES=("#",";","!","*","//")
FIELD_SEP=r"[,\s;]+"

def is_number(s:str)->bool:
    try: float(s); return True
    except ValueError: return False

# --- テキスト（2 列, "x, y"） ---
def read_ascii_two_columns(path: str):
    xs=[]; ys=[]
    # utf-8-sig: 先頭の BOM で 1 行目が落ちないようにする
    with open(path,"r",encoding="utf-8-sig",errors="ignore") as f:
        for line in f:
            s=line.strip()
            if not s: continue
            if s.startswith(COMMENT_PREFIXES): continue
            parts=re.split(FIELD_SEP, s)
            if len(parts)<2: continue
            if not (is_number(parts[0]) and is_number(parts[1])): continue
            xs.append(float(parts[0])); ys.append(float(parts[1]))
    if not xs: raise ValueError("no numeric two-column rows")
    # 並べ替えない：積分区間は最初と最後の行で決まる
    return np.asarray(xs,float), np.asarray(ys,float)

# --- CSV（pandas） ---
def read_pandas_csv(path: str):
    df=pd.read_csv(path, sep=FIELD_SEP, engine="python", header=None, comment="#",
                   skip_blank_lines=True, encoding="utf-8-sig")
    if df.shape[1]<2: raise ValueError("expected at least two columns")
    # ヘッダ行など数値でない行は落とす
    df=df.iloc[:, :2].apply(pd.to_numeric, errors="coerce").dropna()
    if df.empty: raise ValueError("no numeric two-column rows")
    return df.iloc[:,0].to_numpy(float), df.iloc[:,1].to_numpy(float)

ASCII_EXTS=(".txt",".dat",".xy",".fep")
CSV_EXTS=(".csv",)

register_reader(Reader("ascii_two_columns", read_ascii_two_columns, extensions=ASCII_EXTS, priority=10))
register_reader(Reader("pandas_csv", read_pandas_csv, extensions=CSV_EXTS, priority=20))

def readers_for(path: str)->List[Reader]:
    # 拡張子が一致するものを先に、残りはレジストリ順
    ext=os.path.splitext(path)[1].lower()
    regs=iter_readers()
    return [r for r in regs if ext in r.extensions] + [r for r in regs if ext not in r.extensions]

def read_samples(path: str):
    errors=[]
    for r in readers_for(path):
        try:
            return r.loader(path)
        except OSError:
            raise
        except ValueError as e:
            errors.append(f"{r.name}: {e}")
    raise ValueError("unreadable sample file (" + "; ".join(errors) + ")")
