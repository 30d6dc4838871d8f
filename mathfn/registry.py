"""Name-keyed registry of the service's math functions; filled by importing ``mathfn.functions``."""
from typing import Callable, Dict, NamedTuple, List

class FuncSpec(NamedTuple):
    name: str
    arity: List[int]
    impl: Callable
    kind: str       # "sequence" | "number_theory" | "combinatorics" | "algebra"
    doc: str

    @property
    def max_arity(self) -> int:
        return max(self.arity)

REGISTRY: Dict[str, FuncSpec] = {}

def register(name, arity, kind, doc=""):
    def deco(fn):
        if name in REGISTRY:
            raise ValueError(f"Function '{name}' is already registered")
        REGISTRY[name] = FuncSpec(name, list(arity), fn, kind, doc)
        return fn
    return deco

def get_fn(name: str) -> FuncSpec:
    if name not in REGISTRY:
        raise KeyError(f"Unknown function '{name}'")
    return REGISTRY[name]

def list_functions():
    out = []
    for k, spec in sorted(REGISTRY.items()):
        out.append({"name": k, "arity": spec.arity, "kind": spec.kind, "doc": spec.doc})
    return out
