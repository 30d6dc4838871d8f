# importing the modules populates mathfn.registry.REGISTRY
from . import algebra, combinatorics, number_theory, sequences  # noqa: F401
