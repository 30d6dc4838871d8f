import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union

import numpy as np

from . import functions  # noqa: F401  register all
from .parser import coerce_params
from .registry import REGISTRY

logger = logging.getLogger(__name__)

INVALID_FUNCTION_MESSAGE = "Invalid function"


class ErrorKind(str, Enum):
    INVALID_FUNCTION = "InvalidFunction"
    RUNTIME_ERROR = "RuntimeError"


@dataclass(frozen=True)
class Success:
    value: Any


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str


InvocationResult = Union[Success, Failure]


def invoke(function_name, raw_params: Sequence[str]) -> InvocationResult:
    """Look up ``function_name`` and call it with the coerced ``raw_params``.

    Parameters bind positionally. Arity is not checked: missing parameters
    are NaN, surplus ones are dropped. Any exception raised by the function
    (including RecursionError) is returned as a RUNTIME_ERROR failure; this
    is the only place computation faults are caught.
    """
    spec = REGISTRY.get(function_name) if function_name else None
    if spec is None:
        logger.info("rejected unknown function %r", function_name)
        return Failure(ErrorKind.INVALID_FUNCTION, INVALID_FUNCTION_MESSAGE)

    args = coerce_params(raw_params)[:spec.max_arity]
    args += [np.nan] * (spec.max_arity - len(args))

    try:
        value = spec.impl(*args)
    except Exception as e:
        logger.warning("%s%r failed: %s: %s", spec.name, tuple(raw_params), type(e).__name__, e)
        return Failure(ErrorKind.RUNTIME_ERROR, str(e))
    logger.debug("%s%r -> %r", spec.name, tuple(raw_params), value)
    return Success(value)
