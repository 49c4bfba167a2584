from .backends import absolute
from .gamma import log_gamma
from .normal import normal_cdf
from .noncentral_t import noncentral_t_cdf
from .owen import owen_t
from .reference import REFERENCE_VALUES, ReferenceValue, reference_values
from .result import (
    ApproximationWarning,
    ConvergenceError,
    DomainError,
    LogGammaStatus,
    NoncentralTStatus,
    RangeError,
    Result,
)

__all__ = [
    "absolute",
    "log_gamma",
    "normal_cdf",
    "noncentral_t_cdf",
    "owen_t",
    "REFERENCE_VALUES",
    "ReferenceValue",
    "reference_values",
    "ApproximationWarning",
    "ConvergenceError",
    "DomainError",
    "LogGammaStatus",
    "NoncentralTStatus",
    "RangeError",
    "Result",
]
