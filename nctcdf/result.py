import warnings
from dataclasses import dataclass
from enum import IntEnum


class DomainError(ValueError):
    """Argument lies outside the mathematical domain of the function."""


class RangeError(OverflowError):
    """Argument is valid but too large to evaluate."""


class ConvergenceError(ArithmeticError):
    """An iterative refinement did not converge within its iteration cap."""


class ApproximationWarning(RuntimeWarning):
    """A less precise approximation was used to produce the value."""


class LogGammaStatus(IntEnum):
    OK = 0
    NON_POSITIVE_INPUT = 1
    ARGUMENT_TOO_LARGE = 2


class NoncentralTStatus(IntEnum):
    OK = 0
    LARGE_DF_APPROXIMATION = 1
    CONVERGENCE_FAILURE = 2


@dataclass(frozen=True)
class Result:
    value: float
    """The computed value. Only a placeholder when `status` signals an error."""

    status: IntEnum
    """Status code describing how `value` was obtained."""

    def __iter__(self):
        # Allows `value, status = log_gamma(x)`
        yield self.value
        yield self.status

    @property
    def ok(self) -> bool:
        return self.status == 0

    def unwrap(self) -> float:
        """Return the value, raising if the status signals an error.

        A large degrees-of-freedom approximation is not an error; it is
        reported as an `ApproximationWarning` and the value is returned.
        """
        # Members of different status enums compare equal by value, so
        # match on identity
        status = self.status
        if status is LogGammaStatus.NON_POSITIVE_INPUT:
            raise DomainError("log-gamma argument must be positive")
        if status is LogGammaStatus.ARGUMENT_TOO_LARGE:
            raise RangeError("log-gamma argument too large")
        if status is NoncentralTStatus.CONVERGENCE_FAILURE:
            raise ConvergenceError("Owen T truncation point did not converge")
        if status is NoncentralTStatus.LARGE_DF_APPROXIMATION:
            warnings.warn(
                "Normal approximation used for large degrees of freedom.",
                ApproximationWarning,
                stacklevel=2,
            )
        return self.value
