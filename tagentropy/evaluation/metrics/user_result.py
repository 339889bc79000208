"""
Per-user outcome of a metric evaluation.
"""

__version__ = '0.1.0'

import typing as t
from dataclasses import dataclass

import numpy as np

from tagentropy.utils.enums import ResultStatus


@dataclass(frozen=True)
class UserResult:
    """
    Value of a metric for one user.

    `MISSING` means no recommendation list was available and there is no value.
    `DEGRADED` means the computation failed and the value is the fallback 0.
    """
    user: t.Any
    value: t.Optional[float]
    status: ResultStatus

    @classmethod
    def missing(cls, user) -> "UserResult":
        return cls(user, None, ResultStatus.MISSING)

    @classmethod
    def computed(cls, user, value: float) -> "UserResult":
        return cls(user, value, ResultStatus.COMPUTED)

    @classmethod
    def degraded(cls, user, value: float = 0.0) -> "UserResult":
        return cls(user, value, ResultStatus.DEGRADED)

    @property
    def is_missing(self) -> bool:
        return self.status is ResultStatus.MISSING

    def as_row(self, column: str) -> t.Dict[str, float]:
        return {column: np.nan if self.is_missing else self.value}
