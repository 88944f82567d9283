"""Analyzer settings, with an environment-variable loader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._errors import PalabrasConfigError
from ._pool import EXECUTORS
from ._tokenizer import DEFAULT_MIN_LENGTH

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TOP_K = 100


@dataclass(slots=True, frozen=True)
class AnalyzerConfig:
    workers: int | None = None     # None -> os.cpu_count()
    top_k: int = DEFAULT_TOP_K
    min_length: int = DEFAULT_MIN_LENGTH
    executor: str = "process"      # "process" | "thread" | "serial"

    def validate(self) -> AnalyzerConfig:
        if self.workers is not None and self.workers < 1:
            raise PalabrasConfigError(f"workers must be >= 1, got {self.workers}")
        if self.top_k < 0:
            raise PalabrasConfigError(f"top_k must be >= 0, got {self.top_k}")
        if self.min_length < 1:
            raise PalabrasConfigError(
                f"min_length must be >= 1, got {self.min_length}"
            )
        if self.executor not in EXECUTORS:
            raise PalabrasConfigError(
                f"executor must be one of {EXECUTORS}, got {self.executor!r}"
            )
        return self

    @classmethod
    def from_env(
        cls,
        prefix: str = "PALABRAS_",
        environ: Mapping[str, str] | None = None,
    ) -> AnalyzerConfig:
        """Build a config from PALABRAS_WORKERS, _TOP_K, _MIN_LENGTH, _EXECUTOR."""
        env = os.environ if environ is None else environ

        def _int(name: str, default: int | None) -> int | None:
            raw = env.get(prefix + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise PalabrasConfigError(
                    f"{prefix}{name} must be an integer, got {raw!r}"
                ) from None

        return cls(
            workers=_int("WORKERS", None),
            top_k=_int("TOP_K", DEFAULT_TOP_K),
            min_length=_int("MIN_LENGTH", DEFAULT_MIN_LENGTH),
            executor=env.get(prefix + "EXECUTOR", "process").strip().lower(),
        ).validate()
