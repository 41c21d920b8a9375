from __future__ import annotations

"""
Runtime execution report.

Collected by the engine for every run and printed as JSON with --report.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ExecutionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    project: str | None = None
    roots: List[str] = field(default_factory=list)

    files_total: int = 0
    files_by_language: Dict[str, int] = field(default_factory=dict)

    bytes_in: int = 0
    bytes_out: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "discovery": 0.0,
            "minify": 0.0,
            "render": 0.0,
            "tokens": 0.0,
        }
    )

    errors: List[str] = field(default_factory=list)

    tokens: Optional[int] = None
    token_model: Optional[str] = None

    def add_file(self, *, language: str, bytes_in: int, bytes_out: int) -> None:
        self.files_total += 1
        self.files_by_language[language] = self.files_by_language.get(language, 0) + 1
        self.bytes_in += bytes_in
        self.bytes_out += bytes_out

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def ratio(self) -> Optional[float]:
        """Output size as a fraction of input size."""
        if not self.bytes_in:
            return None
        return self.bytes_out / self.bytes_in

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "duration_s": self.duration_s,
                "project": self.project,
                "roots": self.roots,
                "files_total": self.files_total,
                "files_by_language": self.files_by_language,
                "bytes_in": self.bytes_in,
                "bytes_out": self.bytes_out,
                "ratio": self.ratio,
                "time_by_stage": self.time_by_stage,
                "errors": self.errors,
                "tokens": self.tokens,
                "token_model": self.token_model,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: ExecutionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
