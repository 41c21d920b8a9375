from __future__ import annotations
from pathlib import Path
from typing import List, Protocol, Sequence, runtime_checkable

from minicat.core.models import SourceFile


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract source file discovery."""

    def gather_files(self, roots: Sequence[Path], exclude_dirs: Sequence[Path]) -> List[SourceFile]:
        """Collect minifiable files under *roots*, sorted and de-duplicated."""
        ...
