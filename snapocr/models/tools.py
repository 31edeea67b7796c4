"""
Data models for external tool discovery.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple, Union

CandidateSpec = Union[str, Sequence]


@dataclass(frozen=True)
class ToolCandidate:
    """An executable name plus companions that must also be installed."""

    name: str
    requires: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, spec: CandidateSpec) -> 'ToolCandidate':
        """
        Build a candidate from a config entry.

        Accepts ``"maim"``, ``("grim", ("slurp",))`` or the JSON form
        ``["grim", ["slurp"]]``.

        Raises:
            ValueError: If the entry has an unexpected shape
        """
        if isinstance(spec, ToolCandidate):
            return spec
        if isinstance(spec, str) and spec:
            return cls(spec)
        if isinstance(spec, (list, tuple)) and len(spec) == 2 and isinstance(spec[0], str):
            companions = spec[1]
            if isinstance(companions, str):
                companions = [companions]
            if (isinstance(companions, (list, tuple))
                    and all(isinstance(c, str) and c for c in companions)):
                return cls(spec[0], tuple(companions))
        raise ValueError(f"Invalid tool candidate: {spec!r}")

    def __str__(self) -> str:
        if self.requires:
            return f"{self.name} (+{', '.join(self.requires)})"
        return self.name


@dataclass(frozen=True)
class ResolvedTool:
    """A candidate found on PATH."""

    name: str
    path: str
    companions: Dict[str, str] = field(default_factory=dict)

    def companion(self, name: str) -> str:
        """
        Get the resolved path of a companion executable.

        Raises:
            KeyError: If the companion was not part of the candidate
        """
        return self.companions[name]


@dataclass(frozen=True)
class Toolset:
    """Every tool the pipeline needs, resolved up front."""

    ocr: ResolvedTool
    screenshot: ResolvedTool
    clipboard: ResolvedTool
    enhance: Optional[ResolvedTool] = None
    notify: Optional[ResolvedTool] = None

    def describe(self) -> str:
        """One-line summary for the log."""
        parts = [
            f"ocr={self.ocr.name}",
            f"screenshot={self.screenshot.name}",
            f"clipboard={self.clipboard.name}",
            f"enhance={self.enhance.name if self.enhance else '-'}",
            f"notify={self.notify.name if self.notify else '-'}",
        ]
        return " ".join(parts)
