from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..model import ReportModel


@dataclass(frozen=True)
class RenderedArtifact:
    filename: str
    content: bytes
    mimetype: str


class ReportRenderer(ABC):
    """Turns a ReportModel into a downloadable file. Layout only, no business rules."""

    extension: str = ""
    mimetype: str = "application/octet-stream"

    def render(self, report: ReportModel) -> RenderedArtifact:
        return RenderedArtifact(
            filename=report.artifact_name(self.extension),
            content=self.render_bytes(report),
            mimetype=self.mimetype,
        )

    @abstractmethod
    def render_bytes(self, report: ReportModel) -> bytes:
        raise NotImplementedError
