"""Plain-text passthrough of the generated report."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from medscribe.models import ArtifactKind, DocumentModel, RenderedArtifact
from medscribe.naming import Clock, download_filename, utc_now


class TextFormatter:
    """Returns the source text verbatim as UTF-8."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    @property
    def content_type(self) -> str:
        return "text/plain; charset=utf-8"

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind.PLAIN_TEXT

    def render(self, model: DocumentModel, **kwargs: Any) -> RenderedArtifact:
        return RenderedArtifact(
            content=self.format(model),
            filename=download_filename("txt", self._clock),
            kind=self.kind,
            content_type=self.content_type,
        )

    def format(self, model: DocumentModel, **kwargs: Any) -> bytes:
        return model.source_text.encode("utf-8")

    def format_to_file(self, model: DocumentModel, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(model))
        return path
