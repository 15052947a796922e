"""Output formatter protocol: the contract every document renderer implements.

Formatters consume the shared, frozen ``DocumentModel`` and never mutate it,
so several formatters may render the same model concurrently.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from medscribe.models import ArtifactKind, DocumentModel, RenderedArtifact


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for document formatters (PDF, DOCX, plain text)."""

    def render(self, model: DocumentModel, **kwargs: Any) -> RenderedArtifact:
        """Render the model into an artifact with a suggested filename."""
        ...

    def format(self, model: DocumentModel, **kwargs: Any) -> bytes:
        """Render the model into output bytes."""
        ...

    def format_to_file(self, model: DocumentModel, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/pdf')."""
        ...

    @property
    def kind(self) -> ArtifactKind:
        ...


__all__ = ["IOutputFormatter"]
