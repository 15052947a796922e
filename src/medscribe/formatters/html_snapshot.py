"""Print snapshot renderer.

Unlike the PDF and DOCX formatters this renderer does not walk the
``DocumentModel``.  It takes the markup a display surface has already
rendered for a report, wraps it verbatim in a standalone HTML document with
an embedded print stylesheet, and hands that document to a print surface.
"""

from __future__ import annotations

import html
import logging
import tempfile
import webbrowser
from pathlib import Path
from string import Template
from typing import Callable, Protocol, runtime_checkable

from medscribe.core.config import SnapshotConfig
from medscribe.exceptions import RenderTargetMissing, SurfaceUnavailable
from medscribe.models import ArtifactKind, RenderedArtifact
from medscribe.naming import Clock, download_filename, utc_now

log = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


# ── Collaborator protocols ───────────────────────────────────────────


@runtime_checkable
class ProvidesRenderableMarkup(Protocol):
    """Anything that can hand over the rendered markup of a report view."""

    def markup_for(self, target_id: str) -> str | None:
        """Return the markup rendered for *target_id*, or ``None`` if there is none."""
        ...


@runtime_checkable
class PrintSurface(Protocol):
    """External surface that shows a document to the user for printing."""

    def open(self, document: str, title: str) -> None:
        """Open *document*; raise ``SurfaceUnavailable`` if it cannot be shown."""
        ...


class StaticMarkupSource:
    """Markup provider backed by a plain mapping of target id to markup."""

    def __init__(self, markup: dict[str, str] | None = None) -> None:
        self._markup = dict(markup or {})

    def add(self, target_id: str, markup: str) -> None:
        self._markup[target_id] = markup

    def markup_for(self, target_id: str) -> str | None:
        return self._markup.get(target_id)


class BrowserPrintSurface:
    """Writes the snapshot to a temporary file and opens it in the system browser."""

    def __init__(
        self,
        directory: Path | None = None,
        opener: Callable[[str], bool] = webbrowser.open,
    ) -> None:
        self._directory = directory
        self._opener = opener

    def open(self, document: str, title: str) -> None:
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                suffix=".html",
                prefix="medical-report-",
                dir=self._directory,
                delete=False,
            ) as fh:
                fh.write(document)
                path = Path(fh.name)
        except OSError as exc:
            raise SurfaceUnavailable(f"Could not stage print document: {exc}") from exc

        if not self._opener(path.as_uri()):
            raise SurfaceUnavailable(f"No browser available to print {title!r}")
        log.info("Opened print snapshot %s", path)


# ── Document template ────────────────────────────────────────────────

_PRINT_STYLES = Template(
    """    <style>
      @media print {
        body {
          font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
          line-height: 1.6;
          color: #000;
          max-width: 210mm;
          margin: 0 auto;
          padding: ${margin}mm;
        }
        h1 { font-size: 24px; margin-bottom: 10px; }
        h2 { font-size: 20px; margin-top: 20px; margin-bottom: 10px; }
        h3 { font-size: 16px; margin-top: 15px; margin-bottom: 8px; }
        p { margin-bottom: 10px; }
        .no-print { display: none; }
        @page { size: ${page_size}; margin: ${margin}mm; }
      }
      body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
        line-height: 1.6;
        color: #000;
        padding: 20px;
      }
      h1 { font-size: 24px; margin-bottom: 10px; }
      h2 { font-size: 20px; margin-top: 20px; margin-bottom: 10px; }
      h3 { font-size: 16px; margin-top: 15px; margin-bottom: 8px; }
    </style>"""
)


class SnapshotRenderer:
    """Wraps display-surface markup into a printable standalone HTML document."""

    def __init__(
        self,
        config: SnapshotConfig | None = None,
        surface: PrintSurface | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._config = config or SnapshotConfig()
        self._surface = surface
        self._clock = clock

    @property
    def content_type(self) -> str:
        return HTML_CONTENT_TYPE

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind.HTML_SNAPSHOT

    def build_html(self, markup: str) -> str:
        """Embed *markup* unchanged inside the print document."""
        cfg = self._config
        styles = _PRINT_STYLES.substitute(page_size=cfg.page_size, margin=cfg.margin_mm)
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "  <head>\n"
            '    <meta charset="utf-8">\n'
            f"    <title>{html.escape(cfg.document_title)}</title>\n"
            f"{styles}\n"
            "  </head>\n"
            "  <body>\n"
            f"{markup}\n"
            "  </body>\n"
            "</html>\n"
        )

    def render_printable(
        self,
        source: ProvidesRenderableMarkup,
        target_id: str,
        surface: PrintSurface | None = None,
    ) -> RenderedArtifact:
        """Snapshot the markup for *target_id* and open it on the print surface.

        One attempt only: a surface failure propagates as ``SurfaceUnavailable``
        and nothing is queued for later.  The call returns once the surface
        has been opened; it does not wait for the user to print.
        """
        markup = source.markup_for(target_id)
        if markup is None:
            raise RenderTargetMissing(target_id)

        document = self.build_html(markup)
        target_surface = surface if surface is not None else self._surface
        if target_surface is None:
            target_surface = BrowserPrintSurface()
        target_surface.open(document, self._config.document_title)

        return RenderedArtifact(
            content=document.encode("utf-8"),
            filename=download_filename("html", self._clock),
            kind=self.kind,
            content_type=self.content_type,
        )


def render_printable(
    source: ProvidesRenderableMarkup,
    target_id: str,
    surface: PrintSurface | None = None,
) -> RenderedArtifact:
    """Module-level shortcut using default snapshot settings."""
    return SnapshotRenderer(surface=surface).render_printable(source, target_id)
