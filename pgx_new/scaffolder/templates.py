"""Jinja2 template rendering for extension scaffolding.

Defines the :class:`TemplateSource` interface the generator depends on and the
default :class:`TemplateRenderer` implementation, which loads templates from
the ``pgx_new/scaffolder/templates/`` directory (or from an in-memory mapping)
and either renders them with the extension name or hands back their bytes
untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, DictLoader, Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ENCODING = "utf-8"


# ---------------------------------------------------------------------------
# TemplateSource interface
# ---------------------------------------------------------------------------


class TemplateSource(ABC):
    """Capability the generator needs from a template set."""

    @abstractmethod
    def render(self, template_id: str, context: dict[str, Any]) -> bytes:
        """Render *template_id* with *context* and return the encoded result."""

    @abstractmethod
    def copy_verbatim(self, template_id: str) -> bytes:
        """Return the raw bytes of *template_id* with no substitution."""


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer(TemplateSource):
    """Renders Jinja2 templates for extension scaffolding.

    By default templates are discovered under the packaged template
    directory.  Rendered templates use a single ``{{ name }}`` placeholder;
    verbatim templates are never passed through Jinja2 at all, so they may
    contain anything.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        *,
        loader: BaseLoader | None = None,
    ) -> None:
        # An explicit loader wins; template_dir only describes the default one.
        self.template_dir: Path | None = None
        if loader is None:
            self.template_dir = Path(template_dir or _DEFAULT_TEMPLATE_DIR)
            loader = FileSystemLoader(str(self.template_dir), encoding=ENCODING)
        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
        )

    @classmethod
    def from_mapping(cls, templates: dict[str, str]) -> "TemplateRenderer":
        """Build a renderer over an in-memory ``{template_id: source}`` mapping."""
        return cls(loader=DictLoader(dict(templates)))

    # -- Rendering ---------------------------------------------------------

    def render(self, template_id: str, context: dict[str, Any]) -> bytes:
        """Render a single template with the provided context.

        Args:
            template_id: Template name relative to the loader root (e.g.
                ``"control.j2"``).
            context: Variables available inside the template.

        Returns:
            The rendered content encoded as UTF-8.
        """
        template = self.env.get_template(template_id)
        return template.render(**context).encode(ENCODING)

    def copy_verbatim(self, template_id: str) -> bytes:
        """Return the template source exactly as stored.

        The loader resolves the template, so a missing one raises
        ``TemplateNotFound`` just like :meth:`render`.  File-backed templates
        are then re-read as raw bytes so line endings survive untouched;
        other loaders' sources are encoded as UTF-8.
        """
        source, filename, _uptodate = self.env.loader.get_source(self.env, template_id)
        if filename is not None and self.template_dir is not None:
            return Path(filename).read_bytes()
        return source.encode(ENCODING)

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of every template identifier the loader knows."""
        return sorted(self.env.list_templates())
