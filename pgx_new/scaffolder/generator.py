"""Main scaffolding orchestrator.

Takes an ``ExtensionConfig`` (extension name plus background-worker flag) and
generates a new Postgres extension crate:

- ``src/``, ``.cargo/`` and ``sql/`` directories
- ``<name>.control`` and ``Cargo.toml`` rendered with the extension name
- ``.cargo/config`` copied verbatim
- ``src/lib.rs`` rendered from the standard or background-worker template
- ``.gitignore`` copied verbatim

Steps run strictly in that order and the first failure aborts the rest.
Nothing already written is rolled back unless staged mode is enabled.
"""

from __future__ import annotations

import errno
import shutil
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..utils import ensure_dir, print_step, write_bytes
from ..validator import validate_extension_name
from .templates import TemplateRenderer, TemplateSource


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a directory or file cannot be created.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, step: str, path: Path, reason: object) -> None:
        self.step = step
        self.path = path
        super().__init__(f"{step} failed at {path}: {reason}")


# ---------------------------------------------------------------------------
# Variants and plan
# ---------------------------------------------------------------------------


class TemplateVariant(str, Enum):
    """Which ``src/lib.rs`` body to generate."""

    STANDARD = "standard"
    WORKER = "worker"

    @classmethod
    def from_flag(cls, bgworker: bool) -> "TemplateVariant":
        return cls.WORKER if bgworker else cls.STANDARD

    @property
    def entry_point_template(self) -> str:
        if self is TemplateVariant.WORKER:
            return "bgworker_lib_rs.j2"
        return "lib_rs.j2"


SCAFFOLD_DIRECTORIES: tuple[str, ...] = ("src", ".cargo", "sql")


@dataclass(frozen=True)
class ScaffoldStep:
    """One file to write, relative to the project root."""

    relative_path: str
    template: str
    render: bool


def build_plan(name: str, variant: TemplateVariant) -> tuple[ScaffoldStep, ...]:
    """Return the ordered file-creation steps for *name* and *variant*."""
    return (
        ScaffoldStep(f"{name}.control", "control.j2", render=True),
        ScaffoldStep("Cargo.toml", "cargo_toml.j2", render=True),
        ScaffoldStep(".cargo/config", "cargo_config", render=False),
        ScaffoldStep("src/lib.rs", variant.entry_point_template, render=True),
        ScaffoldStep(".gitignore", "gitignore", render=False),
    )


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ExtensionConfig(BaseModel):
    """Pydantic model describing the extension to scaffold."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Extension name (directory, crate and control file name)")
    bgworker: bool = Field(default=False, description="Generate a background worker template")

    @property
    def variant(self) -> TemplateVariant:
        return TemplateVariant.from_flag(self.bgworker)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ScaffoldGenerator:
    """Main scaffolding orchestrator.

    Given an ``ExtensionConfig``, creates ``<output_dir>/<name>/`` and fills it
    from a :class:`TemplateSource`.  Existing directories are reused and
    existing files are overwritten.

    With ``staged=True`` the tree is built in a temporary directory next to the
    destination and renamed into place only once every step has succeeded;
    in that mode an existing destination is an error.
    """

    def __init__(
        self,
        config: ExtensionConfig,
        renderer: TemplateSource | None = None,
        *,
        staged: bool = False,
        verbose: bool = False,
    ) -> None:
        self.config = config
        self.renderer = renderer if renderer is not None else TemplateRenderer()
        self.staged = staged
        self.verbose = verbose

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path) -> Path:
        """Generate the extension crate.

        Args:
            output_dir: Parent directory where the extension folder will be
                created.

        Returns:
            Path to the generated project root.

        Raises:
            ExtensionNameError: If the name is invalid.  Raised before the
                file system is touched.
            ScaffoldError: On the first directory or file that cannot be
                created.
        """
        name = validate_extension_name(self.config.name)
        destination = Path(output_dir) / name

        if self.staged:
            self._generate_staged(Path(output_dir), destination)
        else:
            self._build_tree(destination)

        return destination

    def plan(self) -> tuple[ScaffoldStep, ...]:
        return build_plan(self.config.name, self.config.variant)

    # -- Tree construction -------------------------------------------------

    def _build_tree(self, root: Path) -> None:
        self._create_directory_structure(root)

        context = {"name": self.config.name}
        for step in self.plan():
            self._write_step(root, step, context)

    def _create_directory_structure(self, root: Path) -> None:
        """Create ``src/``, ``.cargo/`` and ``sql/`` (and the root itself)."""
        for dirname in SCAFFOLD_DIRECTORIES:
            path = root / dirname
            try:
                ensure_dir(path)
            except OSError as exc:
                raise ScaffoldError(f"create {dirname}/", path, exc) from exc
            if self.verbose:
                print_step(f"Created {dirname}/")

    def _write_step(self, root: Path, step: ScaffoldStep, context: dict[str, str]) -> None:
        if step.render:
            content = self.renderer.render(step.template, context)
        else:
            content = self.renderer.copy_verbatim(step.template)

        target = root / step.relative_path
        try:
            write_bytes(target, content)
        except OSError as exc:
            raise ScaffoldError(f"write {step.relative_path}", target, exc) from exc
        if self.verbose:
            print_step(f"Created {step.relative_path}")

    def _generate_staged(self, output_dir: Path, destination: Path) -> None:
        if destination.exists() or destination.is_symlink():
            exists = FileExistsError(errno.EEXIST, "destination already exists", str(destination))
            raise ScaffoldError("stage", destination, exists) from exists

        try:
            ensure_dir(output_dir)
            staging = Path(tempfile.mkdtemp(prefix=f".{self.config.name}-", dir=output_dir))
        except OSError as exc:
            raise ScaffoldError("stage", output_dir, exc) from exc

        try:
            staged_root = staging / self.config.name
            self._build_tree(staged_root)
            try:
                staged_root.rename(destination)
            except OSError as exc:
                raise ScaffoldError("move into place", destination, exc) from exc
        finally:
            shutil.rmtree(staging, ignore_errors=True)


def create_extension(
    name: str,
    bgworker: bool = False,
    output_dir: str | Path = ".",
    *,
    renderer: TemplateSource | None = None,
    staged: bool = False,
    verbose: bool = False,
) -> Path:
    """Validate *name* and scaffold a new extension under *output_dir*."""
    generator = ScaffoldGenerator(
        ExtensionConfig(name=name, bgworker=bgworker),
        renderer,
        staged=staged,
        verbose=verbose,
    )
    return generator.generate(output_dir)
