"""pgx-new scaffolder -- generates new Postgres extension crates.

Quick usage::

    from pgx_new.scaffolder import ExtensionConfig, ScaffoldGenerator

    generator = ScaffoldGenerator(ExtensionConfig(name="my_ext", bgworker=False))
    project_path = generator.generate("/tmp/output")
"""

from pgx_new.scaffolder.generator import (
    SCAFFOLD_DIRECTORIES,
    ExtensionConfig,
    ScaffoldError,
    ScaffoldGenerator,
    ScaffoldStep,
    TemplateVariant,
    build_plan,
    create_extension,
)
from pgx_new.scaffolder.templates import TemplateRenderer, TemplateSource

__all__ = [
    "SCAFFOLD_DIRECTORIES",
    "ExtensionConfig",
    "ScaffoldError",
    "ScaffoldGenerator",
    "ScaffoldStep",
    "TemplateRenderer",
    "TemplateSource",
    "TemplateVariant",
    "build_plan",
    "create_extension",
]
