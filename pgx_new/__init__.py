"""pgx-new -- scaffolds new Postgres extension crates.

Quick usage::

    from pgx_new import create_extension

    project_path = create_extension("my_ext", bgworker=False, output_dir="/tmp")
"""

from pgx_new.config import Config
from pgx_new.scaffolder import (
    ExtensionConfig,
    ScaffoldError,
    ScaffoldGenerator,
    TemplateVariant,
    create_extension,
)
from pgx_new.validator import ExtensionNameError, validate_extension_name

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ExtensionConfig",
    "ExtensionNameError",
    "ScaffoldError",
    "ScaffoldGenerator",
    "TemplateVariant",
    "create_extension",
    "validate_extension_name",
]
