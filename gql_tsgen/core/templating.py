"""Jinja2 environment for the TypeScript templates.

Supports custom templates via a template directory:
    env = create_environment(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates

Available templates to override:
    - interface.ts.j2: one exported interface per object type
    - function_throw.ts.j2: operation function that lets errors propagate
    - function_tuple.ts.j2: operation function returning [value, error]
"""

from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .exceptions import ConfigurationError


def create_environment(template_dir: str | None = None) -> Environment:
    """Create the template environment, preferring templates in ``template_dir``."""
    loaders = []
    if template_dir:
        template_path = Path(template_dir)
        if not template_path.is_dir():
            raise ConfigurationError(f"Template directory '{template_dir}' does not exist")
        loaders.append(FileSystemLoader(str(template_path)))
    loaders.append(PackageLoader("gql_tsgen", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
