"""Code generator for GraphQL schemas.

Walks the IR once, renders an interface per object type and a function
per root operation field, and assembles everything into a single
TypeScript module.

Output layout:
    <header>

    export interface A { ... }      (sorted by type name)
    async function a(...) { ... }   (sorted by field name)
    export const query = { ... };
    export const mutation = { ... };

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(ir, context, template_dir="./my_templates")
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .arguments import process_arguments
from .context import GenerationContext
from .exceptions import DuplicateOperationError, OutputWriteError
from .function_generator import renderer_for
from .interface_generator import render_interface
from .ir import IRSchema, IRType
from .shape_builder import ShapeBuilder
from .templating import create_environment

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Rendered blocks collected during one pass over the schema.

    Key order is irrelevant; ``assemble`` sorts everything by name.
    """
    types: dict[str, str] = field(default_factory=dict)
    functions: dict[str, str] = field(default_factory=dict)
    queries: list[str] = field(default_factory=list)
    mutations: list[str] = field(default_factory=list)


class CodeGenerator:
    """Generates a TypeScript client library from GraphQL IR."""

    def __init__(
        self,
        ir: IRSchema,
        context: GenerationContext,
        template_dir: Optional[str] = None,
    ):
        """Initialize the code generator.

        Args:
            ir: The intermediate representation of the GraphQL schema
            context: Client name, header and error handling mode for this run
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.ir = ir
        self.context = context
        self.env = create_environment(template_dir)
        self.renderer = renderer_for(context, self.env)
        self.shapes = ShapeBuilder(ir, max_depth=context.max_depth, on_cycle=context.on_cycle)

    def generate(self) -> GenerationResult:
        """Render every type and root operation of the schema."""
        result = GenerationResult()
        roots = self.ir.root_types

        for type_name, ir_type in self.ir.types.items():
            if type_name in roots:
                self._generate_operations(ir_type, roots[type_name], result)
            else:
                logger.debug("Rendering interface %s", type_name)
                result.types[type_name] = render_interface(ir_type, self.context.scalars, self.env)

        # Placeholders keep references to unmapped custom scalars resolvable
        for scalar_name in self.ir.scalars:
            if not self.context.scalars.has(scalar_name):
                logger.debug("Rendering placeholder interface for scalar %s", scalar_name)
                result.types[scalar_name] = render_interface(
                    IRType(name=scalar_name), self.context.scalars, self.env
                )

        return result

    def _generate_operations(self, root: IRType, keyword: str, result: GenerationResult):
        """Render one function per field of a root operation type."""
        names = result.queries if keyword == "query" else result.mutations

        for ir_field in root.fields:
            if ir_field.name.startswith("__"):
                continue
            if ir_field.name in result.functions:
                raise DuplicateOperationError(ir_field.name)

            logger.debug("Rendering %s %s", keyword, ir_field.name)
            fragments = process_arguments(
                ir_field.arguments,
                self.context.scalars,
                indent=self.renderer.call_site_indent,
            )
            shape = self.shapes.build(ir_field.named_type, self.renderer.selection_depth)
            result.functions[ir_field.name] = self.renderer.render(ir_field, keyword, fragments, shape)
            names.append(ir_field.name)

    def render(self) -> str:
        """Generate and assemble the complete module text."""
        return assemble(self.context.header, self.generate())


def assemble(header: str, result: GenerationResult) -> str:
    """Serialize a generation result in deterministic order."""
    parts = [header, "\n\n"]
    parts.extend(result.types[name] for name in sorted(result.types))
    parts.extend(result.functions[name] for name in sorted(result.functions))
    parts.append(_export_list("query", result.queries))
    parts.append(_export_list("mutation", result.mutations))
    parts.append("\n\n")
    return "".join(parts)


def _export_list(name: str, functions: list[str]) -> str:
    entries = ",\n".join(f"\t{function}" for function in sorted(functions))
    return f"export const {name} = {{\n{entries}\n}};\n"


def write_output(output_path: str, content: str):
    """Create or truncate ``output_path`` and write ``content`` as UTF-8."""
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(str(output_path), e) from e
