"""Interface generator for GraphQL object types."""

from jinja2 import Environment

from .ir import IRType
from .scalars import ScalarRegistry
from .type_mapper import map_type


def render_interface(ir_type: IRType, scalars: ScalarRegistry | None, env: Environment) -> str:
    """Render an exported TypeScript interface for an object type.

    Properties follow schema declaration order. Nullability is dropped, so
    no property is marked optional.
    """
    fields = [
        {"name": ir_field.name, "ts_type": map_type(ir_field.type_ref, scalars)}
        for ir_field in ir_type.fields
    ]
    return env.get_template("interface.ts.j2").render(name=ir_type.name, fields=fields)
