"""Argument list synthesis for generated operation functions."""

from dataclasses import dataclass
from typing import Iterable

from .ir import IRArgument
from .scalars import ScalarRegistry
from .type_mapper import map_type

CALL_SITE_INDENT = "\t\t\t"


@dataclass(frozen=True)
class ArgumentFragments:
    """The four renderings of a field's argument list.

    Attributes:
        params: TypeScript parameter list, e.g. 'id: string, limit: number'
        call_site: Body of the `variables` object, one 'name: name' per line
        declarations: GraphQL variable declarations, e.g. '($id: ID!)'
        usages: GraphQL argument usage, e.g. '(id: $id)'
    """
    params: str = ""
    call_site: str = ""
    declarations: str = ""
    usages: str = ""


def process_arguments(
    arguments: Iterable[IRArgument],
    scalars: ScalarRegistry | None = None,
    indent: str = CALL_SITE_INDENT,
) -> ArgumentFragments:
    """Render an argument list in schema declaration order.

    The declarations keep the original GraphQL type syntax so they stay
    valid inside the embedded operation document.
    """
    params = []
    call_site = []
    declarations = []
    usages = []

    for arg in arguments:
        params.append(f"{arg.name}: {map_type(arg.type_ref, scalars)}")
        call_site.append(f"{indent}{arg.name}: {arg.name}")
        declarations.append(f"${arg.name}: {arg.type_ref}")
        usages.append(f"{arg.name}: ${arg.name}")

    return ArgumentFragments(
        params=", ".join(params),
        call_site=",\n".join(call_site),
        declarations=f"({', '.join(declarations)})" if declarations else "",
        usages=f"({', '.join(usages)})" if usages else "",
    )
