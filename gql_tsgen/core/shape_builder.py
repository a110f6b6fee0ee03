"""Response shape (selection set) construction.

Walks the schema's field graph from a return type and renders the nested
selection set embedded in each generated operation.
"""

import logging
from enum import Enum

from .exceptions import CyclicSelectionError, UnknownTypeError
from .ir import IRSchema

logger = logging.getLogger(__name__)

TRUNCATED_SELECTION = "{ __typename }"


class CyclePolicy(Enum):
    """What to do when a type refers back to a type already being expanded."""
    TRUNCATE = "truncate"  # Select only __typename for the repeated type
    ERROR = "error"        # Abort generation


class ShapeBuilder:
    """Builds GraphQL selection sets for operation return types.

    Every field of a type is selected, in declaration order. Fields whose
    type has fields of its own are expanded recursively. A type that is
    already on the current expansion path, or a nesting level beyond
    ``max_depth``, is not expanded further.
    """

    def __init__(
        self,
        schema: IRSchema,
        max_depth: int | None = None,
        on_cycle: CyclePolicy = CyclePolicy.TRUNCATE,
    ):
        self.schema = schema
        self.max_depth = max_depth
        self.on_cycle = on_cycle

    def build(self, type_name: str, depth: int) -> str:
        """Render the selection set for ``type_name``.

        Args:
            type_name: Named return type of the field being selected
            depth: Indentation level (in tabs) of the line the selection opens on

        Returns:
            A brace-delimited selection set, or an empty string for types
            without fields.
        """
        return self._build(type_name, depth, ())

    def _build(self, type_name: str, depth: int, path: tuple[str, ...]) -> str:
        if not self._has_fields(type_name):
            return ""

        path = path + (type_name,)
        indent = "\t" * (depth + 1)
        lines = ["{"]

        for ir_field in self.schema.types[type_name].fields:
            nested = ir_field.named_type
            if not self._has_fields(nested):
                lines.append(f"{indent}{ir_field.name}")
            elif nested in path:
                if self.on_cycle is CyclePolicy.ERROR:
                    raise CyclicSelectionError(list(path) + [nested])
                logger.debug("Truncating cyclic selection %s.%s", type_name, ir_field.name)
                lines.append(f"{indent}{ir_field.name} {TRUNCATED_SELECTION}")
            elif self.max_depth is not None and len(path) >= self.max_depth:
                logger.debug("Truncating %s.%s at depth %d", type_name, ir_field.name, self.max_depth)
                lines.append(f"{indent}{ir_field.name} {TRUNCATED_SELECTION}")
            else:
                lines.append(f"{indent}{ir_field.name} {self._build(nested, depth + 1, path)}")

        lines.append("\t" * depth + "}")
        return "\n".join(lines)

    def _has_fields(self, type_name: str) -> bool:
        if self.schema.is_leaf(type_name):
            return False
        type_def = self.schema.get_type_by_name(type_name)
        if type_def is None:
            raise UnknownTypeError(type_name)
        return bool(type_def.fields)
