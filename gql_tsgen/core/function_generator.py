"""Function generator for GraphQL root operations.

Renders one async TypeScript function per query or mutation field, e.g.:

    async function user(id: string): Promise<User> {
        const response = await client.query({ query: gql(`...`), ... });
        return response.data.user;
    }

Two variants exist. ThrowingFunctionRenderer lets any rejection reach the
caller; TupleFunctionRenderer catches everything and resolves to a
``[value, error]`` pair instead.
"""

from jinja2 import Environment

from .arguments import ArgumentFragments
from .context import ErrorMode, GenerationContext
from .ir import IRField
from .type_mapper import map_type

# Operation keyword -> method called on the client object
CLIENT_METHODS = {
    "query": "query",
    "mutation": "mutate",
}


class FunctionRenderer:
    """Base class for operation function renderers.

    Subclasses choose the template and the indentation of the embedded
    operation document; building the document itself is shared.
    """

    template_name: str = ""
    # Tabs in front of the operation document inside the function body
    operation_indent: int = 3

    def __init__(self, context: GenerationContext, env: Environment):
        self.context = context
        self.env = env

    @property
    def call_site_indent(self) -> str:
        """Indentation of each entry in the generated `variables` object."""
        return "\t" * self.operation_indent

    @property
    def selection_depth(self) -> int:
        """Indentation depth of the root field line of the operation document."""
        return self.operation_indent + 1

    def build_operation(
        self,
        ir_field: IRField,
        keyword: str,
        fragments: ArgumentFragments,
        shape: str,
    ) -> str:
        """Build the GraphQL document embedded in the function.

        Example:
            query user($id: ID!) {
                user(id: $id) { id name }
            }
        """
        pad = "\t" * self.operation_indent
        selection = f" {shape}" if shape else ""
        return (
            f"{keyword} {ir_field.name}{fragments.declarations} {{\n"
            f"{pad}\t{ir_field.name}{fragments.usages}{selection}\n"
            f"{pad}}}"
        )

    def return_type(self, ir_field: IRField) -> str:
        return map_type(ir_field.type_ref, self.context.scalars)

    def render(
        self,
        ir_field: IRField,
        keyword: str,
        fragments: ArgumentFragments,
        shape: str,
    ) -> str:
        """Render the complete function declaration for a root field."""
        template = self.env.get_template(self.template_name)
        return template.render(
            name=ir_field.name,
            params=fragments.params,
            return_type=self.return_type(ir_field),
            client=self.context.client_name,
            client_method=CLIENT_METHODS[keyword],
            keyword=keyword,
            operation=self.build_operation(ir_field, keyword, fragments, shape),
            call_site=fragments.call_site,
        )


class ThrowingFunctionRenderer(FunctionRenderer):
    """Returns the response data directly; failures reject the promise."""

    template_name = "function_throw.ts.j2"
    operation_indent = 3


class TupleFunctionRenderer(FunctionRenderer):
    """Resolves to [data, null] on success and [null, error] otherwise."""

    template_name = "function_tuple.ts.j2"
    operation_indent = 4


def renderer_for(context: GenerationContext, env: Environment) -> FunctionRenderer:
    """Pick the renderer for the run's error mode."""
    if context.error_mode is ErrorMode.TUPLE:
        return TupleFunctionRenderer(context, env)
    return ThrowingFunctionRenderer(context, env)
