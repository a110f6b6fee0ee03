"""Core modules for GraphQL to TypeScript code generation."""

from .arguments import ArgumentFragments, process_arguments
from .context import ErrorMode, GenerationContext, unescape_header
from .exceptions import (
    ConfigurationError,
    CyclicSelectionError,
    DuplicateOperationError,
    GenerationError,
    GqlTsgenError,
    InvalidTypeExpression,
    OutputWriteError,
    SchemaError,
    SchemaLoadError,
    SchemaParseError,
    UnknownTypeError,
)
from .function_generator import (
    FunctionRenderer,
    ThrowingFunctionRenderer,
    TupleFunctionRenderer,
    renderer_for,
)
from .generator import CodeGenerator, GenerationResult, assemble, write_output
from .interface_generator import render_interface
from .ir import IRArgument, IRField, IRSchema, IRType
from .parser import SchemaParser
from .scalars import ScalarRegistry
from .shape_builder import CyclePolicy, ShapeBuilder
from .templating import create_environment
from .type_mapper import map_type

__all__ = [
    # IR types
    "IRArgument",
    "IRField",
    "IRSchema",
    "IRType",
    # Parser
    "SchemaParser",
    # Scalars
    "ScalarRegistry",
    "map_type",
    # Rendering
    "ArgumentFragments",
    "process_arguments",
    "CyclePolicy",
    "ShapeBuilder",
    "FunctionRenderer",
    "ThrowingFunctionRenderer",
    "TupleFunctionRenderer",
    "renderer_for",
    "render_interface",
    "create_environment",
    # Generation
    "ErrorMode",
    "GenerationContext",
    "unescape_header",
    "CodeGenerator",
    "GenerationResult",
    "assemble",
    "write_output",
    # Errors
    "GqlTsgenError",
    "ConfigurationError",
    "SchemaError",
    "SchemaLoadError",
    "SchemaParseError",
    "GenerationError",
    "InvalidTypeExpression",
    "UnknownTypeError",
    "CyclicSelectionError",
    "DuplicateOperationError",
    "OutputWriteError",
]
