"""Output schema parsing and compilation."""

from agentcli.core.schema.models import (
    AnyShape,
    ArrayShape,
    BooleanShape,
    IntegerShape,
    NumberShape,
    ObjectShape,
    OutputShape,
    StringShape,
    parse_shape,
)
from agentcli.core.schema.translator import (
    OutputValidationError,
    OutputValidator,
    compile_output_schema,
    compile_shape,
)

__all__ = [
    "AnyShape",
    "ArrayShape",
    "BooleanShape",
    "IntegerShape",
    "NumberShape",
    "ObjectShape",
    "OutputShape",
    "OutputValidationError",
    "OutputValidator",
    "StringShape",
    "compile_output_schema",
    "compile_shape",
    "parse_shape",
]
