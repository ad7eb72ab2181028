"""tsbridge - TypeScript declarations from host data types and their JSON encoding."""

from tsbridge.bindings import (
    SpecialTag,
    TypeBinding,
    TypeConstructor,
)
from tsbridge.closure import (
    collect_bindings,
    collect_declarations,
)
from tsbridge.declarations import (
    Declaration,
    Field,
    InterfaceDeclaration,
    RawDeclaration,
    TypeAlternatives,
)
from tsbridge.errors import (
    ConflictingBindingError,
    GenerationError,
    MalformedMetadataError,
    UnregisteredTypeError,
)
from tsbridge.formats.json import (
    from_json,
    to_json,
)
from tsbridge.options import (
    DEFAULT_FORMATTING_OPTIONS,
    DEFAULT_JSON_OPTIONS,
    FormattingOptions,
    JSONOptions,
)
from tsbridge.registry import TypeRegistry
from tsbridge.synthesis import (
    RecordDefinition,
    RecordField,
    SumCase,
    SumDefinition,
    register_record,
    register_sum,
    synthesize_alternatives,
    synthesize_interface,
)
from tsbridge.typeids import (
    TypeId,
    parse_type_id,
    type_id,
)

__all__ = [
    "DEFAULT_FORMATTING_OPTIONS",
    "DEFAULT_JSON_OPTIONS",
    "ConflictingBindingError",
    # Declarations
    "Declaration",
    "Field",
    "FormattingOptions",
    # Errors
    "GenerationError",
    "InterfaceDeclaration",
    "JSONOptions",
    "MalformedMetadataError",
    "RawDeclaration",
    # Synthesis
    "RecordDefinition",
    "RecordField",
    # Registry
    "SpecialTag",
    "SumCase",
    "SumDefinition",
    "TypeAlternatives",
    "TypeBinding",
    "TypeConstructor",
    # Type identities
    "TypeId",
    "TypeRegistry",
    "UnregisteredTypeError",
    # Closure
    "collect_bindings",
    "collect_declarations",
    "from_json",
    "parse_type_id",
    "register_record",
    "register_sum",
    "synthesize_alternatives",
    "synthesize_interface",
    "to_json",
    "type_id",
]
