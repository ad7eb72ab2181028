"""
API Types Example
=================

Describes the types behind a small orders API and collects the TypeScript
declarations a client needs:
- Custom bindings for opaque types
- Records, sums and generic records
- Collecting the closure and handing it off as JSON
"""

from tsbridge import (
    JSONOptions,
    RawDeclaration,
    RecordField,
    SumCase,
    TypeBinding,
    TypeRegistry,
    collect_bindings,
    collect_declarations,
    register_record,
    register_sum,
    to_json,
)


def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


CAMEL = JSONOptions(field_label_modifier=snake_to_camel)


# ============================================================================
# Register Types
# ============================================================================

def register_types() -> None:
    TypeRegistry.register(
        "order_id",
        TypeBinding("OrderId", declarations=(RawDeclaration("type OrderId = string;"),)),
    )
    TypeRegistry.register("utc_time", TypeBinding("string"))

    register_record(
        "order",
        [
            RecordField("order_id", "order_id"),
            RecordField("placed_at", "utc_time"),
            RecordField("lines", "list[order_line]"),
            RecordField("status", "status"),
            RecordField("note", "maybe[text]"),
        ],
        json_options=CAMEL,
    )
    register_record(
        "order_line",
        [
            RecordField("sku", "text"),
            RecordField("quantity", "int"),
            RecordField("unit_price", "either[integer, text]"),
        ],
        json_options=CAMEL,
    )
    register_sum(
        "status",
        [SumCase("Pending"), SumCase("Shipped", "utc_time"), SumCase("Cancelled")],
    )
    register_record(
        "page",
        [RecordField("items", "list[T]"), RecordField("next_cursor", "maybe[text]")],
        type_params=["T"],
        json_options=CAMEL,
    )


def main() -> None:
    register_types()

    root = "page[order]"
    print(f"{root} -> {collect_bindings(root)[root].type_expression}")
    print()
    print(to_json(collect_declarations(root)))


if __name__ == "__main__":
    main()
