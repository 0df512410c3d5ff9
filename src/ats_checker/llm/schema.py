"""Response schema nodes and a recursive structural validator.

Schemas are a small tagged union (object / array / string / number / boolean)
rather than free-form dicts. ``to_json_schema`` renders the JSON Schema
document sent to the provider as the response format.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class StringSchema(BaseModel):
    type: Literal["string"] = "string"
    description: str | None = None
    enum: list[str] | None = None


class NumberSchema(BaseModel):
    type: Literal["number"] = "number"
    description: str | None = None


class BooleanSchema(BaseModel):
    type: Literal["boolean"] = "boolean"
    description: str | None = None


class ArraySchema(BaseModel):
    type: Literal["array"] = "array"
    items: "SchemaNode | None" = None
    description: str | None = None


class ObjectSchema(BaseModel):
    type: Literal["object"] = "object"
    properties: dict[str, "SchemaNode"] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    description: str | None = None

    def to_json_schema(self) -> dict[str, Any]:
        """Render as a plain JSON Schema dict."""
        return self.model_dump(exclude_none=True)


SchemaNode = Annotated[
    Union[ObjectSchema, ArraySchema, StringSchema, NumberSchema, BooleanSchema],
    Field(discriminator="type"),
]

AnySchema = ObjectSchema | ArraySchema | StringSchema | NumberSchema | BooleanSchema

ArraySchema.model_rebuild()
ObjectSchema.model_rebuild()

_schema_adapter: TypeAdapter[Any] = TypeAdapter(SchemaNode)


def parse_schema(raw: dict[str, Any]) -> AnySchema:
    """Build schema nodes from a JSON Schema dict (unknown keywords are ignored)."""
    return _schema_adapter.validate_python(raw)


def is_structured_object_schema(schema: Any) -> bool:
    """An object schema that declares at least one property or required field."""
    return isinstance(schema, ObjectSchema) and bool(schema.properties or schema.required)


def validate_schema(data: Any, schema: Any) -> bool:
    """Check ``data`` against a schema node.

    Objects must carry every required key and each declared property that is
    present must match its node. Array elements are checked against ``items``.
    Booleans never count as numbers.
    """
    if isinstance(schema, ObjectSchema):
        if not isinstance(data, dict):
            return False
        if any(key not in data for key in schema.required):
            return False
        for key, node in schema.properties.items():
            if key not in data:
                continue
            if data[key] is None:
                # null is only acceptable for optional properties
                if key in schema.required:
                    return False
                continue
            if not validate_schema(data[key], node):
                return False
        return True
    if isinstance(schema, ArraySchema):
        if not isinstance(data, list):
            return False
        if schema.items is None:
            return True
        return all(validate_schema(item, schema.items) for item in data)
    if isinstance(schema, StringSchema):
        if not isinstance(data, str):
            return False
        return schema.enum is None or data in schema.enum
    if isinstance(schema, NumberSchema):
        return isinstance(data, (int, float)) and not isinstance(data, bool)
    if isinstance(schema, BooleanSchema):
        return isinstance(data, bool)
    return False
