from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class Employee(BaseModel):
    # No coercion: booleans or numeric strings are not ids, names are not numbers.
    model_config = ConfigDict(strict=True)

    id: int = 0
    name: str = ""
    position: str = ""
    salary: float = 0.0

    @model_serializer(mode="wrap")
    def omit_zero_id(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # A zero id is left off the wire, like an unset optional field.
        data = handler(self)
        if data.get("id") == 0:
            data.pop("id")
        return data
