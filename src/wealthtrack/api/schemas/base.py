from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request/response body using the dashboard's camelCase keys; snake_case is accepted too."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
