"""
Shared pydantic base model for values exposed at the API and tool boundary
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable value model serialized with camelCase keys"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    def to_dict(self) -> dict:
        """Dump with the camelCase keys used by the external interfaces"""
        return self.model_dump(by_alias=True)
