from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Shared configuration for golf domain models."""
    model_config = ConfigDict(validate_assignment=True)
