import os
from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    ALLOWANCE_DEFAULT, ALLOWANCE_RANGE, SAFETY_MARGIN_DEFAULT, SAFETY_MARGIN_RANGE, STORE_NAME_DEFAULT,
    DEFAULT_MATERIAL_KEY,
)

def _env_float(name: str, default: float):
    return lambda: float(os.getenv(name, str(default)))

class Settings(BaseModel):
    # env values are defaults, so they must be validated too
    model_config = ConfigDict(validate_default=True)

    store_name: str = Field(default_factory=lambda: os.getenv("LENS_EDGE_STORE_NAME", STORE_NAME_DEFAULT))
    manufacturer: str = Field(default_factory=lambda: os.getenv("LENS_EDGE_MAKER", "HOYA"))
    design: str = Field(default_factory=lambda: os.getenv("LENS_EDGE_DESIGN", "外面非球面"))
    material: str = Field(default_factory=lambda: os.getenv("LENS_EDGE_MATERIAL", DEFAULT_MATERIAL_KEY))
    safety_margin: float = Field(default_factory=_env_float("LENS_EDGE_SAFETY_MARGIN", SAFETY_MARGIN_DEFAULT),
                                 ge=SAFETY_MARGIN_RANGE[0], le=SAFETY_MARGIN_RANGE[1])
    allowance: float = Field(default_factory=_env_float("LENS_EDGE_ALLOWANCE", ALLOWANCE_DEFAULT),
                             ge=ALLOWANCE_RANGE[0], le=ALLOWANCE_RANGE[1])
    log_level: str = Field(default_factory=lambda: os.getenv("LENS_EDGE_LOG_LEVEL", "INFO"))

settings = Settings()
