"""Audit configuration: energy rates and recommendation thresholds.

The config is passed explicitly to every calculation that needs a rate or a
threshold. Values can be loaded from a YAML file:

    electricity_rate: 0.21
    gas_rate: 1.80
"""
import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field

from schemas.enums import DEFAULT_ELECTRICITY_RATE, DEFAULT_GAS_RATE

logger = logging.getLogger(__name__)


class AuditConfig(BaseModel):
    """User-overridable rates and the thresholds used by the recommenders."""
    electricity_rate: float = Field(default=DEFAULT_ELECTRICITY_RATE, gt=0, description="$/kWh")
    gas_rate: float = Field(default=DEFAULT_GAS_RATE, gt=0, description="$/therm")
    default_home_sqft: float = Field(default=1500.0, gt=0, description="Floor area assumed when none is recorded")
    materiality_threshold: float = Field(default=10.0, ge=0, description="Minimum $/yr savings to list an upgrade")
    phantom_threshold_kwh: float = Field(default=100.0, ge=0, description="Standby kWh/yr that triggers the power strip tip")
    time_of_use_threshold_kwh: float = Field(default=8000.0, ge=0, description="Annual kWh that triggers the off-peak tip")
    smart_strip_savings: float = Field(default=0.75, ge=0, le=1, description="Share of phantom load a smart strip removes")


def load_config(path: Optional[Union[str, Path]] = None) -> AuditConfig:
    """Load config from YAML, or return defaults when no path is given."""
    if path is None:
        return AuditConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = AuditConfig.model_validate(data)
    logger.debug(f"Loaded config from {path}: {config.model_dump()}")
    return config
