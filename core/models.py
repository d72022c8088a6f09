"""FLAGDASH FILE PURPOSE
Purpose: feature records (plain, persisted) and computed records (derived, never persisted).
Hot path: yes (every request validates or dumps these).
Feature flags: none.
Failure mode: invalid records raise pydantic ValidationError (a ValueError).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class FeatureStatus(str, Enum):
    ACTIVE = "active"
    DISABLED_MANUAL = "disabled-manual"
    DISABLED_DEPENDENCY = "disabled-dependency"


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in code; unknown keys ride along untouched
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Route(_WireModel):
    method: str
    path: str
    handler: str


class Backend(_WireModel):
    routes: list[Route] = Field(default_factory=list)


class CircuitBreaker(_WireModel):
    enabled: bool
    failure_threshold: int = Field(alias="failureThreshold")
    timeout: str | None = None


class Health(_WireModel):
    endpoint: str
    timeout: int | None = None
    auto_disable: int | None = Field(default=None, alias="autoDisable")
    circuit_breaker: CircuitBreaker | None = Field(default=None, alias="circuitBreaker")


class Dependencies(_WireModel):
    requires: list[StrictStr] = Field(default_factory=list)


class Security(_WireModel):
    rate_limit: dict[str, str] | None = Field(default=None, alias="rateLimit")


class Monitoring(_WireModel):
    metrics: list[str] | None = None


class Feature(_WireModel):
    id: StrictStr = Field(min_length=1)
    name: str = ""
    version: str = ""
    enabled: StrictBool
    description: str = ""
    backend: Backend = Field(default_factory=Backend)
    config: dict[str, Any] = Field(default_factory=dict)
    health: Health | None = None
    dependencies: Dependencies = Field(default_factory=Dependencies)
    fallback: str | None = None
    security: Security | None = None
    monitoring: Monitoring | None = None

    @property
    def requires(self) -> list[str]:
        return self.dependencies.requires


class ComputedFeature(Feature):
    status: FeatureStatus
    blocked_by: list[str] = Field(default_factory=list, alias="blockedBy")

    @property
    def is_active(self) -> bool:
        return self.status is FeatureStatus.ACTIVE


def feature_to_wire(feature: Feature) -> dict[str, Any]:
    return feature.model_dump(mode="json", by_alias=True, exclude_unset=True)


def features_to_wire(features: Iterable[Feature]) -> list[dict[str, Any]]:
    return [feature_to_wire(f) for f in features]


def parse_features(rows: Iterable[Any]) -> list[Feature]:
    return [Feature.model_validate(row) for row in rows]
