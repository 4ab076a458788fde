"""Configuration data shapes.

A configuration declares that records of a source app object may be
connected to records of a target app object, with a join cardinality on
each side and an enabled/disabled status.
"""

from enum import Enum

from ..apps.schema import AppReference
from ..objects.schema import AppObjectReference
from ..schema import HandleOrReference, IsoDatetime, ResourceModel


class JoinType(str, Enum):
    ONE = "one"
    MANY = "many"


class ConfigurationStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class ConfigurationEntity(ResourceModel):
    """One side of a configuration; ``join`` defaults to ``one``."""

    join: JoinType = JoinType.ONE
    app: AppReference
    object: AppObjectReference


Source = ConfigurationEntity
Target = ConfigurationEntity


class Configuration(ResourceModel):
    status: ConfigurationStatus = ConfigurationStatus.ENABLED
    source: ConfigurationEntity
    target: ConfigurationEntity
    updated_at: IsoDatetime


class EntityIdentifier(ResourceModel):
    """App and object of one side, as handles or references."""

    app: HandleOrReference
    object: HandleOrReference


class UpsertConfigurationEntity(EntityIdentifier):
    join: JoinType = JoinType.ONE


class UpsertConfigurationPayload(ResourceModel):
    status: ConfigurationStatus = ConfigurationStatus.ENABLED
    source: UpsertConfigurationEntity
    target: UpsertConfigurationEntity


class ConfigurationIdentifiers(ResourceModel):
    """Identifies an existing configuration by its two sides."""

    source: EntityIdentifier
    target: EntityIdentifier
