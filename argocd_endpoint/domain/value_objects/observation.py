"""External resource observation value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExternalObservation:
    """What an Observe step learned about the external resource."""

    resource_exists: bool
    resource_up_to_date: bool
