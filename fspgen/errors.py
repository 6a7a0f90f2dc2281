"""Exceptions raised while validating and generating flow shop instances."""


class FlowShopGenError(ValueError):
    """Base class for all generator errors."""


class InvalidSeed(FlowShopGenError):
    """Seed outside the range accepted by the Lehmer generator."""


class InvalidConfig(FlowShopGenError):
    """Malformed duration bounds or strategy parameters."""


class DimensionOutOfRange(FlowShopGenError):
    """Number of jobs or machines is non-positive or above the cap."""


class UnknownStrategy(FlowShopGenError):
    """Strategy key not present in the registry."""
