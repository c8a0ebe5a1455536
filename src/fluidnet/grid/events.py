from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EndpointPluggedIn:
    endpoint_id: str
    t: int  # grid tick count at the time


@dataclass(frozen=True, slots=True)
class EndpointUnplugged:
    endpoint_id: str
    t: int


@dataclass(frozen=True, slots=True)
class PowerBalanced:
    produced: float
    consumed: float
    stored: float  # moved into accumulators
    drawn: float  # taken out of accumulators
    balance: float  # left over after accumulators; negative is a shortage
    t: int


@dataclass(frozen=True, slots=True)
class PowerShortage:
    deficit: float
    t: int


GridEvent = EndpointPluggedIn | EndpointUnplugged | PowerBalanced | PowerShortage
