from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from ebs_volume_limits.enum_utils import enum_docstrings
from ebs_volume_limits.enum_utils import StrEnum

###############################################################################
#              Published EBS volume rules (us-east-1, 2023)                   #
###############################################################################

# Every SSD volume family shares the same size envelope
MIN_VOLUME_SIZE_GIB = 1
MAX_VOLUME_SIZE_GIB = 16384

# gp2: 3 IOPS per GiB, floored at 100 and capped at 16000
GP2_IOPS_PER_GIB = 3
GP2_MIN_IOPS = 100
GP2_MAX_IOPS = 16000
GP2_BURST_IOPS = 3000
# Below 170 GiB throughput is capped at 128 MiB/s, above 1000 GiB it is
# always 250 MiB/s
GP2_SMALL_VOLUME_GIB = 170
GP2_LARGE_VOLUME_GIB = 1000
GP2_SMALL_MAX_THROUGHPUT = 128
GP2_MAX_THROUGHPUT = 250

# gp3: 3000 IOPS / 125 MiB/s baseline, provisionable up to 64000 / 1000
GP3_BASELINE_IOPS = 3000
GP3_MAX_IOPS = 64000
GP3_BASELINE_THROUGHPUT = 125
GP3_MAX_THROUGHPUT = 1000
GP3_MAX_IOPS_PER_GIB = 500
# Throughput (MiB/s) may be at most 0.25 of the provisioned IOPS
GP3_MIN_IOPS_PER_THROUGHPUT = 4

# io1/io2
IO_MIN_IOPS = 100
IO_MAX_IOPS = 64000
# At or above this many IOPS the maximum I/O size drops to 16 KiB
IO_LARGE_IOPS = 32000
IO_SMALL_MAX_THROUGHPUT = 500
IO_LARGE_MAX_THROUGHPUT = 1000

# Throughput in MiB/s from IOPS at a given I/O size: 256 KiB -> /4, 16 KiB -> /64
IOPS_PER_MIB_AT_256_KIB = 4
IOPS_PER_MIB_AT_16_KIB = 64


@enum_docstrings
class VolumeType(StrEnum):
    """EBS volume types, named as the EC2 API reports them"""

    gp2 = "gp2"
    """General purpose SSD whose performance scales with size and can burst"""

    gp3 = "gp3"
    """General purpose SSD with a fixed baseline and provisionable IOPS and
    throughput"""

    io1 = "io1"
    """Provisioned IOPS SSD"""

    io2 = "io2"
    """Provisioned IOPS SSD, higher durability generation of io1"""

    st1 = "st1"
    """Throughput optimized HDD, limits are not modeled"""

    sc1 = "sc1"
    """Cold HDD, limits are not modeled"""


class Limit(BaseModel):
    """Performance envelope of a single volume

    Throughput values are in MiB/s. A volume that cannot burst has both
    burst fields set to zero.
    """

    iops: int = Field(default=0, ge=0)
    speed: int = Field(default=0, ge=0)
    burst_iops: int = Field(default=0, ge=0)
    burst_speed: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def has_burst(self) -> bool:
        return self.burst_iops > 0 or self.burst_speed > 0


###############################################################################
#              Errors raised when a volume description is invalid             #
###############################################################################


@enum_docstrings
class LimitErrorKind(StrEnum):
    """Why a limit could not be computed"""

    out_of_range = "out_of_range"
    """An input is outside the interval the volume family accepts"""

    ratio_violation = "ratio_violation"
    """Two provisioned values break a cross-field ratio rule"""

    unsupported_volume_type = "unsupported_volume_type"
    """No calculator exists for the requested volume type"""


class LimitError(ValueError):
    kind: LimitErrorKind


class OutOfRange(LimitError):
    kind = LimitErrorKind.out_of_range

    def __init__(
        self,
        field: str,
        value: Optional[int],
        minimum: int,
        maximum: int,
        volume_type: Optional[VolumeType] = None,
    ):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.volume_type = volume_type
        family = f" for {volume_type} volumes" if volume_type else ""
        super().__init__(
            f"{field} must be between {minimum} and {maximum}{family}, "
            f"got {value}"
        )

    def __reduce__(self):
        return (
            type(self),
            (self.field, self.value, self.minimum, self.maximum, self.volume_type),
        )


class RatioViolation(LimitError):
    kind = LimitErrorKind.ratio_violation

    def __init__(
        self,
        message: str,
        numerator: str,
        denominator: str,
        ratio: int,
        bound: int,
    ):
        self.numerator = numerator
        self.denominator = denominator
        self.ratio = ratio
        self.bound = bound
        super().__init__(message)

    def __reduce__(self):
        return (
            type(self),
            (self.args[0], self.numerator, self.denominator, self.ratio, self.bound),
        )


class UnsupportedVolumeType(LimitError):
    kind = LimitErrorKind.unsupported_volume_type

    def __init__(self, volume_type: str):
        self.volume_type = volume_type
        super().__init__(f"Limits for volume type {volume_type!r} are not supported")

    def __reduce__(self):
        return (type(self), (self.volume_type,))
