"""Baseline and burst limits of EBS SSD volumes.

Every function here is a pure function of its arguments: it either returns
a Limit or raises a LimitError subclass. All arithmetic is integer
arithmetic, throughput is derived from IOPS with floor division.

https://docs.aws.amazon.com/ebs/latest/userguide/ebs-volume-types.html
"""

from typing import Optional

from ebs_volume_limits.interface import GP2_BURST_IOPS
from ebs_volume_limits.interface import GP2_IOPS_PER_GIB
from ebs_volume_limits.interface import GP2_LARGE_VOLUME_GIB
from ebs_volume_limits.interface import GP2_MAX_IOPS
from ebs_volume_limits.interface import GP2_MAX_THROUGHPUT
from ebs_volume_limits.interface import GP2_MIN_IOPS
from ebs_volume_limits.interface import GP2_SMALL_MAX_THROUGHPUT
from ebs_volume_limits.interface import GP2_SMALL_VOLUME_GIB
from ebs_volume_limits.interface import GP3_BASELINE_IOPS
from ebs_volume_limits.interface import GP3_BASELINE_THROUGHPUT
from ebs_volume_limits.interface import GP3_MAX_IOPS
from ebs_volume_limits.interface import GP3_MAX_IOPS_PER_GIB
from ebs_volume_limits.interface import GP3_MAX_THROUGHPUT
from ebs_volume_limits.interface import GP3_MIN_IOPS_PER_THROUGHPUT
from ebs_volume_limits.interface import IO_LARGE_IOPS
from ebs_volume_limits.interface import IO_LARGE_MAX_THROUGHPUT
from ebs_volume_limits.interface import IO_MAX_IOPS
from ebs_volume_limits.interface import IO_MIN_IOPS
from ebs_volume_limits.interface import IO_SMALL_MAX_THROUGHPUT
from ebs_volume_limits.interface import IOPS_PER_MIB_AT_16_KIB
from ebs_volume_limits.interface import IOPS_PER_MIB_AT_256_KIB
from ebs_volume_limits.interface import Limit
from ebs_volume_limits.interface import MAX_VOLUME_SIZE_GIB
from ebs_volume_limits.interface import MIN_VOLUME_SIZE_GIB
from ebs_volume_limits.interface import OutOfRange
from ebs_volume_limits.interface import RatioViolation
from ebs_volume_limits.interface import VolumeType


def _check_range(
    field: str,
    value: int,
    minimum: int,
    maximum: int,
    volume_type: VolumeType,
) -> int:
    if value < minimum or value > maximum:
        raise OutOfRange(
            field=field,
            value=value,
            minimum=minimum,
            maximum=maximum,
            volume_type=volume_type,
        )
    return value


def gp2_limits(volume_size_gib: int) -> Limit:
    """Limits of a gp2 volume, which depend on its size alone

    Volumes up to 1000 GiB can burst to 3000 IOPS; larger volumes already
    have a baseline at or above the burst level and never burst.
    """
    size = _check_range(
        "volume_size_gib",
        volume_size_gib,
        MIN_VOLUME_SIZE_GIB,
        MAX_VOLUME_SIZE_GIB,
        VolumeType.gp2,
    )

    if size > GP2_LARGE_VOLUME_GIB:
        return Limit(
            iops=min(GP2_IOPS_PER_GIB * size, GP2_MAX_IOPS),
            speed=GP2_MAX_THROUGHPUT,
        )

    if size < GP2_SMALL_VOLUME_GIB:
        iops = max(GP2_IOPS_PER_GIB * size, GP2_MIN_IOPS)
        max_throughput = GP2_SMALL_MAX_THROUGHPUT
    else:
        iops = GP2_IOPS_PER_GIB * size
        max_throughput = GP2_MAX_THROUGHPUT

    return Limit(
        iops=iops,
        # 256 KiB is the largest I/O gp2 will count as a single operation
        speed=min(max_throughput, iops // IOPS_PER_MIB_AT_256_KIB),
        burst_iops=GP2_BURST_IOPS,
        burst_speed=max_throughput,
    )


def gp3_limits(
    volume_size_gib: int,
    provisioned_iops: Optional[int] = None,
    provisioned_throughput: Optional[int] = None,
) -> Limit:
    """Limits of a gp3 volume

    Volumes created without provisioned IOPS or throughput get the 3000 IOPS
    and 125 MiB/s baseline. Provisioned values must respect both a 500:1
    IOPS to GiB ratio and a 4:1 IOPS to MiB/s ratio, the latter checked
    against the resolved IOPS whether it was provisioned or defaulted.
    """
    size = _check_range(
        "volume_size_gib",
        volume_size_gib,
        MIN_VOLUME_SIZE_GIB,
        MAX_VOLUME_SIZE_GIB,
        VolumeType.gp3,
    )

    if provisioned_iops is None:
        iops = GP3_BASELINE_IOPS
    else:
        iops = _check_range(
            "provisioned_iops",
            provisioned_iops,
            GP3_BASELINE_IOPS,
            GP3_MAX_IOPS,
            VolumeType.gp3,
        )
        iops_per_gib = iops // size
        if iops_per_gib > GP3_MAX_IOPS_PER_GIB:
            raise RatioViolation(
                f"IOPS-to-size ratio must not exceed {GP3_MAX_IOPS_PER_GIB}:1 "
                f"for gp3 volumes, {iops} IOPS on {size} GiB is {iops_per_gib}:1",
                numerator="provisioned_iops",
                denominator="volume_size_gib",
                ratio=iops_per_gib,
                bound=GP3_MAX_IOPS_PER_GIB,
            )

    if provisioned_throughput is None:
        throughput = GP3_BASELINE_THROUGHPUT
    else:
        throughput = _check_range(
            "provisioned_throughput",
            provisioned_throughput,
            GP3_BASELINE_THROUGHPUT,
            GP3_MAX_THROUGHPUT,
            VolumeType.gp3,
        )
        iops_per_mib = iops // throughput
        if iops_per_mib < GP3_MIN_IOPS_PER_THROUGHPUT:
            raise RatioViolation(
                "IOPS-to-throughput ratio must not be below "
                f"{GP3_MIN_IOPS_PER_THROUGHPUT}:1 for gp3 volumes, "
                f"{iops} IOPS at {throughput} MiB/s is {iops_per_mib}:1",
                numerator="provisioned_iops",
                denominator="provisioned_throughput",
                ratio=iops_per_mib,
                bound=GP3_MIN_IOPS_PER_THROUGHPUT,
            )

    return Limit(iops=iops, speed=throughput)


def io_limits(
    provisioned_iops: int, volume_type: VolumeType = VolumeType.io1
) -> Limit:
    """Limits of an io1 or io2 volume, derived from its provisioned IOPS

    Both generations share the same limits, volume_type only names the
    family in error messages.
    """
    iops = _check_range(
        "provisioned_iops", provisioned_iops, IO_MIN_IOPS, IO_MAX_IOPS, volume_type
    )

    if iops < IO_LARGE_IOPS:
        speed = min(IO_SMALL_MAX_THROUGHPUT, iops // IOPS_PER_MIB_AT_256_KIB)
    else:
        # above 32000 IOPS the largest I/O is 16 KiB
        speed = min(IO_LARGE_MAX_THROUGHPUT, iops // IOPS_PER_MIB_AT_16_KIB)

    return Limit(iops=iops, speed=speed)
