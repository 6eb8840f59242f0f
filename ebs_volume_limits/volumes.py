import logging
from typing import Any
from typing import Mapping
from typing import Optional
from typing import Union

from ebs_volume_limits.interface import IO_MAX_IOPS
from ebs_volume_limits.interface import IO_MIN_IOPS
from ebs_volume_limits.interface import Limit
from ebs_volume_limits.interface import MAX_VOLUME_SIZE_GIB
from ebs_volume_limits.interface import MIN_VOLUME_SIZE_GIB
from ebs_volume_limits.interface import OutOfRange
from ebs_volume_limits.interface import UnsupportedVolumeType
from ebs_volume_limits.interface import VolumeType
from ebs_volume_limits.limits import gp2_limits
from ebs_volume_limits.limits import gp3_limits
from ebs_volume_limits.limits import io_limits

logger = logging.getLogger(__name__)


def _volume_type(volume_type: Union[VolumeType, str]) -> VolumeType:
    try:
        return VolumeType(volume_type)
    except ValueError as err:
        raise UnsupportedVolumeType(str(volume_type)) from err


def volume_limits(
    volume_type: Union[VolumeType, str],
    volume_size_gib: int,
    provisioned_iops: Optional[int] = None,
    provisioned_throughput: Optional[int] = None,
) -> Limit:
    """Compute the limits of any supported volume type

    gp2 performance cannot be provisioned so provisioned values are
    ignored for it. io1 and io2 have no default IOPS, so provisioned_iops
    is mandatory for them; their size is range checked but does not change
    the result.
    """
    vtype = _volume_type(volume_type)
    logger.debug(
        "Computing %s limits for size=%s iops=%s throughput=%s",
        vtype,
        volume_size_gib,
        provisioned_iops,
        provisioned_throughput,
    )

    if vtype == VolumeType.gp2:
        if provisioned_iops is not None or provisioned_throughput is not None:
            logger.debug(
                "Ignoring provisioned iops=%s throughput=%s for gp2 volume",
                provisioned_iops,
                provisioned_throughput,
            )
        return gp2_limits(volume_size_gib)

    if vtype == VolumeType.gp3:
        return gp3_limits(
            volume_size_gib,
            provisioned_iops=provisioned_iops,
            provisioned_throughput=provisioned_throughput,
        )

    if vtype in (VolumeType.io1, VolumeType.io2):
        # size does not affect io1/io2 limits but must still be a valid volume
        if (
            volume_size_gib < MIN_VOLUME_SIZE_GIB
            or volume_size_gib > MAX_VOLUME_SIZE_GIB
        ):
            raise OutOfRange(
                field="volume_size_gib",
                value=volume_size_gib,
                minimum=MIN_VOLUME_SIZE_GIB,
                maximum=MAX_VOLUME_SIZE_GIB,
                volume_type=vtype,
            )
        if provisioned_iops is None:
            raise OutOfRange(
                field="provisioned_iops",
                value=None,
                minimum=IO_MIN_IOPS,
                maximum=IO_MAX_IOPS,
                volume_type=vtype,
            )
        return io_limits(provisioned_iops, volume_type=vtype)

    raise UnsupportedVolumeType(str(vtype))


def limits_from_volume(volume: Mapping[str, Any]) -> Limit:
    """Compute the limits of one volume from an EC2 DescribeVolumes entry

    For example with boto3:

        ec2 = boto3.client("ec2")
        for volume in ec2.describe_volumes()["Volumes"]:
            print(volume["VolumeId"], limits_from_volume(volume))
    """
    # gp2 reports its derived baseline as Iops, volume_limits ignores it
    return volume_limits(
        volume["VolumeType"],
        volume["Size"],
        provisioned_iops=volume.get("Iops"),
        provisioned_throughput=volume.get("Throughput"),
    )
