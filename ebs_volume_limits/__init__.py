from ebs_volume_limits.interface import Limit
from ebs_volume_limits.interface import LimitError
from ebs_volume_limits.interface import LimitErrorKind
from ebs_volume_limits.interface import OutOfRange
from ebs_volume_limits.interface import RatioViolation
from ebs_volume_limits.interface import UnsupportedVolumeType
from ebs_volume_limits.interface import VolumeType
from ebs_volume_limits.limits import gp2_limits
from ebs_volume_limits.limits import gp3_limits
from ebs_volume_limits.limits import io_limits
from ebs_volume_limits.volumes import limits_from_volume
from ebs_volume_limits.volumes import volume_limits

__all__ = [
    "Limit",
    "LimitError",
    "LimitErrorKind",
    "OutOfRange",
    "RatioViolation",
    "UnsupportedVolumeType",
    "VolumeType",
    "gp2_limits",
    "gp3_limits",
    "io_limits",
    "limits_from_volume",
    "volume_limits",
]
