import pytest

from ebs_volume_limits.interface import Limit
from ebs_volume_limits.interface import OutOfRange
from ebs_volume_limits.interface import VolumeType
from ebs_volume_limits.limits import io_limits


def test_io1_1500():
    assert io_limits(1500) == Limit(iops=1500, speed=375, burst_iops=0, burst_speed=0)


def test_io1_20():
    with pytest.raises(OutOfRange):
        io_limits(20)


def test_io1_1000():
    assert io_limits(1000) == Limit(iops=1000, speed=250)


def test_io1_10000():
    assert io_limits(10000) == Limit(iops=10000, speed=500)


@pytest.mark.parametrize(
    "iops,speed",
    [
        (100, 25),
        (2000, 500),
        # 256 KiB I/O tier ends just below 32000
        (31999, 500),
        # 16 KiB I/O tier
        (32000, 500),
        (32063, 500),
        (32064, 501),
        (48000, 750),
        (64000, 1000),
    ],
)
def test_io_tiers(iops, speed):
    limit = io_limits(iops)
    assert limit.iops == iops
    assert limit.speed == speed
    assert not limit.has_burst


@pytest.mark.parametrize("iops", [0, 99, 64001])
def test_io_out_of_range(iops):
    with pytest.raises(OutOfRange) as exc_info:
        io_limits(iops)
    err = exc_info.value
    assert err.field == "provisioned_iops"
    assert (err.minimum, err.maximum) == (100, 64000)


def test_io2_error_names_family():
    with pytest.raises(OutOfRange, match="io2"):
        io_limits(50, volume_type=VolumeType.io2)
