import logging

import pytest

from ebs_volume_limits.interface import Limit
from ebs_volume_limits.interface import LimitErrorKind
from ebs_volume_limits.interface import OutOfRange
from ebs_volume_limits.interface import RatioViolation
from ebs_volume_limits.interface import UnsupportedVolumeType
from ebs_volume_limits.interface import VolumeType
from ebs_volume_limits.volumes import limits_from_volume
from ebs_volume_limits.volumes import volume_limits


@pytest.mark.parametrize(
    "volume_type,args,expected",
    [
        (
            VolumeType.gp2,
            (20,),
            Limit(iops=100, speed=25, burst_iops=3000, burst_speed=128),
        ),
        ("gp2", (1500,), Limit(iops=4500, speed=250)),
        (VolumeType.gp3, (1500,), Limit(iops=3000, speed=125)),
        ("gp3", (1000, 6000, 500), Limit(iops=6000, speed=500)),
        (VolumeType.io1, (100, 1500), Limit(iops=1500, speed=375)),
        ("io2", (100, 40000), Limit(iops=40000, speed=625)),
    ],
)
def test_volume_limits(volume_type, args, expected):
    assert volume_limits(volume_type, *args) == expected


def test_gp2_ignores_provisioned_values(caplog):
    with caplog.at_level(logging.DEBUG, logger="ebs_volume_limits.volumes"):
        limit = volume_limits("gp2", 100, provisioned_iops=300)
    assert limit == volume_limits("gp2", 100)
    assert "Ignoring provisioned" in caplog.text


def test_io_requires_provisioned_iops():
    with pytest.raises(OutOfRange) as exc_info:
        volume_limits(VolumeType.io2, 100)
    err = exc_info.value
    assert err.field == "provisioned_iops"
    assert err.value is None
    assert err.volume_type == VolumeType.io2


@pytest.mark.parametrize("volume_type", ["io1", "io2"])
@pytest.mark.parametrize("size", [0, 16385])
def test_io_size_out_of_range(volume_type, size):
    with pytest.raises(OutOfRange) as exc_info:
        volume_limits(volume_type, size, 1500)
    err = exc_info.value
    assert err.field == "volume_size_gib"
    assert err.value == size
    assert err.volume_type == volume_type


@pytest.mark.parametrize("size", [1, 16384])
def test_io_size_bounds_accepted(size):
    assert volume_limits("io1", size, 1500) == Limit(iops=1500, speed=375)


def test_gp3_validation_is_propagated():
    with pytest.raises(RatioViolation):
        volume_limits("gp3", 10, 10000)


@pytest.mark.parametrize(
    "volume_type", ["st1", "sc1", VolumeType.sc1, "standard", ""]
)
def test_unsupported_volume_types(volume_type):
    with pytest.raises(UnsupportedVolumeType) as exc_info:
        volume_limits(volume_type, 500)
    assert exc_info.value.kind == LimitErrorKind.unsupported_volume_type
    assert exc_info.value.volume_type == str(volume_type)


def test_limits_from_describe_volumes():
    # Shapes as returned by boto3 ec2.describe_volumes()["Volumes"]
    gp2 = {
        "VolumeId": "vol-0a1b2c3d4e5f60001",
        "VolumeType": "gp2",
        "Size": 200,
        "Iops": 600,
        "Encrypted": False,
        "MultiAttachEnabled": False,
    }
    gp3 = {
        "VolumeId": "vol-0a1b2c3d4e5f60002",
        "VolumeType": "gp3",
        "Size": 500,
        "Iops": 12000,
        "Throughput": 500,
    }
    io2 = {
        "VolumeId": "vol-0a1b2c3d4e5f60003",
        "VolumeType": "io2",
        "Size": 200,
        "Iops": 32000,
    }

    assert limits_from_volume(gp2) == Limit(
        iops=600, speed=150, burst_iops=3000, burst_speed=250
    )
    assert limits_from_volume(gp3) == Limit(iops=12000, speed=500)
    assert limits_from_volume(io2) == Limit(iops=32000, speed=500)


def test_limits_from_malformed_volume():
    with pytest.raises(KeyError):
        limits_from_volume({"VolumeType": "gp3"})

    with pytest.raises(UnsupportedVolumeType):
        limits_from_volume({"VolumeType": "st1", "Size": 500})
