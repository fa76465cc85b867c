import dataclasses

import pytest

from eyes.models import PortOutcome, ScanConfig


def test_defaults():
    config = ScanConfig(target_address="127.0.0.1", ports=[80])
    assert config.concurrency == 1000
    assert config.timeout == 3
    assert config.verbose is False


def test_ports_are_stored_as_tuple():
    config = ScanConfig(target_address="127.0.0.1", ports=[80, 80, 22])
    assert config.ports == (80, 80, 22)


def test_config_is_immutable():
    config = ScanConfig(target_address="127.0.0.1", ports=(80,))
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.verbose = True


@pytest.mark.parametrize("kwargs", [
    {"concurrency": 0},
    {"concurrency": -3},
    {"timeout": 0},
    {"timeout": -1},
    {"ports": (65536,)},
    {"ports": (-1,)},
])
def test_invalid_values_rejected(kwargs):
    fields = {"target_address": "127.0.0.1", "ports": (80,)}
    fields.update(kwargs)
    with pytest.raises(ValueError):
        ScanConfig(**fields)


def test_only_open_outcome_is_open():
    assert [o for o in PortOutcome if o.is_open] == [PortOutcome.OPEN]
