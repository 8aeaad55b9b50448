"""Unit tests for TimeoutConfiguration."""

from datetime import timedelta

import pytest

from driverwire.errors import ResponseDecodeError
from driverwire.protocol.timeouts import TimeoutConfiguration


def secs(n: float) -> timedelta:
    return timedelta(seconds=n)


class TestMerge:
    """Test merge()."""

    def test_unset_fields_keep_current_values(self):
        current = TimeoutConfiguration(script=secs(60), page_load=secs(60), implicit=secs(30))

        merged = current.merge(TimeoutConfiguration(implicit=secs(0)))

        assert merged == TimeoutConfiguration(
            script=secs(60), page_load=secs(60), implicit=secs(0)
        )

    def test_sequence_of_single_field_updates(self):
        """Each update changes exactly one field."""
        config = TimeoutConfiguration(script=secs(60), page_load=secs(60), implicit=secs(30))

        config = config.merge(TimeoutConfiguration(implicit=secs(0)))
        assert (config.script, config.page_load, config.implicit) == (secs(60), secs(60), secs(0))

        config = config.merge(TimeoutConfiguration(implicit=secs(10)))
        assert (config.script, config.page_load, config.implicit) == (secs(60), secs(60), secs(10))

        config = config.merge(TimeoutConfiguration(page_load=secs(10)))
        assert (config.script, config.page_load, config.implicit) == (secs(60), secs(10), secs(10))

        config = config.merge(TimeoutConfiguration(script=secs(10)))
        assert (config.script, config.page_load, config.implicit) == (secs(10), secs(10), secs(10))

    def test_merge_does_not_mutate(self):
        current = TimeoutConfiguration(script=secs(1))

        current.merge(TimeoutConfiguration(script=secs(2)))

        assert current.script == secs(1)

    def test_empty_partial_is_identity(self):
        current = TimeoutConfiguration(script=secs(1), page_load=secs(2), implicit=secs(3))

        assert current.merge(TimeoutConfiguration()) == current


class TestWireForm:
    """Test to_wire() and from_wire()."""

    def test_to_wire_uses_millis_and_wire_names(self):
        config = TimeoutConfiguration(script=secs(30), page_load=secs(300), implicit=secs(0.5))

        assert config.to_wire() == {"script": 30000, "pageLoad": 300000, "implicit": 500}

    def test_to_wire_omits_unset_fields(self):
        assert TimeoutConfiguration(page_load=secs(10)).to_wire() == {"pageLoad": 10000}

    def test_from_wire(self):
        config = TimeoutConfiguration.from_wire(
            {"script": 30000, "pageLoad": 300000, "implicit": 0}
        )

        assert config == TimeoutConfiguration(
            script=secs(30), page_load=secs(300), implicit=secs(0)
        )

    def test_from_wire_null_script_means_no_timeout(self):
        config = TimeoutConfiguration.from_wire({"script": None, "pageLoad": 1000, "implicit": 0})

        assert config.script is None
        assert config.page_load == secs(1)

    def test_from_wire_ignores_unknown_keys(self):
        config = TimeoutConfiguration.from_wire(
            {"script": 1, "pageLoad": 2, "implicit": 3, "vendor:extra": 4}
        )

        assert config.implicit == timedelta(milliseconds=3)

    @pytest.mark.parametrize(
        "payload",
        [None, [], "30000", {"script": "slow"}, {"implicit": True}],
    )
    def test_from_wire_rejects_malformed(self, payload):
        with pytest.raises(ResponseDecodeError):
            TimeoutConfiguration.from_wire(payload)

    def test_wire_round_trip(self):
        wire = {"script": 5000, "pageLoad": 10000, "implicit": 250}

        assert TimeoutConfiguration.from_wire(wire).to_wire() == wire
