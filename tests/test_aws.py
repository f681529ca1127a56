"""
Tests for AWS instance type escalation
"""
import pytest

from escalator import aws
from escalator.errors import InstanceTypeNotSupportedError, InstanceTypeUnsupportedFormatError


class TestParse:
    """Test AWS instance type parsing"""

    def test_parse_bare_size(self):
        """Test instance type without a multiplier"""
        parsed = aws.parse("m6i.large")

        assert parsed.family == "m6i"
        assert parsed.size == "large"
        assert parsed.multiplier is None

    def test_parse_multiplier(self):
        """Test instance type with a multiplier"""
        parsed = aws.parse("c5.12xlarge")

        assert parsed.family == "c5"
        assert parsed.multiplier == 12
        assert parsed.size == "xlarge"

    def test_parse_hyphenated_family(self):
        """Test families with a suffix such as m7i-flex"""
        assert aws.parse("m7i-flex.2xlarge").family == "m7i-flex"

    @pytest.mark.parametrize("identifier", [
        "",
        "m6i",
        "m6i.",
        "M6I.large",
        "m6i.large.extra",
        " m6i.large",
        "m6i.2xlarge-foo",
        "Standard_D4s_v3",
    ])
    def test_parse_rejects_malformed(self, identifier):
        """Test malformed identifiers fail with a format error"""
        with pytest.raises(InstanceTypeUnsupportedFormatError) as exc:
            aws.parse(identifier)

        assert exc.value.identifier == identifier

    @pytest.mark.parametrize("identifier", ["m6i.2metal", "c5.4foo", "m6i.2large", "t3.8medium"])
    def test_multiplier_requires_xlarge(self, identifier):
        """Test a multiplier only combines with xlarge"""
        with pytest.raises(InstanceTypeUnsupportedFormatError) as exc:
            aws.next_instance_type(identifier)

        assert exc.value.identifier == identifier


class TestNextInstanceType:
    """Test AWS next instance type"""

    @pytest.mark.parametrize("current,expected", [
        ("m6i.large", "m6i.xlarge"),
        ("m6i.xlarge", "m6i.2xlarge"),
        ("m6i.2xlarge", "m6i.4xlarge"),
        ("m6i.4xlarge", "m6i.8xlarge"),
        ("m6i.8xlarge", "m6i.16xlarge"),
        ("r5.16xlarge", "r5.32xlarge"),
        ("m7i-flex.large", "m7i-flex.xlarge"),
    ])
    def test_next_size(self, current, expected):
        """Test the size doubles"""
        assert aws.next_instance_type(current) == expected

    @pytest.mark.parametrize("current", ["m6i.medium", "t3.small", "m5.metal", "t3.nano"])
    def test_unsupported_bare_size(self, current):
        """Test bare sizes other than large and xlarge have no successor"""
        with pytest.raises(InstanceTypeNotSupportedError) as exc:
            aws.next_instance_type(current)

        assert "instance type is not supported" in str(exc.value)
        assert current in str(exc.value)

    def test_zero_multiplier(self):
        """Test a zero multiplier cannot be doubled"""
        with pytest.raises(InstanceTypeNotSupportedError):
            aws.next_instance_type("m6i.0xlarge")

    def test_successor_keeps_family(self):
        """Test the family survives escalation"""
        parsed = aws.successor(aws.parse("c6gn.4xlarge"))

        assert parsed.family == "c6gn"
        assert parsed.size == "xlarge"
        assert parsed.multiplier == 8
