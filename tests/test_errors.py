import pytest

from icecore.errors import (
    AttributeNotFoundError,
    AttributeSizeError,
    ClosedPipeError,
    DetermineNetworkTypeError,
    ExternalMappedIPNotFoundError,
    IceError,
    IntegrityMismatchError,
    InvalidNAT1To1IPMappingError,
    NoTCPMuxAvailableError,
    ShortBufferError,
    StunDecodeError,
    TCPMuxNotInitializedError,
    UnknownRoleError,
    UnsupportedNAT1To1IPCandidateTypeError,
    UsernameMismatchError,
)


@pytest.mark.parametrize(
    "error_class, message",
    [
        (InvalidNAT1To1IPMappingError, "invalid 1:1 NAT IP mapping"),
        (UnsupportedNAT1To1IPCandidateTypeError, "unsupported 1:1 NAT IP candidate type"),
        (ExternalMappedIPNotFoundError, "external mapped IP not found"),
        (DetermineNetworkTypeError, "unable to determine networkType"),
        (UnknownRoleError, "unknown role"),
        (UsernameMismatchError, "username mismatch"),
        (TCPMuxNotInitializedError, "TCPMux is not initialized"),
        (NoTCPMuxAvailableError, "no TCP mux is available"),
    ],
)
def test_default_messages(error_class, message):
    err = error_class()
    assert isinstance(err, IceError)
    assert str(err) == message


@pytest.mark.parametrize(
    "error_class",
    [
        InvalidNAT1To1IPMappingError,
        UnsupportedNAT1To1IPCandidateTypeError,
        ExternalMappedIPNotFoundError,
        DetermineNetworkTypeError,
        UnknownRoleError,
        UsernameMismatchError,
        TCPMuxNotInitializedError,
        NoTCPMuxAvailableError,
        ClosedPipeError,
        ShortBufferError,
        AttributeNotFoundError,
        AttributeSizeError,
        IntegrityMismatchError,
        StunDecodeError,
    ],
)
def test_every_error_is_an_ice_error_with_custom_message(error_class):
    detail = "mapping for 10.0.0.1 rejected"
    with pytest.raises(IceError) as excinfo:
        raise error_class(detail)
    assert type(excinfo.value) is error_class
    assert str(excinfo.value) == "mapping for 10.0.0.1 rejected"


def test_value_errors_are_catchable_as_value_error():
    mapping_error = InvalidNAT1To1IPMappingError()
    role_error = UnknownRoleError()
    assert isinstance(mapping_error, ValueError)
    assert isinstance(role_error, ValueError)
    assert str(mapping_error) == "invalid 1:1 NAT IP mapping"
    assert str(role_error) == "unknown role"


def test_lookup_errors_are_catchable_as_lookup_error():
    not_found = ExternalMappedIPNotFoundError()
    attribute_missing = AttributeNotFoundError()
    assert isinstance(not_found, LookupError)
    assert isinstance(attribute_missing, LookupError)
    assert isinstance(attribute_missing, IceError)
    assert str(not_found) == "external mapped IP not found"