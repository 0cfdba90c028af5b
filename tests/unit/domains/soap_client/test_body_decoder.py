# ============================================================================
# Tests for BodyDecoder
# ============================================================================
"""Unit tests for BodyDecoder."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from wsdlsoap.core.domain.exceptions import DecodeError
from wsdlsoap.domains.soap_client.infrastructure.external.soap import BodyDecoder


class User(BaseModel):
    id: int
    name: str
    roles: list[str] = []


@dataclass
class UserRecord:
    id: str
    name: str = ""


BODY = b"<GetUserResponse><id>42</id><name>Ann</name><roles>admin</roles><roles>dev</roles></GetUserResponse>"


class TestTargets:
    """Tests for the supported target kinds."""

    def test_pydantic_model(self) -> None:
        """Should validate children of the payload element into the model."""
        user = BodyDecoder().decode(BODY, User)
        assert user == User(id=42, name="Ann", roles=["admin", "dev"])

    def test_dataclass(self) -> None:
        """Should construct the dataclass from matching children only."""
        record = BodyDecoder().decode(BODY, UserRecord)
        assert record == UserRecord(id="42", name="Ann")

    def test_dict(self) -> None:
        data = BodyDecoder().decode(BODY, dict)
        assert data == {"id": "42", "name": "Ann", "roles": ["admin", "dev"]}

    def test_nested_dict(self) -> None:
        body = b"<R><user><id>1</id><address><city>Lima</city></address></user></R>"
        assert BodyDecoder().decode(body, dict) == {"user": {"id": "1", "address": {"city": "Lima"}}}

    def test_text(self) -> None:
        assert BodyDecoder().decode(b"<EchoResponse>hello</EchoResponse>", str) == "hello"

    def test_bytes(self) -> None:
        """Should hand back the raw body untouched."""
        assert BodyDecoder().decode(BODY, bytes) == BODY

    def test_namespaced_payload(self) -> None:
        """Should match children by local name."""
        body = b'<m:GetUserResponse xmlns:m="urn:users"><m:id>7</m:id><m:name>Bo</m:name></m:GetUserResponse>'
        assert BodyDecoder().decode(body, User) == User(id=7, name="Bo")

    def test_prefix_bound_on_envelope(self) -> None:
        """Should resolve prefixes declared outside the body region."""
        body = b"<u:R><u:id>3</u:id><u:name>Cy</u:name></u:R>"
        user = BodyDecoder().decode(body, User, namespaces={"u": "urn:users"})
        assert user.id == 3

    def test_expected_element(self) -> None:
        assert BodyDecoder().decode(BODY, dict, element="GetUserResponse")["id"] == "42"

    def test_depth_limit(self) -> None:
        body = b"<R><a><b><c>deep</c></b></a></R>"
        assert BodyDecoder(max_depth=2).decode(body, dict) == {"a": {"b": {}}}


class TestDecodeErrors:
    """Tests for incompatible bodies and targets."""

    def test_validation_failure(self) -> None:
        """Should raise DecodeError when the model does not validate."""
        with pytest.raises(DecodeError) as exc_info:
            BodyDecoder().decode(b"<R><id>abc</id><name>x</name></R>", User)
        assert exc_info.value.details["target"] == "User"

    def test_missing_dataclass_field(self) -> None:
        with pytest.raises(DecodeError):
            BodyDecoder().decode(b"<R><name>x</name></R>", UserRecord)

    def test_unexpected_element(self) -> None:
        with pytest.raises(DecodeError):
            BodyDecoder().decode(BODY, dict, element="OtherResponse")

    def test_not_well_formed(self) -> None:
        with pytest.raises(DecodeError):
            BodyDecoder().decode(b"<R><id>1</R>", dict)

    def test_no_payload_element(self) -> None:
        with pytest.raises(DecodeError):
            BodyDecoder().decode(b"just text", dict)

    def test_unsupported_target(self) -> None:
        with pytest.raises(DecodeError):
            BodyDecoder().decode(BODY, int)
