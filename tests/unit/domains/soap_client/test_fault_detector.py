# ============================================================================
# Tests for FaultDetector
# ============================================================================
"""Unit tests for FaultDetector.

Detection is speculative: anything that is not a fault, including
unparsable bodies, must come back as None.
"""

from wsdlsoap.domains.soap_client.domain.entities import Fault
from wsdlsoap.domains.soap_client.infrastructure.external.soap import (
    SOAP11_ENVELOPE_NS,
    SOAP12_ENVELOPE_NS,
    FaultDetector,
)


class TestPositiveDetection:
    """Tests for bodies carrying a fault."""

    def test_code_and_description(self) -> None:
        """Should read Code and Description elements."""
        body = b"<Fault><Code>400</Code><Description>bad id</Description></Fault>"
        assert FaultDetector().detect(body) == Fault(code="400", description="bad id")

    def test_soap11_fault(self) -> None:
        """Should read faultcode, faultstring and detail of a SOAP 1.1 fault."""
        body = (
            b"<soap:Fault><faultcode>soap:Server</faultcode>"
            b"<faultstring>Server was unable to process request</faultstring>"
            b"<detail><reason>db down</reason></detail></soap:Fault>"
        )
        fault = FaultDetector().detect(body, {"soap": SOAP11_ENVELOPE_NS})
        assert fault == Fault(
            code="soap:Server",
            description="Server was unable to process request",
            detail="db down",
        )

    def test_soap12_fault(self) -> None:
        """Should unwrap Code/Value and Reason/Text of a SOAP 1.2 fault."""
        body = (
            b"<env:Fault><env:Code><env:Value>env:Sender</env:Value></env:Code>"
            b'<env:Reason><env:Text xml:lang="en">Invalid id</env:Text></env:Reason></env:Fault>'
        )
        fault = FaultDetector().detect(body, {"env": SOAP12_ENVELOPE_NS})
        assert fault is not None
        assert fault.code == "env:Sender"
        assert fault.description == "Invalid id"

    def test_surrounding_whitespace(self) -> None:
        body = b"\n  <Fault>\n    <Code>500</Code>\n    <Description>boom</Description>\n  </Fault>\n"
        fault = FaultDetector().detect(body)
        assert fault is not None
        assert fault.code == "500"

    def test_custom_tags(self) -> None:
        """Should honour custom element names."""
        detector = FaultDetector(fault_tags=("Error",), code_tags=("Id",), description_tags=("Text",))
        fault = detector.detect(b"<Error><Id>E1</Id><Text>nope</Text></Error>")
        assert fault == Fault(code="E1", description="nope")


class TestNoFault:
    """Tests for bodies that are not faults."""

    def test_regular_payload(self) -> None:
        assert FaultDetector().detect(b"<GetUserResponse><id>42</id></GetUserResponse>") is None

    def test_payload_with_code_child(self) -> None:
        """Should not treat a non-Fault element with a Code child as a fault."""
        assert FaultDetector().detect(b"<Result><Code>200</Code></Result>") is None

    def test_empty_code(self) -> None:
        """Should require a non-empty fault code."""
        assert FaultDetector().detect(b"<Fault><Code></Code><Description>x</Description></Fault>") is None

    def test_empty_body(self) -> None:
        assert FaultDetector().detect(b"") is None
        assert FaultDetector().detect(b"   \n") is None

    def test_unparsable_body(self) -> None:
        """Should swallow parse errors of the speculative read."""
        assert FaultDetector().detect(b"<<<not xml") is None

    def test_unbound_prefix(self) -> None:
        """Should return None when a prefix cannot be resolved."""
        assert FaultDetector().detect(b"<soap:Fault><faultcode>x</faultcode></soap:Fault>") is None
