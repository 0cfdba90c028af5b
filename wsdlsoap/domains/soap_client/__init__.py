"""SOAP client domain.

Layers:
- domain: service definitions, envelopes, faults, parameters
- application: ports for the WSDL provider and the HTTP transport
- infrastructure: envelope codec, fault detector, body decoder, client
  and the default httpx-based collaborators
"""
