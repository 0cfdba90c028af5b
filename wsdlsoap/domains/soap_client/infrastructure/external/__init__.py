"""External collaborators: SOAP codec and client, HTTP transport, WSDL provider."""
