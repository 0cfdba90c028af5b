"""Domains of the wsdlsoap package."""
