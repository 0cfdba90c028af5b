"""
Core building blocks shared by all SOAP client components.
"""
