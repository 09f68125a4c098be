"""Errors raised while talking to the upstream OAuth and catalog APIs."""


class GatewayError(Exception):
    pass


class ConfigurationError(GatewayError):
    """Client credentials or access token missing."""


class TransportError(GatewayError):
    """The request never produced a response (connect error, timeout...)."""


class DecodeError(GatewayError):
    """The response body is not the JSON shape we expected."""
