"""Output sinks for rendered pages."""

from noogle.infra.sinks.static_site import StaticSiteSink

__all__ = ["StaticSiteSink"]
