"""Custom exceptions for campaign insights."""


class CampaignInsightsError(Exception):
    """Base exception for campaign insights errors."""

    pass


class FieldRegistryError(CampaignInsightsError):
    """Failed to load or compile the field rule registry."""

    pass


class UpstreamError(CampaignInsightsError):
    """Base exception for failures talking to the report webhook."""

    pass


class UpstreamHTTPError(UpstreamError):
    """Webhook answered with a non-success status code."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP error! status: {status_code} ({url})")


class UpstreamConnectionError(UpstreamError):
    """Webhook could not be reached (DNS, connect, timeout)."""

    pass


class UpstreamPayloadError(UpstreamError):
    """Webhook body was not the JSON shape we expect."""

    pass
