from __future__ import annotations


class CubitaError(Exception):
    pass


class ContentError(CubitaError):
    pass


class UpstreamUnavailableError(ContentError):
    def __init__(self, path: str, reason: str = "Request failed"):
        super().__init__(f"CMS unavailable for {path}: {reason}")
        self.path = path
        self.reason = reason


class ArtistNotFoundError(ContentError):
    def __init__(self, slug: str):
        super().__init__(f"Artist not found: {slug}")
        self.slug = slug


class InquiryError(CubitaError):
    pass


class InquiryValidationError(InquiryError):
    def __init__(self, errors: dict[str, str]):
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid inquiry fields: {fields}")
        self.errors = errors


class MailTransportError(InquiryError):
    def __init__(self, leg: str, reason: str = "Send failed"):
        super().__init__(f"Failed to send {leg} email: {reason}")
        self.leg = leg
        self.reason = reason


class MailConfigurationError(InquiryError):
    def __init__(self, missing: list[str]):
        super().__init__(f"Mail configuration errors: {', '.join(missing)}")
        self.missing = missing
