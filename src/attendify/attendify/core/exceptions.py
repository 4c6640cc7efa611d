class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a tenant or session identifier does not exist."""


class UnknownPerson(NotFoundError):
    """Raised when an attendance write targets a person missing from the directory."""

    def __init__(self, person_id: str):
        super().__init__(f"Unknown person: {person_id}")
        self.person_id = person_id


class FeatureDisabled(DomainError):
    """Raised when a tenant lacks the feature flag an operation requires."""

    def __init__(self, tenant_id: str, feature: str):
        super().__init__(f"Feature '{feature}' is disabled for tenant {tenant_id}")
        self.tenant_id = tenant_id
        self.feature = feature


class SummarizerError(Exception):
    """Base for failures of the external narrative summarizer."""


class SummarizerUnavailable(SummarizerError):
    """Provider unreachable, timed out, or rejected the credentials."""


class SummarizerMalformed(SummarizerError):
    """Provider answered with something that is not a valid report."""
