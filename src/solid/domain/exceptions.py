"""Domain-level exceptions.

The examples themselves never fail: overdrafts, negative deposits and
out-of-range discounts are accepted silently. These exceptions cover
malformed input at the edges (unparseable amounts, unknown names) so
the CLI layer can catch them uniformly and display a friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input could not be turned into a domain value."""
