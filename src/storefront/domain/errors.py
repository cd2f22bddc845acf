"""Domain-layer error definitions.

Malformed user input is never an exception in this package: rule evaluators
return an "Invalid ..." message or a `Failure` instead. The errors below are
raised only when rule *configuration* breaks an invariant.
"""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidRuleParametersError(DomainError):
    """Raised when a rule is configured with inconsistent bounds."""

    def __init__(self, rule: str, reason: str) -> None:
        super().__init__(f"Invalid parameters for {rule}: {reason}")
        self.rule = rule
        self.reason = reason


# ============================================================================
#                         Coupon catalog errors
# ============================================================================


class InvalidCouponError(DomainError):
    """Raised when a coupon violates the catalog invariants."""

    def __init__(self, code: object, reason: str) -> None:
        super().__init__(f"Invalid coupon {code!r}: {reason}")
        self.code = code
        self.reason = reason


class DuplicateCouponError(InvalidCouponError):
    """Raised when a catalog lists the same coupon code twice."""

    def __init__(self, code: str) -> None:
        super().__init__(code, "code appears more than once in the catalog")
