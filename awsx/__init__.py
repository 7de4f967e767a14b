"""awsx-lb-listener-rules - Normalized AWS ALB listener rules.

Reads the rules of an Application Load Balancer listener and flattens their
condition and action unions into one fixed-shape record per rule.
"""

__version__ = "0.1.0"

# Domain layer
# Application layer
from awsx.application import CredentialResolver, ListenerRulesService, create_listener_rules_service
from awsx.domain import (
    Action,
    Condition,
    CredentialSource,
    ListenerRule,
    ProviderConfig,
    flatten_rules,
)

# Re-export for convenience
__all__ = [
    "__version__",
    # Domain
    "Action",
    "Condition",
    "CredentialSource",
    "ListenerRule",
    "ProviderConfig",
    "flatten_rules",
    # Application
    "CredentialResolver",
    "ListenerRulesService",
    "create_listener_rules_service",
]
