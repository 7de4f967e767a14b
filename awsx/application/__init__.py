"""Application layer - Use cases and business logic."""
from awsx.application.credential_resolver import CredentialResolver
from awsx.application.listener_rules_service import (
    ListenerRulesService,
    create_listener_rules_service,
)
from awsx.application.normalizer import normalize_rule, normalize_rules

__all__ = [
    "CredentialResolver",
    "ListenerRulesService",
    "create_listener_rules_service",
    "normalize_rule",
    "normalize_rules",
]
