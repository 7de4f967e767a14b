"""Value objects for listener rule normalization."""
from awsx.domain.value_objects.action_type import ActionType
from awsx.domain.value_objects.condition_field import ConditionField
from awsx.domain.value_objects.provider_config import ProviderConfig, validate_session_name

__all__ = ["ActionType", "ConditionField", "ProviderConfig", "validate_session_name"]
