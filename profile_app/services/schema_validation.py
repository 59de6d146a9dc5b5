# profile_app/services/schema_validation.py
from typing import List

from profile_app.core.errors import SchemaValidationError
from profile_app.services.store.base import DocumentValidationError


def _verb(fields: List[str]) -> str:
    return 'are' if len(fields) > 1 else 'is'


def aggregate_schema_validation_errors(error: DocumentValidationError) -> SchemaValidationError:
    """
    저장소가 보고한 스키마 위반 규칙들을 하나의 설명 문자열로 합칩니다.

    예) {"rules_not_satisfied": [{"operator_name": "required", "missing_properties": ["name"]}]}
        -> "name is required"
    """
    messages = []
    rules = (getattr(error, 'details', None) or {}).get('rules_not_satisfied') or []
    for rule in rules:
        missing = rule.get('missing_properties')
        if missing:
            operator = rule.get('operator_name') or 'required'
            messages.append(f"{','.join(missing)} {_verb(missing)} {operator}")

        not_satisfied = rule.get('properties_not_satisfied')
        if not_satisfied:
            names = [prop.get('property_name', '') for prop in not_satisfied]
            messages.append(f"{','.join(names)} {_verb(names)} required")

    return SchemaValidationError('; '.join(messages))
