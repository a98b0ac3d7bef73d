"""
Контракт разложения {sign, digits, scale}

construct() принимает тройку от авторов расширений; перед нормализацией
она проверяется по schema/representation.json (Draft 2020-12).
Схема читается один раз при импорте, валидатор создаётся один раз.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

from jsonschema import Draft202012Validator

REPRESENTATION_SCHEMA_PATH: Final = Path(__file__).parent / "schema" / "representation.json"

with open(REPRESENTATION_SCHEMA_PATH, "r", encoding="utf-8") as f:
    REPRESENTATION_SCHEMA: Final[Dict[str, Any]] = json.load(f)

_REPRESENTATION_VALIDATOR: Final = Draft202012Validator(REPRESENTATION_SCHEMA)


def validate_representation(data: Dict[str, Any]) -> None:
    """
    Проверка тройки {sign, digits, scale}.

    Raises:
        jsonschema.ValidationError: Первое найденное нарушение контракта
            (sign вне {-1, 0, 1}, digits не строка цифр, scale не целое)
    """
    _REPRESENTATION_VALIDATOR.validate(data)
