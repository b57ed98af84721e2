"""
Agregação de erros por campo: executa validadores e junta as falhas em ValidationError.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from veritas.utils.outcome import ErrorKind, Invalid, ValidationOutcome


@dataclass(frozen=True)
class ValidationError:
    field: str
    error_type: ErrorKind
    message: str
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "type": self.error_type.value, "message": self.message, "value": self.value}


class Validator:
    def validate(self, field: str, value: Any, validator: Callable[..., ValidationOutcome], *args: Any) -> Optional[ValidationError]:
        """
        Executa um validador sobre o valor de um campo.
        Parâmetros:
            field (str): nome do campo, usado na mensagem de erro
            value (Any): valor a validar
            validator (Callable): função que retorna ValidationOutcome
            *args: parâmetros extras do validador (ex: min_length, max_length)
        Retorno:
            ValidationError se inválido, None caso contrário
        """
        outcome = validator(value, *args)
        if isinstance(outcome, Invalid):
            return ValidationError(field, outcome.kind, outcome.message, value)
        return None

    def validate_multiple(self, *validations: Callable[[], Optional[ValidationError]]) -> List[ValidationError]:
        """
        Executa todas as validações, na ordem, e retorna apenas os erros encontrados.
        """
        errors: List[ValidationError] = []
        for validation in validations:
            error = validation()
            if error is not None:
                errors.append(error)
        return errors

    def has_errors(self, errors: List[ValidationError]) -> bool:
        return len(errors) > 0
