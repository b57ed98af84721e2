"""
Serviço de validação: encapsula o registro de validadores e a tradução dos resultados para HTTP.
Facilita testes, manutenção e reuso.
"""
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Tuple

from fastapi import HTTPException

from veritas.utils.cnpj_utils import CNPJUtils
from veritas.utils.cpf_utils import CPFUtils
from veritas.utils.outcome import ValidationOutcome
from veritas.validator import ValidationError, Validator
from veritas.validators import number
from veritas.validators.email import validate_email
from veritas.validators.phone import validate_phone
from veritas.validators.strings import validate_string_length
from veritas.validators.url import validate_url

# kind -> (validador, nomes dos parâmetros obrigatórios, na ordem posicional)
Registry = Dict[str, Tuple[Callable[..., ValidationOutcome], Tuple[str, ...]]]


class ValidationService:
    def __init__(self, check_url_reachability: bool = True, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            check_url_reachability (bool): se True, o validador de URL faz um HEAD na URL
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            import logging
            logger = logging.getLogger("validation_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger
        self.validator = Validator()
        self.registry: Registry = {
            "cpf": (CPFUtils.validate_cpf, ()),
            "cnpj": (CNPJUtils.validate_cnpj, ()),
            "email": (validate_email, ()),
            "phone": (validate_phone, ()),
            "url": (partial(validate_url, check_reachability=check_url_reachability), ()),
            "number": (number.is_number, ()),
            "positive": (number.is_positive, ()),
            "negative": (number.is_negative, ()),
            "even": (number.is_even, ()),
            "prime": (number.is_prime, ()),
            "bigger_than": (number.bigger_than, ("than",)),
            "smaller_than": (number.smaller_than, ("than",)),
            "between": (number.between, ("min", "max")),
            "string": (validate_string_length, ("min_length", "max_length")),
        }

    def kinds(self) -> List[str]:
        return sorted(self.registry)

    def _resolve(self, kind: str, params: Optional[Dict[str, Any]]) -> Tuple[Callable[..., ValidationOutcome], List[Any]]:
        """
        Localiza o validador e ordena seus parâmetros.
        Levanta HTTPException 404 para kind desconhecido e 400 para kind ou parâmetros inválidos.
        """
        if not isinstance(kind, str):
            self.logger.warning(f"kind não textual: kind={kind}")
            raise HTTPException(status_code=400, detail="kind deve ser texto")
        if kind not in self.registry:
            self.logger.warning(f"Validador desconhecido: kind={kind}")
            raise HTTPException(status_code=404, detail=f"Validador desconhecido: {kind}")
        validator, param_names = self.registry[kind]
        params = params or {}
        if not isinstance(params, dict):
            raise HTTPException(status_code=400, detail="params deve ser um objeto")

        missing = [name for name in param_names if name not in params]
        unexpected = [name for name in params if name not in param_names]
        if missing or unexpected:
            self.logger.warning(f"Parâmetros inválidos para kind={kind}: faltando={missing}, inesperados={unexpected}")
            raise HTTPException(status_code=400, detail=f"Parâmetros de {kind}: {', '.join(param_names) or 'nenhum'}")

        args = [params[name] for name in param_names]
        for name, arg in zip(param_names, args):
            if isinstance(arg, bool) or not isinstance(arg, (int, float)):
                self.logger.warning(f"Parâmetro não numérico: kind={kind}, {name}={arg}")
                raise HTTPException(status_code=400, detail=f"{name} deve ser numérico")
        return validator, args

    def validate(self, kind: str, value: Any, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Valida um único valor.
        Parâmetros:
            kind (str): tipo de validação (cpf, cnpj, email, ...)
            value (Any): valor a validar
            params (dict, opcional): parâmetros do validador
        Retorno:
            dict: {"kind": kind, "valid": True}
        """
        validator, args = self._resolve(kind, params)
        error = self.validator.validate(kind, value, validator, *args)
        if error is not None:
            self.logger.info(f"Valor inválido: kind={kind}, motivo={error.message}")
            raise HTTPException(status_code=422, detail={"field": error.field, "type": error.error_type.value, "message": error.message})
        self.logger.info(f"Valor válido: kind={kind}")
        return {"kind": kind, "valid": True}

    def validate_fields(self, fields: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Valida vários campos e agrega os erros, sem parar no primeiro.
        Parâmetros:
            fields (list): itens {"field", "kind", "value", "params"}
        Retorno:
            dict: {"valid": bool, "errors": [...]}
        """
        validations = []
        for item in fields:
            if not isinstance(item, dict) or "field" not in item or "kind" not in item or "value" not in item:
                self.logger.warning(f"Item de validação incompleto: {item}")
                raise HTTPException(status_code=400, detail="Campos obrigatórios em cada item: field, kind, value")
            validator, args = self._resolve(item["kind"], item.get("params"))
            validations.append(partial(self.validator.validate, str(item["field"]), item["value"], validator, *args))

        errors: List[ValidationError] = self.validator.validate_multiple(*validations)
        result = {"valid": not self.validator.has_errors(errors), "errors": [error.to_dict() for error in errors]}
        self.logger.info(f"Validação de campos concluída: total={len(fields)}, erros={len(errors)}")
        return result
