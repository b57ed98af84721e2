from typing import Any, Dict, List
from fastapi import FastAPI, HTTPException, Path
from fastapi.concurrency import run_in_threadpool
import logging
import uvicorn
import os

from veritas.api.services.validation_service import ValidationService

logger = logging.getLogger(__name__)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
URL_CHECK_REACHABILITY = os.getenv("URL_CHECK_REACHABILITY", "true").lower() in ("1", "true", "yes")

app = FastAPI(title="Veritas Validation API", version="1.0.0")

validation_service = ValidationService(check_url_reachability=URL_CHECK_REACHABILITY)


@app.on_event("startup")
async def on_startup() -> None:
    """
    Evento de inicialização da API.
    Apenas registra a configuração ativa.
    """
    logger.info(f"Iniciando API de validação: validadores={validation_service.kinds()}, url_check={URL_CHECK_REACHABILITY}")


@app.get("/")
async def root() -> dict:
    """
    Endpoint de status da API.
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


#########
@app.get("/api/v1/validators")
async def list_validators() -> List[str]:
    """
    Lista os tipos de validação suportados.
    Parâmetros: None
    Retorno:
        List[str]: tipos em ordem alfabética
    """
    kinds = validation_service.kinds()
    logger.info(f"Listando validadores: total={len(kinds)}")
    return kinds


#########
@app.post("/api/v1/validate/{kind}")
async def validate_value(payload: Dict[str, Any], kind: str = Path(..., description="Tipo de validação")) -> Dict[str, Any]:
    """
    Valida um único valor.
    Parâmetros:
        payload (dict): {"value": ..., "params": {...}}
        kind (str): tipo de validação
    Retorno:
        dict: {"kind": kind, "valid": True}; valor inválido retorna 422
    """
    logger.info(f"Recebendo validação: kind={kind}, payload={payload}")
    if "value" not in payload:
        logger.warning(f"Payload sem value: {payload}")
        raise HTTPException(status_code=400, detail="Campo obrigatório: value")
    # A validação de URL pode fazer I/O de rede
    return await run_in_threadpool(validation_service.validate, kind, payload["value"], payload.get("params"))


#########
@app.post("/api/v1/validate")
async def validate_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida vários campos de uma vez e retorna todos os erros encontrados.
    Parâmetros:
        payload (dict): {"fields": [{"field", "kind", "value", "params"}, ...]}
    Retorno:
        dict: {"valid": bool, "errors": [...]}
    """
    fields = payload.get("fields")
    if not isinstance(fields, list):
        logger.warning(f"Payload sem lista de fields: {payload}")
        raise HTTPException(status_code=400, detail="Campo obrigatório: fields (lista)")
    result = await run_in_threadpool(validation_service.validate_fields, fields)
    logger.info(f"Validação de campos processada: retorno={result}")
    return result


if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
