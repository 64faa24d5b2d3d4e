"""Demo Routes — static greetings and a forced failure, no persistence.

Invariants:
    - Mounted at the root, outside the versioned API prefix
    - GET /error always raises; the request boundary turns it into a 500
"""

import logging
from datetime import datetime

from fastapi import APIRouter

logger = logging.getLogger(__name__)
router = APIRouter(tags=["demo"])


def _stamp() -> str:
    now = datetime.now()
    return f"{now:%d/%m/%Y} {now:%H:%M:%S}"


@router.get("/")
async def root():
    logger.info("Root requested")
    return {"message": f"raiz {_stamp()}"}


@router.get("/hola")
async def hola():
    return {"message": f"hello {_stamp()}"}


@router.get("/hola/{param}")
async def hola_param(param: str):
    logger.info(f"Hola with param {param}")
    return {"message": f"hello {_stamp()} PARAM {param}"}


@router.get("/error")
async def forced_error():
    """Raise on purpose to exercise the error boundary."""
    logger.info("Forcing an error")
    raise RuntimeError("error forzado")
