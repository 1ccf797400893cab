"""Self-hosted HTTP endpoint for the skill.

Provides a FastAPI endpoint that accepts an Alexa request envelope (JSON),
runs it through the same handlers the Lambda entry point uses and returns the
response envelope.
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from ask_sdk_core.exceptions import AskSdkException, SerializationException
from ask_sdk_model import RequestEnvelope
from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from zonaei import config
from zonaei.api_client import ProgramsClient
from zonaei.router import build_skill_builder

log = logging.getLogger(__name__)


def _dispatch(skill, payload: dict) -> JSONResponse:
    try:
        envelope = skill.serializer.deserialize(payload=json.dumps(payload), obj_type=RequestEnvelope)
        response = skill.invoke(request_envelope=envelope, context=None)
    except SerializationException as exc:
        raise HTTPException(status_code=400, detail="Malformed request envelope") from exc
    except AskSdkException as exc:
        log.warning("Skill rejected request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return JSONResponse(content=skill.serializer.serialize(response))


def create_app(client: Optional[ProgramsClient] = None) -> FastAPI:
    programs = client or ProgramsClient()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.skill = build_skill_builder(programs).create()
        try:
            yield
        finally:
            programs.close()

    app = FastAPI(title="Zona Ei Skill API", lifespan=lifespan)

    @app.post("/skill")
    async def invoke_skill(request: Request) -> Any:
        """Dispatch one request envelope and return the response envelope."""
        try:
            payload = await request.json()
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="Body is not JSON") from exc
        if not isinstance(payload, dict):
            raise HTTPException(status_code=400, detail="Body must be a JSON object")
        body = payload.get("request")
        if not isinstance(body, dict) or "type" not in body:
            raise HTTPException(status_code=400, detail="Missing request type")
        # handlers call the programs API synchronously
        return await run_in_threadpool(_dispatch, app.state.skill, payload)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok"})

    return app


app = create_app()

# If running directly, start the server (use uvicorn)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
