"""FastAPI application exposing template generation to editor plugins."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..classifier import classify
from .. import __version__
from ..config import ConfigError, GenerationOptions
from ..generator import DocGenerator


class OptionsPayload(BaseModel):
    include_examples: bool = True
    examples_only_for_public_or_extern: bool = False
    include_safety_details: bool = False
    gate_struct_examples: bool = False

    def to_options(self) -> GenerationOptions:
        return GenerationOptions(
            include_examples=self.include_examples,
            examples_only_for_public_or_extern=self.examples_only_for_public_or_extern,
            include_safety_details=self.include_safety_details,
            gate_struct_examples=self.gate_struct_examples,
        )


class SignatureRequest(BaseModel):
    lines: List[str]
    cursor_line: int


class SignatureResponse(BaseModel):
    signature: Optional[str] = None


class GenerateRequest(BaseModel):
    lines: List[str]
    cursor_line: int
    options: Optional[OptionsPayload] = None


class GenerateResponse(BaseModel):
    status: str
    template: Optional[str] = None
    kind: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_generator() -> DocGenerator:
    return DocGenerator()


def create_app(
    generator_factory: Callable[[], DocGenerator] = _default_generator,
) -> FastAPI:
    """Create the FastAPI application exposing rustdocstring operations."""

    app = FastAPI(title="rustdocstring", version=__version__)

    def get_generator() -> DocGenerator:
        return generator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/signature", response_model=SignatureResponse)
    async def signature(
        payload: SignatureRequest,
        generator: DocGenerator = Depends(get_generator),
    ) -> SignatureResponse:
        found = generator.scanner.scan(payload.lines, payload.cursor_line)
        return SignatureResponse(signature=found)

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        generator: DocGenerator = Depends(get_generator),
    ) -> GenerateResponse:
        options = payload.options.to_options() if payload.options else GenerationOptions()
        found = generator.scanner.scan(payload.lines, payload.cursor_line)
        if found is None:
            return GenerateResponse(status="skipped")
        template = generator.generate_doc(found, options)
        if template is None:
            return GenerateResponse(status="skipped")
        kind = classify(found)
        return GenerateResponse(
            status="ok",
            template=template,
            kind=kind.value if kind else None,
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, generator: DocGenerator | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    factory = (lambda: generator) if generator is not None else _default_generator
    app = create_app(factory)
    uvicorn.run(app, host=host, port=port)
