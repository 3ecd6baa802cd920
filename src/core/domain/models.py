"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde (argumentos de la CLI) sin acoplar el Core a httpx.
- Serialización directa a JSON para `--json`.

Nota:
- Estos modelos describen *qué* se comprueba, no *cómo* se hace la petición.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from core.domain.outcome import CheckOutcome
from core.errors import MismatchError


class CheckRequest(BaseModel):
    """Una invocación: URL objetivo, URL esperada y Host opcional."""

    target_url: str = Field(
        ...,
        min_length=1,
        description="URL a pedir. No se valida localmente; el transporte decide.",
    )
    expected_url: str = Field(
        ...,
        min_length=1,
        description="URL en la que debe terminar la cadena de redirecciones.",
    )
    host_override: str | None = Field(
        default=None,
        description="Valor de la cabecera Host para la petición inicial.",
    )

    @field_validator("host_override")
    @classmethod
    def _empty_host_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class RedirectHop(BaseModel):
    """Una respuesta 3xx atravesada durante la resolución."""

    url: str = Field(..., description="URL de la petición que produjo la redirección.")
    status_code: int = Field(..., ge=100, le=599)
    location: str | None = Field(
        default=None,
        description="Cabecera Location tal y como la envió el servidor.",
    )


class ResolvedRedirect(BaseModel):
    """Lo que devuelve un resolver tras seguir la cadena completa."""

    resolved_url: str = Field(
        ...,
        description="URL de la última petición enviada (no la del origen del body).",
    )
    status_code: int = Field(..., ge=100, le=599)
    hops: list[RedirectHop] = Field(default_factory=list)


class CheckResult(BaseModel):
    """Resultado de comparar la URL resuelta con la esperada."""

    target_url: str
    expected_url: str
    resolved_url: str
    matched: bool = Field(
        ...,
        description="Igualdad exacta de strings; sin normalizar barras, esquema ni escapes.",
    )
    status_code: int | None = None
    hops: list[RedirectHop] = Field(default_factory=list)

    @classmethod
    def from_resolution(cls, request: CheckRequest, resolution: ResolvedRedirect) -> CheckResult:
        return cls(
            target_url=request.target_url,
            expected_url=request.expected_url,
            resolved_url=resolution.resolved_url,
            matched=resolution.resolved_url == request.expected_url,
            status_code=resolution.status_code,
            hops=list(resolution.hops),
        )

    @property
    def outcome(self) -> CheckOutcome:
        return CheckOutcome.OK if self.matched else CheckOutcome.MISMATCH

    def raise_for_mismatch(self) -> CheckResult:
        """Lanza `MismatchError` si no coincide; si coincide, devuelve `self`."""

        if not self.matched:
            raise MismatchError(self)
        return self
