"""
Router FastAPI — endpoints page_binding.

POST /page-binding/resolve     → {template, scope} → texte résolu + variables
POST /page-binding/render      → {manifest, mode, page} → ResolvedPage
POST /page-binding/validate    → ManifestPage → {"valid": bool, "error"?}
GET  /page-binding/catalog     → blocs disponibles + leurs JSON schemas
GET  /page-binding/page-range  → plage de pages (null = ellipse)
GET  /page-binding/paginate/{slug} → page d'une collection + métadonnées
"""
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from . import config
from .blocks import BLOCK_REGISTRY
from .core.bindings import extract_binding_variables, has_bindings, resolve_bindings
from .core.pagination import page_range
from .manifest.parser import ManifestResolver
from .manifest.schema import ManifestPage, ResolvedPage
from .sources import StaticDataSource


class ResolveRequest(BaseModel):
    template: str = ""
    scope: Dict[str, Any] = Field(default_factory=dict)


class ResolveResponse(BaseModel):
    result: str
    has_bindings: bool
    variables: List[str]


class RenderRequest(BaseModel):
    manifest: ManifestPage
    mode: Literal["edit", "render"] = "render"
    page: int = 1


def create_router(source: Optional[StaticDataSource] = None) -> APIRouter:
    """Construit le router sur une source de données (mock par défaut)."""
    router = APIRouter(prefix="/page-binding", tags=["page_binding"])
    source = source or StaticDataSource()

    @router.post("/resolve", response_model=ResolveResponse, summary="Résout les {{bindings}} d'un texte")
    def resolve(req: ResolveRequest) -> ResolveResponse:
        return ResolveResponse(
            result=resolve_bindings(req.template, req.scope),
            has_bindings=has_bindings(req.template),
            variables=extract_binding_variables(req.template),
        )

    @router.post("/render", response_model=ResolvedPage, summary="Résout un manifest complet")
    def render(req: RenderRequest) -> ResolvedPage:
        # Un resolver par requête : pas de mémo partagé entre threads
        return ManifestResolver(source).resolve(req.manifest, mode=req.mode, page=req.page)

    @router.post("/validate", summary="Valide un manifest sans le renvoyer")
    def validate(manifest: ManifestPage) -> dict:
        """Valide la structure d'un manifest (types, champs requis, blocs connus)."""
        try:
            ManifestResolver(source).resolve(manifest, mode="edit")
            return {"valid": True}
        except (ValidationError, ValueError) as e:
            return {"valid": False, "error": str(e)}

    @router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
    def catalog() -> JSONResponse:
        catalog_data = [
            {
                "block_type":   block_type,
                "is_container": cls.is_container,
                "schema":       cls.model_json_schema(),
            }
            for block_type, cls in BLOCK_REGISTRY.items()
        ]
        return JSONResponse({"blocks": catalog_data})

    @router.get("/page-range", summary="Numéros de pages à afficher (null = ellipse)")
    def get_page_range(
        current_page: int = Query(1, ge=1),
        total_pages: int = Query(0, ge=0),
        sibling_count: Optional[int] = Query(None, ge=0, le=3),
    ) -> dict:
        siblings = config.default_sibling_count() if sibling_count is None else sibling_count
        return {"pages": page_range(current_page, total_pages, siblings)}

    @router.get("/paginate/{slug}", summary="Page d'une collection de la source")
    def get_page(
        slug: str,
        page: int = 1,
        page_size: Optional[int] = Query(None, ge=1, le=100),
    ) -> JSONResponse:
        size = config.default_page_size() if page_size is None else page_size
        result = source.fetch_page(slug, page=page, page_size=size)
        return JSONResponse(result.model_dump(by_alias=True))

    return router
