"""
Manifest resolver — ManifestPage → ResolvedPage.

Pour chaque bloc :
  1. le binding du bloc (data / paginated_data / boucle repeater) produit 1..n scopes
  2. pour chaque scope : seed résolu ({{...}}), bloc instancié depuis le registry
  3. les enfants sont résolus sous ce scope (ScopeStack)
"""
import logging
from typing import Dict, List, Optional, Tuple

from ..blocks import BLOCK_REGISTRY, PaginatedDataBlock, PaginationBlock, RepeaterBlock
from ..core.bindings import INDEX_VARIABLE, resolve_bindings, resolve_props
from ..core.iteration import IterationMode, bind_scopes, find_array_variable, iterate
from ..core.pagination import PAGINATION_VARIABLE, pagination_controls
from ..core.scope import Scope, ScopeProvider, ScopeStack
from ..sources import StaticDataSource
from .schema import ManifestBlockConfig, ManifestPage, ResolvedBlock, ResolvedPage

log = logging.getLogger(__name__)

# Sans pagination, toute la collection est exposée (plafond de sécurité)
_UNPAGED_LIMIT = 1000


def _block_class(cfg: ManifestBlockConfig):
    block_cls = BLOCK_REGISTRY.get(cfg.block_type)
    if block_cls is None:
        raise ValueError(f"Unknown block {cfg.block_type!r}. Registry: {list(BLOCK_REGISTRY)}")
    if cfg.children and not block_cls.is_container:
        raise ValueError(f"Block {cfg.block_type!r} does not accept children")
    return block_cls


class ManifestResolver:
    """
    Résout un manifest contre une source de données.

    Les scopes sont mémoïsés par position de bloc : résoudre deux fois le même
    manifest avec les mêmes données réutilise les mêmes objets Scope. Chaque passe
    travaille sur sa propre table d'emplacements ; seuls ceux visités par la
    dernière passe sont conservés.
    Usage:
        >>> resolver = ManifestResolver(StaticDataSource())
        >>> page = resolver.resolve(manifest, mode="render", page=2)
    """

    def __init__(self, source: Optional[StaticDataSource] = None):
        self.source = source or StaticDataSource()
        self._providers: Dict[str, ScopeProvider] = {}

    def _provider(self, visited: Dict[str, ScopeProvider], key: str) -> ScopeProvider:
        slot = visited.get(key)
        if slot is None:
            slot = visited[key] = self._providers.get(key) or ScopeProvider()
        return slot

    # ── API ──────────────────────────────────────────────────────────────────

    def resolve(
        self,
        manifest: ManifestPage,
        mode: IterationMode = "render",
        page: int = 1,
    ) -> ResolvedPage:
        visited: Dict[str, ScopeProvider] = {}
        root = self._provider(visited, "").provide(None, manifest.variables)
        stack = ScopeStack(root)

        blocks: List[ResolvedBlock] = []
        for position, cfg in enumerate(manifest.blocks):
            blocks.extend(self._resolve_node(visited, cfg, position, "", stack, mode, page))

        self._providers = visited

        return ResolvedPage(
            page_type=manifest.page_type,
            title=resolve_bindings(manifest.title, root),
            mode=mode,
            blocks=blocks,
        )

    # ── Parcours ─────────────────────────────────────────────────────────────

    def _resolve_node(
        self,
        visited: Dict[str, ScopeProvider],
        cfg: ManifestBlockConfig,
        position: int,
        prefix: str,
        stack: ScopeStack,
        mode: IterationMode,
        page: int,
    ) -> List[ResolvedBlock]:
        block_cls = _block_class(cfg)
        base_key = f"{prefix}{cfg.id or f'{cfg.block_type}-{position}'}"

        structure_cls = block_cls.model_fields["structure"].default.__class__
        seed_cls      = block_cls.model_fields["seed"].default.__class__
        structure     = structure_cls(**cfg.structure)
        bindings      = {
            name: getattr(cfg, name)
            for name in ("data", "paginated_data")
            if name in block_cls.model_fields and getattr(cfg, name) is not None
        }

        scopes, iterated = self._scopes_for(visited, cfg, block_cls, structure, base_key, stack.current, mode, page)

        resolved: List[ResolvedBlock] = []
        for scope in scopes:
            index = scope.lookup(INDEX_VARIABLE) if iterated else None
            key = base_key if index is None else f"{base_key}:{index}"

            with stack.enter(scope):
                block = block_cls(
                    block_type=cfg.block_type,
                    css_class=cfg.css_class,
                    id=cfg.id,
                    structure=structure,
                    seed=seed_cls(**resolve_props(cfg.seed, scope)),
                    **bindings,
                )
                children: List[ResolvedBlock] = []
                for child_position, child in enumerate(cfg.children):
                    children.extend(
                        self._resolve_node(visited, child, child_position, f"{key}/", stack, mode, page)
                    )

            controls = None
            if isinstance(block, PaginationBlock):
                controls = pagination_controls(scope, block.structure.sibling_count)

            resolved.append(ResolvedBlock(
                key=key, block=block, index=index, children=children, controls=controls,
            ))
        return resolved

    def _scopes_for(
        self,
        visited: Dict[str, ScopeProvider],
        cfg: ManifestBlockConfig,
        block_cls,
        structure,
        key: str,
        scope: Scope,
        mode: IterationMode,
        page: int,
    ) -> Tuple[List[Scope], bool]:
        """Scopes produits par le binding du bloc + indicateur d'itération."""
        if block_cls is PaginatedDataBlock:
            return [self._paginated_scope(visited, cfg, key, scope, page)], False

        if block_cls is RepeaterBlock:
            variable = find_array_variable(scope) if structure.loop_data else None
            if variable is None:
                return [scope], False
            derived = iterate(scope, variable, mode, max_items=structure.max_items)
        elif "data" in block_cls.model_fields and cfg.data is not None and cfg.data.enabled:
            value = self.source.get(cfg.data.source)
            if value is None:
                log.debug("Bloc %s : source %r vide — rendu sans binding", key, cfg.data.source)
            derived = bind_scopes(cfg.data, scope, value, mode)
        else:
            return [scope], False

        iterated = any(INDEX_VARIABLE in s.local for s in derived if s is not scope)
        stable = [
            self._provider(visited, f"{key}#{i}").provide(scope, s.local) if s is not scope else s
            for i, s in enumerate(derived)
        ]
        return stable, iterated

    def _paginated_scope(
        self,
        visited: Dict[str, ScopeProvider],
        cfg: ManifestBlockConfig,
        key: str,
        scope: Scope,
        page: int,
    ) -> Scope:
        binding = cfg.paginated_data
        if binding is None or not binding.enabled:
            return scope

        if binding.enable_pagination:
            result = self.source.fetch_page(binding.source, page=page, page_size=binding.page_size)
            variables = {
                binding.as_:         result.data,
                PAGINATION_VARIABLE: result.pagination.to_scope(),
            }
        else:
            result = self.source.fetch_page(binding.source, page=1, page_size=_UNPAGED_LIMIT)
            variables = {binding.as_: result.data}

        log.debug("Bloc %s : page %d/%d", key, result.pagination.current_page, result.pagination.total_pages)
        return self._provider(visited, key).provide(scope, variables)


def resolve_manifest(
    manifest: ManifestPage,
    source: Optional[StaticDataSource] = None,
    mode: IterationMode = "render",
    page: int = 1,
) -> ResolvedPage:
    """Résout un manifest (fonction raccourcie, sans mémoïsation entre appels)."""
    return ManifestResolver(source).resolve(manifest, mode=mode, page=page)
