"""
Scope de données hiérarchique — variables visibles par un bloc à une profondeur donnée.

Chaque niveau d'imbrication ajoute ses variables par-dessus celles du parent :
  parent {"product": A, "user": U} + local {"product": B, "index": 0}
  → {"product": B, "user": U, "index": 0}
Les variables locales masquent (shadowing) celles du parent du même nom.
"""
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

_SCALARS = (str, int, float, bool, type(None))


class Scope(Mapping):
    """
    Environnement immuable : fusion parent + variables locales à la création.
    lookup() d'un nom inconnu → None, jamais d'erreur.
    """

    __slots__ = ("_parent", "_local", "_merged", "_depth")

    def __init__(self, local: Optional[Mapping] = None, parent: Optional[Mapping] = None):
        self._parent = parent
        self._local: Dict[str, Any] = dict(local or {})
        merged: Dict[str, Any] = dict(parent or {})
        merged.update(self._local)
        self._merged = merged
        self._depth = parent.depth + 1 if isinstance(parent, Scope) else (1 if parent else 0)

    # ── Mapping ──────────────────────────────────────────────────────────────

    def __getitem__(self, name: str) -> Any:
        return self._merged[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._merged)

    def __len__(self) -> int:
        return len(self._merged)

    def __repr__(self) -> str:
        return f"Scope(depth={self._depth}, {self._merged!r})"

    # ── API ──────────────────────────────────────────────────────────────────

    def lookup(self, name: str) -> Any:
        return self._merged.get(name)

    def child(self, variables: Optional[Mapping] = None) -> "Scope":
        return Scope(variables, parent=self)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._merged)

    @property
    def parent(self) -> Optional[Mapping]:
        return self._parent

    @property
    def local(self) -> Dict[str, Any]:
        return dict(self._local)

    @property
    def depth(self) -> int:
        return self._depth


EMPTY_SCOPE = Scope()


def create_child_scope(parent: Optional[Mapping], local: Optional[Mapping]) -> Scope:
    """Scope enfant = {**parent, **local} ; les variables locales gagnent."""
    return Scope(local, parent=parent)


def _same_value(a: Any, b: Any) -> bool:
    if a is b:
        return True
    # Les conteneurs sont comparés par référence uniquement
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        return type(a) is type(b) and a == b
    return False


def _same_variables(a: Optional[Mapping], b: Optional[Mapping]) -> bool:
    if a is b:
        return True
    if a is None or b is None or a.keys() != b.keys():
        return False
    return all(_same_value(a[k], b[k]) for k in a)


class ScopeProvider:
    """
    Emplacement mémoïsé pour un niveau d'imbrication.

    provide() renvoie le même objet Scope tant que le parent (même référence)
    et les variables (mêmes références / mêmes scalaires) n'ont pas changé.

    Usage:
        >>> slot = ScopeProvider()
        >>> s1 = slot.provide(root, {"product": item, "index": 0})
        >>> s2 = slot.provide(root, {"product": item, "index": 0})
        >>> s1 is s2
        True
    """

    def __init__(self):
        # (parent, variables, scope) remplacé d'un bloc : lu et écrit en une seule affectation
        self._entry: Optional[Tuple[Optional[Mapping], Dict[str, Any], Scope]] = None

    def provide(self, parent: Optional[Mapping], variables: Optional[Mapping]) -> Scope:
        variables = dict(variables or {})
        entry = self._entry
        if (
            entry is not None
            and parent is entry[0]
            and _same_variables(variables, entry[1])
        ):
            return entry[2]

        scope = create_child_scope(parent, variables)
        self._entry = (parent, variables, scope)
        return scope

    def reset(self) -> None:
        self._entry = None


class ScopeStack:
    """
    Pile de scopes passée explicitement pendant le parcours d'un arbre de blocs.

    Usage:
        >>> stack = ScopeStack({"site": "ACME"})
        >>> with stack.frame({"product": p, "index": 0}) as scope:
        ...     resolve_bindings("{{product.name}}", scope)
    """

    def __init__(self, root: Optional[Mapping] = None):
        root_scope = root if isinstance(root, Scope) else Scope(root)
        self._frames: List[Scope] = [root_scope]

    @property
    def current(self) -> Scope:
        return self._frames[-1]

    @property
    def depth(self) -> int:
        return len(self._frames) - 1

    def lookup(self, name: str) -> Any:
        return self.current.lookup(name)

    def push(self, variables: Optional[Mapping] = None) -> Scope:
        scope = create_child_scope(self.current, variables)
        self._frames.append(scope)
        return scope

    def push_scope(self, scope: Scope) -> Scope:
        """Empile un scope déjà construit (ex. issu de iterate())."""
        self._frames.append(scope)
        return scope

    def pop(self) -> Scope:
        if len(self._frames) == 1:
            raise IndexError("Impossible de dépiler le scope racine")
        return self._frames.pop()

    @contextmanager
    def frame(self, variables: Optional[Mapping] = None) -> Iterator[Scope]:
        scope = self.push(variables)
        try:
            yield scope
        finally:
            self.pop()

    @contextmanager
    def enter(self, scope: Scope) -> Iterator[Scope]:
        self.push_scope(scope)
        try:
            yield scope
        finally:
            self.pop()
