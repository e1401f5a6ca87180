"""
XML and SBML namespace sets.

Every SBML element carries the namespaces it was created with:
    - The core SBML namespace for its level/version (empty prefix)
    - Any extra namespaces a caller declared (annotations, packages)

ARCHITECTURAL RULE:
    The level/version pair is fixed when the set is created.
    Only the extra bindings can change afterwards.
"""

from __future__ import annotations

import warnings
from dataclasses import FrozenInstanceError, dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from sbmlkit.errors import SBMLConstructorError


DEFAULT_LEVEL = 3
DEFAULT_VERSION = 2

SBML_NAMESPACE_URIS: Dict[Tuple[int, int], str] = {
    (1, 1): "http://www.sbml.org/sbml/level1",
    (1, 2): "http://www.sbml.org/sbml/level1",
    (2, 1): "http://www.sbml.org/sbml/level2",
    (2, 2): "http://www.sbml.org/sbml/level2/version2",
    (2, 3): "http://www.sbml.org/sbml/level2/version3",
    (2, 4): "http://www.sbml.org/sbml/level2/version4",
    (2, 5): "http://www.sbml.org/sbml/level2/version5",
    (3, 1): "http://www.sbml.org/sbml/level3/version1/core",
    (3, 2): "http://www.sbml.org/sbml/level3/version2/core",
}


def is_supported(level: int, version: int) -> bool:
    return (level, version) in SBML_NAMESPACE_URIS


def get_sbml_namespace_uri(level: int, version: int) -> str:
    """
    Return the core SBML namespace URI for a level/version pair.

    Raises:
        SBMLConstructorError: If the combination does not exist
    """
    try:
        return SBML_NAMESPACE_URIS[(level, version)]
    except KeyError:
        raise SBMLConstructorError(
            f"Unsupported SBML level/version combination: L{level}V{version}"
        )


@dataclass
class XMLNamespaces:
    """
    Ordered list of XML namespace bindings.

    Each binding is a (prefix, uri) pair. The empty prefix is the default
    namespace. Prefixes are unique: adding a binding for a prefix that is
    already bound replaces its URI in place, keeping its position.

    Properties:
        bindings: (prefix, uri) pairs in declaration order
    """

    bindings: List[Tuple[str, str]] = field(default_factory=list)

    def add(self, uri: str, prefix: str = "") -> None:
        for index, (bound_prefix, _) in enumerate(self.bindings):
            if bound_prefix == prefix:
                self.bindings[index] = (prefix, uri)
                return
        self.bindings.append((prefix, uri))

    def remove(self, prefix: str = "") -> bool:
        """
        Drop the binding for a prefix.

        Returns:
            True if a binding was removed, False if the prefix was unbound
        """
        for index, (bound_prefix, _) in enumerate(self.bindings):
            if bound_prefix == prefix:
                del self.bindings[index]
                return True
        return False

    def clear(self) -> None:
        self.bindings.clear()

    def get_length(self) -> int:
        return len(self.bindings)

    def get_prefix(self, index: int) -> str:
        return self.bindings[index][0]

    def get_uri(self, key: Union[int, str] = "") -> Optional[str]:
        """
        Look up a URI by position or by prefix.

        Args:
            key: Integer index, or a prefix string ("" is the default namespace)

        Returns:
            The URI, or None when no binding has that prefix
        """
        if isinstance(key, int) and not isinstance(key, bool):
            return self.bindings[key][1]
        for bound_prefix, uri in self.bindings:
            if bound_prefix == key:
                return uri
        return None

    def get_prefix_for_uri(self, uri: str) -> Optional[str]:
        for bound_prefix, bound_uri in self.bindings:
            if bound_uri == uri:
                return bound_prefix
        return None

    def has_prefix(self, prefix: str) -> bool:
        return any(bound_prefix == prefix for bound_prefix, _ in self.bindings)

    def has_uri(self, uri: str) -> bool:
        return any(bound_uri == uri for _, bound_uri in self.bindings)

    def is_empty(self) -> bool:
        return not self.bindings

    def copy(self) -> "XMLNamespaces":
        return XMLNamespaces(bindings=list(self.bindings))

    def __len__(self) -> int:
        return len(self.bindings)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.bindings)


@dataclass
class SBMLNamespaces:
    """
    Level, version and namespace set an element is created against.

    Building one binds the core SBML URI for the level/version to the
    empty prefix. Extra bindings are merged in with add_namespace(s).

    Properties:
        level: SBML level (1, 2 or 3)
        version: Version within the level
        namespaces: XMLNamespaces, core binding first

    level and version are read-only once set; assigning either raises
    FrozenInstanceError.

    Raises:
        SBMLConstructorError: For a level/version pair that does not exist
    """

    level: int = DEFAULT_LEVEL
    version: int = DEFAULT_VERSION
    namespaces: XMLNamespaces = field(default_factory=XMLNamespaces)

    def __post_init__(self):
        core_uri = get_sbml_namespace_uri(self.level, self.version)
        if self.namespaces.get_uri("") != core_uri:
            self.namespaces = self.namespaces.copy()
            self.namespaces.remove("")
            self.namespaces.bindings.insert(0, ("", core_uri))

    def __setattr__(self, name, value):
        if name in ("level", "version") and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)

    def get_uri(self) -> str:
        """Core SBML namespace URI."""
        return get_sbml_namespace_uri(self.level, self.version)

    def get_namespaces(self) -> XMLNamespaces:
        return self.namespaces

    def add_namespace(self, uri: str, prefix: str) -> None:
        if prefix == "" and uri != self.get_uri():
            warnings.warn(
                f"Ignoring default namespace '{uri}': the empty prefix is bound "
                f"to the SBML core namespace '{self.get_uri()}'",
                UserWarning,
            )
            return
        self.namespaces.add(uri, prefix)

    def add_namespaces(self, xmlns: XMLNamespaces) -> None:
        for prefix, uri in xmlns:
            self.add_namespace(uri, prefix)

    def remove_namespace(self, uri: str) -> bool:
        if uri == self.get_uri():
            return False
        prefix = self.namespaces.get_prefix_for_uri(uri)
        if prefix is None:
            return False
        return self.namespaces.remove(prefix)

    def copy(self) -> "SBMLNamespaces":
        return SBMLNamespaces(
            level=self.level,
            version=self.version,
            namespaces=self.namespaces.copy(),
        )


__all__ = [
    "DEFAULT_LEVEL",
    "DEFAULT_VERSION",
    "SBML_NAMESPACE_URIS",
    "XMLNamespaces",
    "SBMLNamespaces",
    "get_sbml_namespace_uri",
    "is_supported",
]
