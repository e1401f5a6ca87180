"""
Core SBML Element Objects

Defines the element classes of the object model:
    - SBase (fields shared by every element)
    - Parameter (a named quantity with value and units)
    - Model (container of parameters)

Every optional attribute has three operations besides its getter:
    - set_x(value): store an explicit value
    - is_set_x(): whether an explicit value is held
    - unset_x(): drop back to the default

Setting a string attribute to "" is the same as unsetting it.

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about XML reading/writing
        - Validate attribute syntax on every set
        - Leave themselves untouched when a set is rejected
        - Are fully serializable (see sbmlkit.serialization)
"""

import copy
import math
import re
from enum import Enum
from typing import List, Optional, Union

from sbmlkit.errors import (
    DuplicateIdError,
    InvalidAttributeValueError,
    InvalidObjectError,
    LevelMismatchError,
    UnexpectedAttributeError,
    VersionMismatchError,
)
from sbmlkit.namespaces import (
    DEFAULT_LEVEL,
    DEFAULT_VERSION,
    SBMLNamespaces,
    XMLNamespaces,
)


_SID_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_XML_ID_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")


class TypeCode(Enum):
    """
    Identifies the kind of an element.

    Values are the XML element names.
    """

    UNKNOWN = "unknown"
    MODEL = "model"
    PARAMETER = "parameter"


SBML_PARAMETER = TypeCode.PARAMETER
SBML_MODEL = TypeCode.MODEL


def is_valid_sid(value: str) -> bool:
    return bool(_SID_RE.match(value))


def _require_sid(value: str, attribute: str) -> None:
    if not is_valid_sid(value):
        raise InvalidAttributeValueError(
            f"Invalid {attribute} '{value}': must match [A-Za-z_][A-Za-z0-9_]*"
        )


class SBase:
    """
    Fields shared by every SBML element.

    Properties:
        level / version:
            Fixed at construction, taken from the namespaces

        namespaces:
            Private copy of the SBMLNamespaces given at construction,
            or a fresh set for (level, version)

        meta_id:
            XML ID used to attach annotations. "" when unset.
            Not available in Level 1.

        notes / annotation:
            XML fragments kept as strings. None when unset.

    Raises:
        SBMLConstructorError: For a level/version pair that does not exist
    """

    TYPE_CODE = TypeCode.UNKNOWN

    def __init__(
        self,
        level: int = DEFAULT_LEVEL,
        version: int = DEFAULT_VERSION,
        namespaces: Optional[SBMLNamespaces] = None,
    ):
        if namespaces is None:
            namespaces = SBMLNamespaces(level=level, version=version)
        else:
            namespaces = namespaces.copy()
        self._sbml_namespaces = namespaces
        self._meta_id = ""
        self._notes: Optional[str] = None
        self._annotation: Optional[str] = None

    def get_type_code(self) -> TypeCode:
        return self.TYPE_CODE

    def get_element_name(self) -> str:
        return self.TYPE_CODE.value

    def get_level(self) -> int:
        return self._sbml_namespaces.level

    def get_version(self) -> int:
        return self._sbml_namespaces.version

    def get_namespaces(self) -> XMLNamespaces:
        return self._sbml_namespaces.get_namespaces()

    def get_sbml_namespaces(self) -> SBMLNamespaces:
        return self._sbml_namespaces

    # Meta id

    def get_meta_id(self) -> str:
        return self._meta_id

    def is_set_meta_id(self) -> bool:
        return self._meta_id != ""

    def set_meta_id(self, meta_id: str) -> None:
        if self.get_level() == 1:
            raise UnexpectedAttributeError("metaid is not defined in SBML Level 1")
        if meta_id and not _XML_ID_RE.match(meta_id):
            raise InvalidAttributeValueError(f"Invalid metaid '{meta_id}'")
        self._meta_id = meta_id

    def unset_meta_id(self) -> None:
        self._meta_id = ""

    # Notes and annotation

    def get_notes(self) -> Optional[str]:
        return self._notes

    def is_set_notes(self) -> bool:
        return self._notes is not None

    def set_notes(self, notes: Optional[str]) -> None:
        self._notes = notes or None

    def unset_notes(self) -> None:
        self._notes = None

    def get_annotation(self) -> Optional[str]:
        return self._annotation

    def is_set_annotation(self) -> bool:
        return self._annotation is not None

    def set_annotation(self, annotation: Optional[str]) -> None:
        self._annotation = annotation or None

    def unset_annotation(self) -> None:
        self._annotation = None

    def copy(self):
        return copy.deepcopy(self)


class NamedSBase(SBase):
    """
    Element with an SId identifier and a free-text name.

    In Level 1 there is no separate id attribute: the name is the
    identifier. get_name/set_name then read and write the id, and names
    must follow SId syntax.
    """

    def __init__(
        self,
        level: int = DEFAULT_LEVEL,
        version: int = DEFAULT_VERSION,
        namespaces: Optional[SBMLNamespaces] = None,
    ):
        super().__init__(level=level, version=version, namespaces=namespaces)
        self._id = ""
        self._name = ""

    def get_id(self) -> str:
        return self._id

    def is_set_id(self) -> bool:
        return self._id != ""

    def set_id(self, sid: str) -> None:
        if sid:
            _require_sid(sid, "id")
        self._id = sid

    def unset_id(self) -> None:
        self._id = ""

    def get_name(self) -> str:
        if self.get_level() == 1:
            return self._id
        return self._name

    def is_set_name(self) -> bool:
        return self.get_name() != ""

    def set_name(self, name: str) -> None:
        if self.get_level() == 1:
            self.set_id(name)
        else:
            self._name = name

    def unset_name(self) -> None:
        self.set_name("")


class Parameter(NamedSBase):
    """
    A named quantity used in model equations.

    Fresh instance:
        id, name, units: ""          (unset)
        value: NaN                   (unset)
        constant: True               (set in Levels 1 and 2, unset in Level 3)

    Properties:
        id: SId, "" when unset
        name: Free text ("" when unset); the id itself in Level 1
        value: Float, NaN when unset
        units: UnitSId of the value's units, "" when unset
        constant: Whether the value may change during simulation.
            Level 1 has no such attribute; setting it raises.

    Example:
        p = Parameter(2, 4)
        p.set_id("Km1")
        p.set_value(0.05)
        p.set_units("mole")
    """

    TYPE_CODE = TypeCode.PARAMETER

    def __init__(
        self,
        level: int = DEFAULT_LEVEL,
        version: int = DEFAULT_VERSION,
        namespaces: Optional[SBMLNamespaces] = None,
    ):
        super().__init__(level=level, version=version, namespaces=namespaces)
        self._value = math.nan
        self._is_set_value = False
        self._units = ""
        self._constant = True
        self._is_set_constant = self._constant_has_default()

    def _constant_has_default(self) -> bool:
        return self.get_level() < 3

    # Value

    def get_value(self) -> float:
        return self._value

    def is_set_value(self) -> bool:
        return self._is_set_value

    def set_value(self, value: float) -> None:
        self._value = float(value)
        self._is_set_value = True

    def unset_value(self) -> None:
        self._value = math.nan
        self._is_set_value = False

    # Units

    def get_units(self) -> str:
        return self._units

    def is_set_units(self) -> bool:
        return self._units != ""

    def set_units(self, units: str) -> None:
        if units:
            _require_sid(units, "units")
        self._units = units

    def unset_units(self) -> None:
        self._units = ""

    # Constant

    def get_constant(self) -> bool:
        return self._constant

    def is_set_constant(self) -> bool:
        return self._is_set_constant

    def set_constant(self, constant: bool) -> None:
        if self.get_level() == 1:
            raise UnexpectedAttributeError("constant is not defined on Level 1 parameters")
        self._constant = bool(constant)
        self._is_set_constant = True

    def unset_constant(self) -> None:
        self._constant = True
        self._is_set_constant = self._constant_has_default()

    def __repr__(self) -> str:
        return (
            f"Parameter(id={self._id!r}, value={self._value!r}, units={self._units!r}, "
            f"level={self.get_level()}, version={self.get_version()})"
        )


class Model(NamedSBase):
    """
    Root container for model elements.

    Only parameters are modelled here.

    INVARIANTS:
        - Every stored parameter has the model's level and version
        - add_parameter rejects ids already used in the model
        - add_parameter stores a copy; the caller keeps its own object

    create_parameter hands back the stored object itself, so ids set on it
    afterwards are not checked for uniqueness.
    """

    TYPE_CODE = TypeCode.MODEL

    def __init__(
        self,
        level: int = DEFAULT_LEVEL,
        version: int = DEFAULT_VERSION,
        namespaces: Optional[SBMLNamespaces] = None,
    ):
        super().__init__(level=level, version=version, namespaces=namespaces)
        self._parameters: List[Parameter] = []

    @property
    def parameters(self) -> List[Parameter]:
        return list(self._parameters)

    def get_num_parameters(self) -> int:
        return len(self._parameters)

    def create_parameter(self) -> Parameter:
        """
        Create an empty parameter with the model's namespaces and store it.

        Returns:
            The stored Parameter (not a copy)
        """
        parameter = Parameter(namespaces=self._sbml_namespaces)
        self._parameters.append(parameter)
        return parameter

    def add_parameter(self, parameter: Parameter) -> None:
        """
        Store a copy of a parameter.

        Raises:
            LevelMismatchError: Parameter built for another level
            VersionMismatchError: Parameter built for another version
            InvalidObjectError: Parameter has no id
            DuplicateIdError: Id already used by a stored parameter
        """
        if parameter.get_level() != self.get_level():
            raise LevelMismatchError(
                f"Parameter level {parameter.get_level()} does not match model level {self.get_level()}"
            )
        if parameter.get_version() != self.get_version():
            raise VersionMismatchError(
                f"Parameter version {parameter.get_version()} does not match model version {self.get_version()}"
            )
        if not parameter.is_set_id():
            raise InvalidObjectError("Cannot add a parameter without an id")
        if self.get_parameter(parameter.get_id()) is not None:
            raise DuplicateIdError(f"Duplicate parameter id: {parameter.get_id()}")
        self._parameters.append(parameter.copy())

    def get_parameter(self, key: Union[int, str]) -> Optional[Parameter]:
        """
        Retrieve a parameter by index or id.

        Returns:
            Parameter object or None if not found
        """
        if isinstance(key, int) and not isinstance(key, bool):
            if 0 <= key < len(self._parameters):
                return self._parameters[key]
            return None
        for parameter in self._parameters:
            if parameter.get_id() == key:
                return parameter
        return None

    def remove_parameter(self, key: Union[int, str]) -> Optional[Parameter]:
        """
        Remove a parameter by index or id.

        Returns:
            The removed Parameter, or None if nothing matched
        """
        parameter = self.get_parameter(key)
        if parameter is not None:
            self._parameters.remove(parameter)
        return parameter


__all__ = [
    "TypeCode",
    "SBML_PARAMETER",
    "SBML_MODEL",
    "SBase",
    "NamedSBase",
    "Parameter",
    "Model",
    "is_valid_sid",
]
