"""
Tests for the Parameter accessor surface.

Each test gets a fresh Level 2 Version 4 parameter and checks its
post-conditions through the sbmlkit.assertions helpers.
"""

import math

import pytest

from sbmlkit.assertions import assert_equals, assert_true
from sbmlkit.errors import (
    InvalidAttributeValueError,
    SBMLConstructorError,
    UnexpectedAttributeError,
)
from sbmlkit.model import SBML_PARAMETER, Parameter
from sbmlkit.namespaces import SBMLNamespaces, XMLNamespaces


@pytest.fixture
def P():
    return Parameter(2, 4)


class TestParameterCreate:
    """Fresh parameter defaults."""

    def test_create(self, P):
        """Should start with empty strings and a set constant flag."""
        assert_true(P.get_type_code() == SBML_PARAMETER)
        assert_true(P.get_meta_id() == "")
        assert_true(P.get_notes() is None)
        assert_true(P.get_annotation() is None)
        assert_true(P.get_id() == "")
        assert_true(P.get_name() == "")
        assert_true(P.get_units() == "")
        assert_true(P.get_constant() is True)
        assert_equals(False, P.is_set_id())
        assert_equals(False, P.is_set_name())
        assert_equals(False, P.is_set_value())
        assert_equals(False, P.is_set_units())
        assert_equals(True, P.is_set_constant())

    def test_create_level_version(self, P):
        """Should report the level and version it was built with."""
        assert_equals(2, P.get_level())
        assert_equals(4, P.get_version())
        assert_equals("parameter", P.get_element_name())

    def test_create_value_is_nan(self, P):
        """Unset value should read as NaN."""
        assert_true(math.isnan(P.get_value()))

    def test_create_with_ns(self):
        """Should take level, version and extra namespaces from SBMLNamespaces."""
        xmlns = XMLNamespaces()
        xmlns.add("http://www.sbml.org", "testsbml")
        sbmlns = SBMLNamespaces(2, 1)
        sbmlns.add_namespaces(xmlns)
        object1 = Parameter(namespaces=sbmlns)
        assert_true(object1.get_type_code() == SBML_PARAMETER)
        assert_true(object1.get_meta_id() == "")
        assert_true(object1.get_notes() is None)
        assert_true(object1.get_annotation() is None)
        assert_true(object1.get_level() == 2)
        assert_true(object1.get_version() == 1)
        assert_true(object1.get_namespaces() is not None)
        assert_true(object1.get_namespaces().get_length() == 2)

    def test_create_namespaces_override_level_version(self):
        """Namespaces passed in should win over level and version arguments."""
        p = Parameter(3, 1, namespaces=SBMLNamespaces(2, 4))
        assert p.get_level() == 2
        assert p.get_version() == 4
        assert p.get_namespaces().get_uri("") == "http://www.sbml.org/sbml/level2/version4"
        assert p.is_set_constant()

    def test_create_with_ns_copies_namespaces(self):
        """Later changes to the SBMLNamespaces should not leak into the parameter."""
        sbmlns = SBMLNamespaces(2, 1)
        p = Parameter(namespaces=sbmlns)
        sbmlns.add_namespace("http://www.sbml.org", "testsbml")
        assert p.get_namespaces().get_length() == 1

    def test_create_level3_constant_unset(self):
        """Level 3 has no default for constant."""
        p = Parameter(3, 2)
        assert p.get_constant() is True
        assert p.is_set_constant() is False

    def test_create_unsupported_level(self):
        """Should refuse level/version pairs that do not exist."""
        with pytest.raises(SBMLConstructorError):
            Parameter(2, 9)


class TestParameterId:
    """id accessor tests."""

    def test_set_id(self, P):
        """Should store, re-store and clear the id."""
        id = "Km1"
        P.set_id(id)
        assert_true(id == P.get_id())
        assert_equals(True, P.is_set_id())
        P.set_id(P.get_id())
        assert_true(id == P.get_id())
        P.set_id("")
        assert_equals(False, P.is_set_id())

    def test_set_id_invalid_syntax(self, P):
        """Should reject ids that are not SIds and keep the old value."""
        P.set_id("Km1")
        with pytest.raises(InvalidAttributeValueError):
            P.set_id("1Km")
        assert P.get_id() == "Km1"

    def test_unset_id(self, P):
        """unset_id should clear the id."""
        P.set_id("k_cat")
        P.unset_id()
        assert P.get_id() == ""
        assert not P.is_set_id()


class TestParameterName:
    """name accessor tests."""

    def test_set_name(self, P):
        """Should store, re-store and clear the name."""
        name = "Forward_Michaelis_Menten_Constant"
        P.set_name(name)
        assert_true(name == P.get_name())
        assert_equals(True, P.is_set_name())
        P.set_name(P.get_name())
        assert_true(name == P.get_name())
        P.set_name("")
        assert_equals(False, P.is_set_name())

    def test_set_name_twice(self, P):
        """Setting the same name twice should leave it intact."""
        P.set_name("X")
        P.set_name("X")
        assert_equals("X", P.get_name())

    def test_name_accepts_free_text(self, P):
        """Level 2 names are not restricted to SId syntax."""
        P.set_name("Forward Michaelis-Menten constant (mM)")
        assert P.get_name() == "Forward Michaelis-Menten constant (mM)"
        assert not P.is_set_id()

    def test_level1_name_is_id(self):
        """In Level 1 the name is the identifier."""
        p = Parameter(1, 2)
        p.set_name("Km1")
        assert p.get_id() == "Km1"
        assert p.is_set_id()
        with pytest.raises(InvalidAttributeValueError):
            p.set_name("not an sid")
        assert p.get_name() == "Km1"


class TestParameterUnits:
    """units accessor tests."""

    def test_set_units(self, P):
        """Should store, re-store and clear the units."""
        units = "second"
        P.set_units(units)
        assert_true(units == P.get_units())
        assert_equals(True, P.is_set_units())
        P.set_units(P.get_units())
        assert_true(units == P.get_units())
        P.set_units("")
        assert_equals(False, P.is_set_units())

    def test_set_units_invalid_syntax(self, P):
        """Units must be a unit SId."""
        with pytest.raises(InvalidAttributeValueError):
            P.set_units("mole/litre")
        assert not P.is_set_units()


class TestParameterValue:
    """value accessor tests."""

    def test_set_value(self, P):
        """Should store the value as a float."""
        P.set_value(3)
        assert P.get_value() == 3.0
        assert isinstance(P.get_value(), float)
        assert P.is_set_value()

    def test_set_value_zero_is_set(self, P):
        """Zero is an explicit value."""
        P.set_value(0)
        assert P.is_set_value()

    def test_unset_value(self, P):
        """unset_value should go back to NaN."""
        P.set_value(0.5)
        P.unset_value()
        assert not P.is_set_value()
        assert math.isnan(P.get_value())


class TestParameterConstant:
    """constant accessor tests."""

    def test_set_constant(self, P):
        """Should store the flag."""
        P.set_constant(False)
        assert P.get_constant() is False
        assert P.is_set_constant()

    def test_unset_constant_level2(self, P):
        """Level 2 falls back to the schema default."""
        P.set_constant(False)
        P.unset_constant()
        assert P.get_constant() is True
        assert P.is_set_constant()

    def test_unset_constant_level3(self):
        """Level 3 goes back to unset."""
        p = Parameter(3, 1)
        p.set_constant(False)
        assert p.is_set_constant()
        p.unset_constant()
        assert not p.is_set_constant()

    def test_level1_has_no_constant(self):
        """Level 1 parameters have no constant attribute."""
        p = Parameter(1, 2)
        with pytest.raises(UnexpectedAttributeError):
            p.set_constant(False)
        assert p.get_constant() is True


class TestSBaseFields:
    """meta id, notes and annotation on a parameter."""

    def test_set_meta_id(self, P):
        """Should store and clear the meta id."""
        P.set_meta_id("meta_Km1")
        assert P.get_meta_id() == "meta_Km1"
        assert P.is_set_meta_id()
        P.set_meta_id("")
        assert not P.is_set_meta_id()

    def test_set_meta_id_invalid(self, P):
        """Meta ids must be XML IDs."""
        with pytest.raises(InvalidAttributeValueError):
            P.set_meta_id("9meta")

    def test_level1_has_no_meta_id(self):
        """Level 1 has no metaid attribute."""
        with pytest.raises(UnexpectedAttributeError):
            Parameter(1, 1).set_meta_id("m1")

    def test_notes_and_annotation(self, P):
        """Empty strings clear notes and annotation."""
        P.set_notes("<p>Michaelis constant</p>")
        P.set_annotation("<rdf:RDF/>")
        assert P.get_notes() == "<p>Michaelis constant</p>"
        assert P.is_set_annotation()
        P.set_notes("")
        P.unset_annotation()
        assert P.get_notes() is None
        assert P.get_annotation() is None

    def test_copy_is_independent(self, P):
        """copy() should not share state with the source parameter."""
        P.set_id("Km1")
        clone = P.copy()
        clone.set_id("Km2")
        clone.get_namespaces().add("http://example.org", "ex")
        assert P.get_id() == "Km1"
        assert P.get_namespaces().get_length() == 1
