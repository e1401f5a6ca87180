"""
Serialization helpers for SBML Kit objects (Model, Parameter).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Unset attributes are written as None and stay unset after loading.
"""
from __future__ import annotations

import json
import os
import warnings
from typing import Any, Dict, List

import yaml

from sbmlkit.model import Model, NamedSBase, Parameter
from sbmlkit.namespaces import DEFAULT_LEVEL, DEFAULT_VERSION, SBMLNamespaces, XMLNamespaces


_SBASE_KEYS = {"level", "version", "namespaces", "meta_id", "notes", "annotation", "id", "name"}
_PARAMETER_KEYS = _SBASE_KEYS | {"value", "units", "constant"}
_MODEL_KEYS = _SBASE_KEYS | {"parameters"}


def _warn_unknown_keys(d: Dict[str, Any], known: set, element: str) -> None:
    unknown = sorted(set(d) - known)
    if unknown:
        warnings.warn(f"Ignoring unknown {element} keys: {unknown}", UserWarning)


def namespaces_to_list(sbmlns: SBMLNamespaces) -> List[Dict[str, str]]:
    core_uri = sbmlns.get_uri()
    return [
        {"prefix": prefix, "uri": uri}
        for prefix, uri in sbmlns.get_namespaces()
        if not (prefix == "" and uri == core_uri)
    ]


def namespaces_from_dict(d: Dict[str, Any]) -> SBMLNamespaces:
    sbmlns = SBMLNamespaces(level=d.get("level") or DEFAULT_LEVEL, version=d.get("version") or DEFAULT_VERSION)
    extra = XMLNamespaces()
    for binding in d.get("namespaces") or []:
        extra.add(binding["uri"], binding.get("prefix", ""))
    sbmlns.add_namespaces(extra)
    return sbmlns


def _sbase_to_dict(e: NamedSBase) -> Dict[str, Any]:
    return {
        "level": e.get_level(),
        "version": e.get_version(),
        "namespaces": namespaces_to_list(e.get_sbml_namespaces()),
        "meta_id": e.get_meta_id() or None,
        "notes": e.get_notes(),
        "annotation": e.get_annotation(),
        "id": e.get_id() or None,
        # Level 1 names are the id
        "name": (e.get_name() or None) if e.get_level() > 1 else None,
    }


def _apply_sbase_fields(e: NamedSBase, d: Dict[str, Any]) -> None:
    if d.get("meta_id"):
        e.set_meta_id(d["meta_id"])
    e.set_notes(d.get("notes"))
    e.set_annotation(d.get("annotation"))
    if d.get("id"):
        e.set_id(d["id"])
    if d.get("name"):
        e.set_name(d["name"])


def parameter_to_dict(p: Parameter) -> Dict[str, Any]:
    d = _sbase_to_dict(p)
    d.update(
        {
            "value": p.get_value() if p.is_set_value() else None,
            "units": p.get_units() or None,
            "constant": p.get_constant() if p.is_set_constant() and p.get_level() > 1 else None,
        }
    )
    return d


def _apply_parameter_fields(p: Parameter, d: Dict[str, Any]) -> Parameter:
    _warn_unknown_keys(d, _PARAMETER_KEYS, "parameter")
    _apply_sbase_fields(p, d)
    if d.get("value") is not None:
        p.set_value(d["value"])
    if d.get("units"):
        p.set_units(d["units"])
    if d.get("constant") is not None:
        p.set_constant(d["constant"])
    return p


def parameter_from_dict(d: Dict[str, Any]) -> Parameter:
    return _apply_parameter_fields(Parameter(namespaces=namespaces_from_dict(d)), d)


def model_to_dict(m: Model) -> Dict[str, Any]:
    d = _sbase_to_dict(m)
    d["parameters"] = [parameter_to_dict(p) for p in m.parameters]
    return d


def model_from_dict(d: Dict[str, Any]) -> Model:
    """
    Build a Model from its dict form.

    Parameters go through Model.add_parameter. Parameter dicts without
    level, version or namespaces inherit the model's.

    Raises:
        ValueError: If d is not a mapping (e.g. an empty document)
        DuplicateIdError, InvalidObjectError, LevelMismatchError,
        VersionMismatchError: From Model.add_parameter
    """
    if not isinstance(d, dict):
        raise ValueError(f"Model document must be a mapping, got {type(d).__name__}")
    _warn_unknown_keys(d, _MODEL_KEYS, "model")
    m = Model(namespaces=namespaces_from_dict(d))
    _apply_sbase_fields(m, d)
    for pd in d.get("parameters") or []:
        pd = dict(pd)
        for key in ("level", "version", "namespaces"):
            pd.setdefault(key, d.get(key))
        m.add_parameter(parameter_from_dict(pd))
    return m


def model_to_json(m: Model) -> str:
    return json.dumps(model_to_dict(m), sort_keys=True)


def model_from_json(s: str) -> Model:
    d = json.loads(s)
    return model_from_dict(d)


def model_to_yaml(m: Model) -> str:
    return yaml.safe_dump(model_to_dict(m))


def model_from_yaml(s: str) -> Model:
    d = yaml.safe_load(s)
    return model_from_dict(d)


_WRITERS = {".json": model_to_json, ".yaml": model_to_yaml, ".yml": model_to_yaml}
_READERS = {".json": model_from_json, ".yaml": model_from_yaml, ".yml": model_from_yaml}


def _suffix(filepath: str) -> str:
    suffix = os.path.splitext(filepath)[1].lower()
    if suffix not in _WRITERS:
        raise ValueError(f"Unsupported model file suffix '{suffix}': use .json, .yaml or .yml")
    return suffix


def write_model_file(m: Model, filepath: str) -> None:
    content = _WRITERS[_suffix(filepath)](m)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(content)


def read_model_file(filepath: str) -> Model:
    """
    Load a Model from a .json, .yaml or .yml file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the suffix is not a supported format
    """
    reader = _READERS[_suffix(filepath)]
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Model file not found: {filepath}")
    return reader(content)
