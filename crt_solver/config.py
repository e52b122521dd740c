"""
YAML configuration for congruence systems.

Two layouts are accepted:

    name: three_moduli
    congruences:
      - {residue: 1, modulus: 5}
      - {residue: 2, modulus: 7}

or parallel lists:

    residues: [1, 2]
    moduli: [5, 7]

Optional keys: method ("summation" | "garner"), check_coprime (bool).
Very long integers may be written as decimal strings.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .constants import DEFAULT_SYSTEM, get_system
from .crt.solve import METHODS


@dataclass
class SystemConfig:
    """A congruence system plus solver options."""
    residues: List[int]
    moduli: List[int]
    name: str = "custom"
    check_coprime: bool = True
    method: str = "summation"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["residues"] = [str(a) for a in self.residues]
        d["moduli"] = [str(m) for m in self.moduli]
        return d


def _to_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{what}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip().replace("_", ""))
        except ValueError:
            pass
    raise ValueError(f"{what}: expected an integer, got {value!r}")


def config_from_dict(data: Dict[str, Any]) -> SystemConfig:
    """Build a SystemConfig from a parsed YAML mapping."""
    if not isinstance(data, dict):
        raise ValueError("config must be a mapping")

    if "congruences" in data:
        residues, moduli = [], []
        for i, entry in enumerate(data["congruences"] or []):
            if (not isinstance(entry, dict)
                    or "residue" not in entry or "modulus" not in entry):
                raise ValueError(
                    f"congruences[{i}] needs both 'residue' and 'modulus'"
                )
            residues.append(_to_int(entry["residue"], f"congruences[{i}].residue"))
            moduli.append(_to_int(entry["modulus"], f"congruences[{i}].modulus"))
    elif "residues" in data and "moduli" in data:
        residues = [_to_int(a, f"residues[{i}]")
                    for i, a in enumerate(data["residues"] or [])]
        moduli = [_to_int(m, f"moduli[{i}]")
                  for i, m in enumerate(data["moduli"] or [])]
    else:
        raise ValueError(
            "config needs 'congruences' or both 'residues' and 'moduli'"
        )

    method = data.get("method", "summation")
    if method not in METHODS:
        raise ValueError(f"Unknown CRT method: {method}")

    return SystemConfig(
        residues=residues,
        moduli=moduli,
        name=str(data.get("name", "custom")),
        check_coprime=bool(data.get("check_coprime", True)),
        method=method,
    )


def load_config(config_path: Union[str, Path]) -> SystemConfig:
    with open(config_path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML in {config_path}: {e}") from e
    return config_from_dict(data)


def system_config(name: str = DEFAULT_SYSTEM) -> SystemConfig:
    """SystemConfig for a built-in system."""
    system = get_system(name)
    return SystemConfig(
        residues=list(system["residues"]),
        moduli=list(system["moduli"]),
        name=system["name"],
    )
