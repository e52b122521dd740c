"""
Built-in congruence systems.

Each entry has:
  - name: short identifier (used by `--system`)
  - residues / moduli: parallel integer lists
  - description: human-readable summary

The "default" system is three ~512-bit congruences with pairwise-coprime
moduli; it is what the solver runs when given no arguments.
"""

from typing import Any, Dict, List

DEFAULT_RESIDUES = [
    int("2383481670621884097780760129264914572120015660306424632150125456732676861838558575528938709861873384979360106909316726728836243379378130517134103442179232"),
    int("3173558442977625800965376976048862571813563198132919552735198379791224619932525792065135784829406439897399030656270441682735411712538727904114016708553509"),
    int("4040273319375053306359183228543033411485026326504529516643656990521694250121302582501967606822724745264075967227306907244985415487360198466190779772859808"),
]

DEFAULT_MODULI = [
    int("8735671703196820547493672551669849201531676166471241548474354969627979190811593258793332421960407416166599430958569213885352631330183245926781489304105131"),
    int("5394743527382642683045764192098771425786851569970656350324897476633433442409656021989413547598408239987270829141870318988663515762168741773549591008930233"),
    int("5045599535556013351876181405704178828141027875142491114428188252864005876667044279745862681891448244774925956842135844591555459782296652632892809197810711"),
]

DEFAULT_SYSTEM = "default"

SYSTEMS_REGISTRY: List[Dict[str, Any]] = [
    {"name": "default",
     "residues": DEFAULT_RESIDUES, "moduli": DEFAULT_MODULI,
     "description": "three 512-bit congruences"},
    {"name": "two_moduli",
     "residues": [2, 3], "moduli": [5, 7],
     "description": "x = 2 mod 5, x = 3 mod 7  (x = 17 mod 35)"},
    {"name": "three_moduli",
     "residues": [1, 2, 3], "moduli": [5, 7, 9],
     "description": "x = 1 mod 5, x = 2 mod 7, x = 3 mod 9  (x = 156 mod 315)"},
    {"name": "four_moduli",
     "residues": [2, 3, 4, 5], "moduli": [5, 7, 9, 11],
     "description": "x = 2 mod 5, 3 mod 7, 4 mod 9, 5 mod 11"},
    {"name": "single",
     "residues": [4], "moduli": [11],
     "description": "one congruence, x = 4 mod 11"},
]

SYSTEMS: Dict[str, Dict[str, Any]] = {s["name"]: s for s in SYSTEMS_REGISTRY}


def get_system(name: str) -> Dict[str, Any]:
    """Look up a built-in system by name."""
    if name not in SYSTEMS:
        raise KeyError(
            f"Unknown system: {name} (available: {', '.join(SYSTEMS)})"
        )
    return SYSTEMS[name]
