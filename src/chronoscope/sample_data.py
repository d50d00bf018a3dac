"""
Built-in sample records for the demo launcher.
"""

from typing import List

from chronoscope.timeline.types import ArtifactRecord, LandmarkRecord

SAMPLE_ARTIFACTS = [
    {"id": "ur-cylinder-seal", "name": "Cylinder Seal of Ur", "era": "2600-2400 BC",
     "category": "seal", "material": "lapis lazuli"},
    {"id": "lydian-stater", "name": "Lydian Electrum Stater", "era": "6th Century BC",
     "category": "coin", "material": "electrum"},
    {"id": "athenian-owl", "name": "Athenian Owl Tetradrachm", "era": "454-404 BC",
     "category": "coin", "material": "silver"},
    {"id": "alexander-drachm", "name": "Drachm of Alexander the Great", "era": "336 BC",
     "category": "coin", "material": "silver"},
    {"id": "augustus-denarius", "name": "Denarius of Augustus", "era": "27 BC - 14 AD",
     "category": "coin", "material": "silver"},
    {"id": "roman-signet", "name": "Roman Intaglio Signet Ring", "era": "1st-2nd Century AD",
     "category": "ring", "material": "gold, carnelian"},
    {"id": "byzantine-solidus", "name": "Solidus of Justinian I", "era": "527 AD",
     "category": "coin", "material": "gold"},
    {"id": "viking-brooch", "name": "Viking Oval Brooch", "era": "9th Century AD",
     "category": "jewelry", "material": "bronze"},
]

SAMPLE_LANDMARKS = [
    {"id": "old-kingdom", "name": "Old Kingdom of Egypt", "type": "civilization",
     "yearStart": -2686, "yearEnd": -2181},
    {"id": "akkad", "name": "Akkadian Empire", "type": "civilization",
     "yearStart": -2334, "yearEnd": -2154},
    {"id": "achaemenid", "name": "Achaemenid Empire", "type": "civilization",
     "yearStart": -550, "yearEnd": -330},
    {"id": "roman-empire", "name": "Roman Empire", "type": "civilization",
     "yearStart": -27, "yearEnd": 476},
    {"id": "byzantine", "name": "Byzantine Empire", "type": "civilization",
     "yearStart": 330, "yearEnd": 1453},
    {"id": "first-coins", "name": "First Coinage", "type": "major_event", "year": -600,
     "description": "Lydia strikes the first electrum coins"},
    {"id": "fall-of-rome", "name": "Fall of the Western Roman Empire", "type": "civilization_end", "year": 476},
    {"id": "hammurabi", "name": "Hammurabi", "type": "person", "yearStart": -1810, "yearEnd": -1750},
    {"id": "alexander", "name": "Alexander the Great", "type": "person", "yearStart": -356, "yearEnd": -323},
    {"id": "augustus", "name": "Augustus", "type": "person", "yearStart": -63, "yearEnd": 14},
    {"id": "caesar", "name": "Julius Caesar", "type": "person", "yearStart": -100, "yearEnd": -44},
]


def sample_artifacts() -> List[ArtifactRecord]:
    return [ArtifactRecord.from_dict(data) for data in SAMPLE_ARTIFACTS]


def sample_landmarks() -> List[LandmarkRecord]:
    return [LandmarkRecord.from_dict(data) for data in SAMPLE_LANDMARKS]
