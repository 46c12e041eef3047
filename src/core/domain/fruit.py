"""
Fruit — fruit types

A fixed vocabulary of fruit kinds. A formula carries an ordered list of
fruits; duplicates are kept. The values are the display names.
"""

from enum import Enum
from typing import Dict, Final

from src.core.errors import UnknownFruit


class Fruit(str, Enum):
    """Fruit kind"""

    ACHENE = "achene"
    BERRY = "berry"
    BERRYLETS = "berrylets"
    CAPSULE = "capsule"  # many capsule subtypes share this entry
    CARYOPSIS = "caryopsis"
    DEHISCENT_DRUPE = "dehiscent drupe"
    DRUPE = "drupe"
    DRUPELETS = "drupelets"
    FOLLICLE = "follicle"
    INDEHISCENT_POD = "indehiscent pod"
    LEGUME = "legume"
    LOMENT = "loment"
    NUT = "nut"
    AGGREGATE_OF_NUTS = "aggregate of nuts"
    POME = "pome"
    SAMARA = "samara"
    SCHIZOCARP = "schizocarp"
    SILIQUE = "silique"
    UTRICLE = "utricle"
    NONE = "no fruit"

    @classmethod
    def parse(cls, token: str) -> "Fruit":
        """
        Parse a fruit token, accepting the plural/variant spellings.

        "" and "-" mean no fruit.

        Raises:
            UnknownFruit: token is not in the vocabulary
        """
        try:
            return _FRUIT_TOKENS[token]
        except KeyError:
            raise UnknownFruit(token) from None

    @property
    def description(self) -> str:
        return FRUIT_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_FRUIT_TOKENS: Final[Dict[str, Fruit]] = {
    **{fruit.value: fruit for fruit in Fruit if fruit is not Fruit.NONE},
    "berries": Fruit.BERRY,
    "fleshy capsule": Fruit.CAPSULE,
    "drupes": Fruit.DRUPE,
    "follicles": Fruit.FOLLICLE,
    "samaras": Fruit.SAMARA,
    "-": Fruit.NONE,
    "": Fruit.NONE,
}

FRUIT_DESCRIPTIONS: Final[Dict[Fruit, str]] = {
    Fruit.ACHENE: "small, dry, indehiscent, single seeded, thin walled",
    Fruit.BERRY: (
        "fleshy, indehiscent, one to many seeded, sometimes heterogeneous "
        "(i.e. inner fleshy, outer leathery)"
    ),
    Fruit.BERRYLETS: "as a berry, but an aggregate (i.e. developed from multiple carpels)",
    Fruit.CAPSULE: "dry (rarely fleshy), dehiscent, two to many seeded",
    Fruit.CARYOPSIS: (
        "small, dry, indehiscent, with wall surrounding and fused to seed "
        "(grass specific)"
    ),
    Fruit.DEHISCENT_DRUPE: (
        "fleshy, indehiscent, outer part soft to fibrous, breaking apart to "
        "reveal nut-like pits"
    ),
    Fruit.DRUPE: "fleshy, indehiscent, with one or more hard pits",
    Fruit.DRUPELETS: "as a drupe, but an aggregate (i.e. developed from multiple carpels)",
    Fruit.FOLLICLE: (
        "dry to fleshy, from single carpel, releasing along a single "
        "longitudinal slit"
    ),
    Fruit.INDEHISCENT_POD: "dry, indehiscent, few to many seeds",
    Fruit.LEGUME: (
        "dry, from single carpel that opens along two longitudinal slits "
        "(mainly legumes)"
    ),
    Fruit.LOMENT: (
        "dry, from single carpel that transversely breaks into single seeded units"
    ),
    Fruit.NUT: "dry, indehiscent, large, with thick and bony wall around a single seed",
    Fruit.AGGREGATE_OF_NUTS: (
        "as a nut, but an aggregate (i.e. developed from multiple carpels)"
    ),
    Fruit.POME: (
        "fleshy, indehiscent, with soft outer part, and papery structure around seeds"
    ),
    Fruit.SAMARA: "dry, indehiscent, winged, one to two seeds",
    Fruit.SCHIZOCARP: (
        "dry to fleshy, from two to many carpels that dehisces into mericarps "
        "(one to two seeded)"
    ),
    Fruit.SILIQUE: (
        "dehiscent, derived from two carpels, with two halves splitting from a partition"
    ),
    Fruit.UTRICLE: (
        "dry, indehiscent, small, with thin wall that is loose and free from a single seed"
    ),
    Fruit.NONE: "no fruit to describe",
}
