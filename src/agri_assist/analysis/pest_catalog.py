"""
Reference information for pests the classifier can recognise.
"""
from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class PestInfo:
    description: str
    damage: str
    treatments: List[str]


PEST_CATALOG: Dict[str, PestInfo] = {
    "aphids": PestInfo(
        description="Aphids are small sap-sucking insects that gather on young shoots and the undersides of leaves.",
        damage="Curled, yellowing leaves, stunted growth and sticky honeydew that encourages sooty mould.",
        treatments=[
            "Spray neem oil (5 ml per litre of water) every 7 days",
            "Encourage ladybirds and lacewings, which feed on aphids",
            "Remove heavily infested shoots",
        ],
    ),
    "armyworm": PestInfo(
        description="Armyworms are moth caterpillars that feed in large groups and move across fields quickly.",
        damage="Ragged holes in leaves, stripped whorls in maize and cut seedlings.",
        treatments=[
            "Hand-pick larvae in the early morning or evening",
            "Apply Bacillus thuringiensis (Bt) sprays on young larvae",
            "Use pheromone traps to monitor moth activity",
        ],
    ),
    "whitefly": PestInfo(
        description="Whiteflies are tiny white winged insects that fly up in clouds when plants are disturbed.",
        damage="Yellowing leaves, reduced vigour and spread of leaf curl viruses.",
        treatments=[
            "Hang yellow sticky traps around the crop",
            "Spray neem oil or insecticidal soap on leaf undersides",
            "Remove and destroy virus-infected plants",
        ],
    ),
    "stem borer": PestInfo(
        description="Stem borers are larvae that tunnel inside the stems of rice, maize and sugarcane.",
        damage="Dead hearts in young plants and white, empty panicles at heading.",
        treatments=[
            "Clip and destroy egg masses on leaf tips before transplanting",
            "Install light traps to catch adult moths",
            "Release Trichogramma egg parasitoids",
        ],
    ),
    "grasshopper": PestInfo(
        description="Grasshoppers are chewing insects that feed on leaves of most field crops.",
        damage="Irregular bites on leaf edges; severe outbreaks can defoliate whole fields.",
        treatments=[
            "Plough field borders after harvest to expose eggs",
            "Spray neem seed kernel extract (5%)",
            "Use poultry to forage in small plots",
        ],
    ),
    "mites": PestInfo(
        description="Spider mites are tiny arachnids that live in fine webbing on leaf undersides.",
        damage="Fine yellow speckling, bronzed leaves and webbing in hot, dry weather.",
        treatments=[
            "Spray plants with water to raise humidity and dislodge mites",
            "Apply wettable sulphur or neem oil",
            "Avoid broad-spectrum insecticides that kill predatory mites",
        ],
    ),
}

GENERIC_PEST_INFO = PestInfo(
    description="I could not find detailed information for this pest.",
    damage="Inspect leaves, stems and roots for holes, discolouration or wilting.",
    treatments=[
        "Remove and destroy badly affected plant parts",
        "Try a neem-based spray as a first, low-toxicity treatment",
        "Ask an agricultural expert before using chemical pesticides",
    ],
)


def lookup_pest(name: str) -> PestInfo:
    """Catalog entry for a classifier label, falling back to generic advice."""
    key = " ".join(name.replace("_", " ").replace("-", " ").lower().split())
    return PEST_CATALOG.get(key, GENERIC_PEST_INFO)
