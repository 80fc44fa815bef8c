"""Fixed category and agency taxonomies.

Both lists are closed, hand-maintained, and ordered. Category order is
the keyword precedence used by the classifier, so entries must not be
reordered casually.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.types import SourceSpec


@dataclass(frozen=True)
class Category:
    """Static category metadata with classifier keywords."""

    category_id: str
    name: str
    keywords: tuple[str, ...]
    description: str

    @property
    def slug(self) -> str:
        """Return the URL slug, identical to the category id."""
        return self.category_id


@dataclass(frozen=True)
class Agency:
    """Static agency metadata."""

    agency_id: str
    name: str
    slug: str
    description: str
    url: str


CATEGORIES: tuple[Category, ...] = (
    Category(
        "food",
        "Food",
        (
            "food", "meat", "poultry", "dairy", "produce", "snack", "beverage",
            "cereal", "bread", "sauce", "soup", "salad", "cheese", "ice cream",
            "seafood", "fish", "chicken", "beef", "pork", "egg", "nut", "fruit",
            "vegetable",
        ),
        "Food safety recalls including contamination, mislabeling, and undeclared allergens",
    ),
    Category(
        "drugs",
        "Drugs & Medications",
        (
            "drug", "tablet", "capsule", "medication", "pharmaceutical",
            "prescription", "antibiotic", "aspirin", "ibuprofen", "acetaminophen",
            "injection", "oral solution", "ophthalmic",
        ),
        "Prescription and over-the-counter medication recalls",
    ),
    Category(
        "medical-devices",
        "Medical Devices",
        (
            "device", "implant", "catheter", "pump", "monitor", "ventilator",
            "defibrillator", "pacemaker", "stent", "surgical", "diagnostic",
            "infusion", "syringe", "needle", "test kit", "glucose",
            "blood pressure",
        ),
        "Medical device recalls including implants, diagnostic equipment, and surgical tools",
    ),
    Category(
        "vehicles",
        "Vehicles",
        (
            "vehicle", "car", "truck", "suv", "sedan", "motorcycle", "bus",
            "trailer", "tire", "airbag", "seatbelt", "brake", "steering",
            "engine", "transmission", "fuel system",
        ),
        "Vehicle safety recalls from NHTSA including cars, trucks, motorcycles, and equipment",
    ),
    Category(
        "children",
        "Children & Baby Products",
        (
            "child", "infant", "baby", "toddler", "crib", "stroller", "car seat",
            "highchair", "toy", "pacifier", "bottle", "nursery", "playpen",
            "swing", "bassinet", "bouncer",
        ),
        "Children and baby product recalls including toys, cribs, strollers, and car seats",
    ),
    Category(
        "electronics",
        "Electronics",
        (
            "battery", "charger", "laptop", "phone", "tablet", "computer",
            "power supply", "adapter", "cable", "speaker", "headphone",
            "bluetooth", "wireless", "usb", "lithium",
        ),
        "Electronics recalls including batteries, chargers, and consumer devices",
    ),
    Category(
        "household",
        "Household Products",
        (
            "furniture", "mattress", "chair", "table", "shelf", "dresser", "bed",
            "sofa", "couch", "cabinet", "drawer", "desk", "lamp", "candle",
            "curtain", "rug", "carpet", "blind",
        ),
        "Household product recalls including furniture, mattresses, and home goods",
    ),
    Category(
        "outdoor",
        "Outdoor & Sports",
        (
            "bicycle", "bike", "helmet", "camping", "hiking", "climbing", "kayak",
            "boat", "pool", "trampoline", "playground", "golf", "fitness",
            "exercise", "scooter", "skateboard", "atv",
        ),
        "Outdoor, sports, and recreational product recalls",
    ),
    Category(
        "cosmetics",
        "Cosmetics & Personal Care",
        (
            "cosmetic", "shampoo", "lotion", "cream", "sunscreen", "makeup",
            "lipstick", "nail", "hair", "skin", "perfume", "deodorant", "soap",
            "body wash", "toothpaste",
        ),
        "Cosmetics and personal care product recalls",
    ),
    Category(
        "supplements",
        "Dietary Supplements",
        (
            "supplement", "vitamin", "mineral", "protein", "herbal", "probiotic",
            "omega", "dietary", "weight loss", "energy", "amino acid",
        ),
        "Dietary supplement recalls including vitamins, herbs, and protein products",
    ),
    Category(
        "meat-poultry",
        "Meat & Poultry",
        (
            "usda", "fsis", "ground beef", "ground turkey", "sausage", "deli meat",
            "hot dog", "ham", "bacon", "jerky", "ready-to-eat",
        ),
        "USDA-regulated meat, poultry, and processed meat product recalls",
    ),
    Category(
        "appliances",
        "Appliances",
        (
            "appliance", "microwave", "oven", "stove", "dishwasher",
            "refrigerator", "freezer", "washer", "dryer", "heater",
            "air conditioner", "fan", "blender", "toaster", "coffee maker",
            "pressure cooker",
        ),
        "Home and kitchen appliance recalls",
    ),
)

AGENCIES: tuple[Agency, ...] = (
    Agency(
        "fda_food",
        "FDA Food Safety",
        "fda-food",
        "U.S. Food and Drug Administration: food recalls and safety alerts",
        "https://www.fda.gov/safety/recalls-market-withdrawals-safety-alerts",
    ),
    Agency(
        "fda_drug",
        "FDA Drug Safety",
        "fda-drug",
        "U.S. Food and Drug Administration: drug recalls and safety communications",
        "https://www.fda.gov/drugs/drug-safety-and-availability",
    ),
    Agency(
        "fda_device",
        "FDA Medical Devices",
        "fda-device",
        "U.S. Food and Drug Administration: medical device recalls",
        "https://www.fda.gov/medical-devices/medical-device-recalls",
    ),
    Agency(
        "cpsc",
        "CPSC",
        "cpsc",
        "U.S. Consumer Product Safety Commission: consumer product recalls",
        "https://www.cpsc.gov/Recalls",
    ),
    Agency(
        "nhtsa",
        "NHTSA",
        "nhtsa",
        "National Highway Traffic Safety Administration: vehicle safety recalls",
        "https://www.nhtsa.gov/recalls",
    ),
    Agency(
        "usda",
        "USDA FSIS",
        "usda",
        "U.S. Department of Agriculture Food Safety and Inspection Service: "
        "meat and poultry recalls",
        "https://www.fsis.usda.gov/recalls",
    ),
)

DEFAULT_SOURCES: tuple[SourceSpec, ...] = (
    SourceSpec(agency="fda_food", file_name="fda_food.json", shape="fda"),
    SourceSpec(agency="fda_drug", file_name="fda_drug.json", shape="fda"),
    SourceSpec(agency="fda_device", file_name="fda_device.json", shape="fda"),
    SourceSpec(agency="cpsc", file_name="cpsc.json", shape="cpsc"),
    SourceSpec(agency="nhtsa", file_name="nhtsa.json", shape="nhtsa"),
    SourceSpec(agency="usda", file_name="usda.json", shape="fsis"),
)


def category_ids() -> tuple[str, ...]:
    """Return category ids in precedence order."""
    return tuple(category.category_id for category in CATEGORIES)


def agency_ids() -> tuple[str, ...]:
    """Return known agency ids."""
    return tuple(agency.agency_id for agency in AGENCIES)
