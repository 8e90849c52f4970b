"""
Embedded reference table of known compounds.

Rows are plain dicts so the same shape can come from a CSV or JSON resource.
Table order matters: it breaks ties between equally scored candidates.
"""

from typing import Any, Dict, Tuple

__all__ = ["DEFAULT_COMPOUND_ROWS"]

DEFAULT_COMPOUND_ROWS: Tuple[Dict[str, Any], ...] = (
    # ====================================================================
    # Hydrogen-Oxygen
    # ====================================================================
    {
        "elements": ("H", "O"),
        "ratios": {"H": 2, "O": 1},
        "formula": "H₂O",
        "name": "Water",
        "description": "Essential for life, universal solvent",
        "stability": "high",
        "safety_level": "safe",
        "state": "liquid",
        "color": "#4F94CD",
        "formation": "common",
        "common_use": "Drinking, industrial processes",
    },
    {
        "elements": ("H", "O"),
        "ratios": {"H": 2, "O": 2},
        "formula": "H₂O₂",
        "name": "Hydrogen Peroxide",
        "description": "Strong oxidizing agent, antiseptic",
        "stability": "medium",
        "safety_level": "caution",
        "state": "liquid",
        "color": "#B0E0E6",
        "formation": "synthetic",
        "common_use": "Disinfectant, bleaching agent",
    },
    # ====================================================================
    # Carbon-Oxygen
    # ====================================================================
    {
        "elements": ("C", "O"),
        "ratios": {"C": 1, "O": 1},
        "formula": "CO",
        "name": "Carbon Monoxide",
        "description": "Toxic gas, binds to hemoglobin",
        "stability": "medium",
        "safety_level": "dangerous",
        "state": "gas",
        "color": "#696969",
        "formation": "common",
        "common_use": "Industrial reducing agent",
    },
    {
        "elements": ("C", "O"),
        "ratios": {"C": 1, "O": 2},
        "formula": "CO₂",
        "name": "Carbon Dioxide",
        "description": "Greenhouse gas, product of respiration",
        "stability": "high",
        "safety_level": "safe",
        "state": "gas",
        "color": "#D3D3D3",
        "formation": "common",
        "common_use": "Fire extinguishers, carbonation",
    },
    # ====================================================================
    # Nitrogen-Oxygen
    # ====================================================================
    {
        "elements": ("N", "O"),
        "ratios": {"N": 1, "O": 1},
        "formula": "NO",
        "name": "Nitric Oxide",
        "description": "Signaling molecule, vasodilator",
        "stability": "low",
        "safety_level": "caution",
        "state": "gas",
        "color": "#8B0000",
        "formation": "synthetic",
        "common_use": "Medical applications, industrial processes",
    },
    {
        "elements": ("N", "O"),
        "ratios": {"N": 1, "O": 2},
        "formula": "NO₂",
        "name": "Nitrogen Dioxide",
        "description": "Brown toxic gas, air pollutant",
        "stability": "medium",
        "safety_level": "dangerous",
        "state": "gas",
        "color": "#8B4513",
        "formation": "common",
        "common_use": "Nitric acid production",
    },
    {
        "elements": ("N", "O"),
        "ratios": {"N": 2, "O": 1},
        "formula": "N₂O",
        "name": "Nitrous Oxide",
        "description": "Laughing gas, anesthetic",
        "stability": "high",
        "safety_level": "caution",
        "state": "gas",
        "color": "#E0E0E0",
        "formation": "synthetic",
        "common_use": "Medical anesthesia, food industry",
    },
    # ====================================================================
    # Sodium-Chlorine
    # ====================================================================
    {
        "elements": ("Na", "Cl"),
        "ratios": {"Na": 1, "Cl": 1},
        "formula": "NaCl",
        "name": "Sodium Chloride",
        "description": "Table salt, essential electrolyte",
        "stability": "high",
        "safety_level": "safe",
        "state": "solid",
        "color": "#FFFFFF",
        "formation": "common",
        "common_use": "Food seasoning, chemical processes",
    },
    # ====================================================================
    # Extended table
    # ====================================================================
    {
        "elements": ("N", "O"),
        "ratios": {"N": 2, "O": 3},
        "formula": "N₂O₃",
        "name": "Dinitrogen Trioxide",
        "description": "Blue liquid at low temperature",
        "stability": "low",
        "safety_level": "dangerous",
        "state": "liquid",
        "color": "#E1F5FE",
        "formation": "synthetic",
        "common_use": "Chemical intermediate",
    },
    {
        "elements": ("N", "O"),
        "ratios": {"N": 2, "O": 4},
        "formula": "N₂O₄",
        "name": "Dinitrogen Tetroxide",
        "description": "Colorless liquid, rocket fuel oxidizer",
        "stability": "medium",
        "safety_level": "dangerous",
        "state": "liquid",
        "color": "#FFF3E0",
        "formation": "synthetic",
        "common_use": "Rocket propellant",
    },
    {
        "elements": ("N", "O"),
        "ratios": {"N": 2, "O": 5},
        "formula": "N₂O₅",
        "name": "Dinitrogen Pentoxide",
        "description": "White crystalline solid, strong oxidizer",
        "stability": "low",
        "safety_level": "dangerous",
        "state": "solid",
        "color": "#F8F9FA",
        "formation": "synthetic",
        "common_use": "Nitric acid anhydride",
    },
    {
        "elements": ("H", "N"),
        "ratios": {"H": 3, "N": 1},
        "formula": "NH₃",
        "name": "Ammonia",
        "description": "Alkaline gas, essential for life",
        "stability": "high",
        "safety_level": "caution",
        "state": "gas",
        "color": "#F3E5F5",
        "formation": "common",
        "common_use": "Fertilizer, cleaning products",
    },
    {
        "elements": ("H", "N"),
        "ratios": {"H": 4, "N": 2},
        "formula": "N₂H₄",
        "name": "Hydrazine",
        "description": "Rocket fuel, highly toxic",
        "stability": "medium",
        "safety_level": "dangerous",
        "state": "liquid",
        "color": "#FFF3E0",
        "formation": "synthetic",
        "common_use": "Rocket propellant, chemical synthesis",
    },
    {
        "elements": ("H", "C"),
        "ratios": {"H": 4, "C": 1},
        "formula": "CH₄",
        "name": "Methane",
        "description": "Simplest hydrocarbon, natural gas",
        "stability": "high",
        "safety_level": "caution",
        "state": "gas",
        "color": "#E1F5FE",
        "formation": "common",
        "common_use": "Fuel, heating",
    },
    {
        "elements": ("H", "C"),
        "ratios": {"H": 6, "C": 2},
        "formula": "C₂H₆",
        "name": "Ethane",
        "description": "Two-carbon alkane",
        "stability": "high",
        "safety_level": "caution",
        "state": "gas",
        "color": "#E1F5FE",
        "formation": "common",
        "common_use": "Petrochemical feedstock",
    },
    {
        "elements": ("H", "C"),
        "ratios": {"H": 2, "C": 2},
        "formula": "C₂H₂",
        "name": "Acetylene",
        "description": "Highly reactive, welding gas",
        "stability": "low",
        "safety_level": "dangerous",
        "state": "gas",
        "color": "#FFF3E0",
        "formation": "synthetic",
        "common_use": "Welding, chemical synthesis",
    },
    {
        "elements": ("Na", "O", "H"),
        "ratios": {"Na": 1, "O": 1, "H": 1},
        "formula": "NaOH",
        "name": "Sodium Hydroxide",
        "description": "Strong base, caustic soda",
        "stability": "high",
        "safety_level": "dangerous",
        "state": "solid",
        "color": "#F3E5F5",
        "formation": "common",
        "common_use": "Soap making, drain cleaner",
    },
    {
        "elements": ("S", "O"),
        "ratios": {"S": 1, "O": 2},
        "formula": "SO₂",
        "name": "Sulfur Dioxide",
        "description": "Acid rain precursor, preservative",
        "stability": "high",
        "safety_level": "caution",
        "state": "gas",
        "color": "#FFF3E0",
        "formation": "common",
        "common_use": "Food preservation, chemical processes",
    },
    {
        "elements": ("S", "O"),
        "ratios": {"S": 1, "O": 3},
        "formula": "SO₃",
        "name": "Sulfur Trioxide",
        "description": "Forms sulfuric acid in water",
        "stability": "medium",
        "safety_level": "dangerous",
        "state": "gas",
        "color": "#FFCDD2",
        "formation": "synthetic",
        "common_use": "Sulfuric acid production",
    },
    {
        "elements": ("Fe", "O"),
        "ratios": {"Fe": 1, "O": 1},
        "formula": "FeO",
        "name": "Iron(II) Oxide",
        "description": "Black iron oxide, wüstite",
        "stability": "medium",
        "safety_level": "safe",
        "state": "solid",
        "color": "#424242",
        "formation": "common",
        "common_use": "Metallurgy, ceramics",
    },
    {
        "elements": ("Fe", "O"),
        "ratios": {"Fe": 2, "O": 3},
        "formula": "Fe₂O₃",
        "name": "Iron(III) Oxide",
        "description": "Rust, red iron oxide",
        "stability": "high",
        "safety_level": "safe",
        "state": "solid",
        "color": "#D84315",
        "formation": "common",
        "common_use": "Pigments, catalysts",
    },
)
