"""
Translation tables for the labels the lab produces.

Keys are UI label keys or catalog entity ids. Tables may be partial; the
translator falls back to English and then to the raw key.
"""

from typing import Dict

EN: Dict[str, str] = {
    "solid": "Solid",
    "liquid": "Liquid",
    "gas": "Gas",
    "temp": "Temp",
    "state": "State",
    "reaction_progress": "Reaction in progress",
    "heat_release": "Releasing heat",
    "reaction_paused": "Reaction paused",
    "electron_transfer": "Electron transfer",
    "simulation_on": "SIMULATION ON",
    "simulation_paused": "PAUSED",
    "periodic_table": "Periodic Table",
    "compounds": "Compounds",
    "reactions": "Reactions",
    "atomic_props": "Atomic Properties",
    "atomic_number": "Atomic Number",
    "atomic_mass": "Atomic Mass",
    "category": "Category",
    "config": "Configuration",
    "electronegativity": "Electronegativity",
    "radius": "Atomic Radius",
    "molecular_data": "Molecular Data",
    "formula": "Formula",
    "geometry": "Geometry",
    "atom_count": "Atom Count",
    "bond_types": "Bond Types",
    "reaction_dynamics": "Reaction Dynamics",
    "type": "Type",
    "thermodynamics": "Thermodynamics",
    "reactants": "Reactants",
    "products": "Products",
}

FR: Dict[str, str] = {
    "solid": "Solide",
    "liquid": "Liquide",
    "gas": "Gaz",
    "temp": "Temp",
    "state": "État",
    "reaction_progress": "Réaction en cours",
    "heat_release": "Libération de chaleur",
    "reaction_paused": "Réaction en pause",
    "electron_transfer": "Transfert d'électron",
    "simulation_on": "SIMULATION ACTIVE",
    "simulation_paused": "EN PAUSE",
    "periodic_table": "Tableau périodique",
    "compounds": "Composés",
    "reactions": "Réactions",
    "atomic_props": "Propriétés atomiques",
    "atomic_number": "Numéro atomique",
    "atomic_mass": "Masse atomique",
    "category": "Catégorie",
    "config": "Configuration",
    "electronegativity": "Électronégativité",
    "radius": "Rayon atomique",
    "molecular_data": "Données moléculaires",
    "formula": "Formule",
    "geometry": "Géométrie",
    "atom_count": "Nombre d'atomes",
    "bond_types": "Types de liaison",
    "reaction_dynamics": "Dynamique de réaction",
    "type": "Type",
    "thermodynamics": "Thermodynamique",
    "reactants": "Réactifs",
    "products": "Produits",
    "H": "Hydrogène",
    "C": "Carbone",
    "N": "Azote",
    "O": "Oxygène",
    "Na": "Sodium",
    "Cl": "Chlore",
    "Au": "Or",
    "H2O": "Eau",
    "combustion": "Combustion du méthane",
}

ES: Dict[str, str] = {
    "solid": "Sólido",
    "liquid": "Líquido",
    "gas": "Gas",
    "temp": "Temp",
    "state": "Estado",
    "reaction_progress": "Reacción en curso",
    "heat_release": "Liberando calor",
    "reaction_paused": "Reacción en pausa",
    "electron_transfer": "Transferencia de electrón",
    "simulation_on": "SIMULACIÓN ACTIVA",
    "simulation_paused": "EN PAUSA",
    "periodic_table": "Tabla periódica",
    "compounds": "Compuestos",
    "reactions": "Reacciones",
    "atomic_number": "Número atómico",
    "atomic_mass": "Masa atómica",
    "category": "Categoría",
    "config": "Configuración",
    "electronegativity": "Electronegatividad",
    "radius": "Radio atómico",
    "formula": "Fórmula",
    "geometry": "Geometría",
    "reactants": "Reactivos",
    "products": "Productos",
    "H": "Hidrógeno",
    "O": "Oxígeno",
    "H2O": "Agua",
}

DE: Dict[str, str] = {
    "solid": "Fest",
    "liquid": "Flüssig",
    "gas": "Gasförmig",
    "temp": "Temp",
    "state": "Zustand",
    "reaction_progress": "Reaktion läuft",
    "heat_release": "Wärmefreisetzung",
    "reaction_paused": "Reaktion pausiert",
    "electron_transfer": "Elektronenübertragung",
    "simulation_on": "SIMULATION AN",
    "simulation_paused": "PAUSIERT",
    "periodic_table": "Periodensystem",
    "compounds": "Verbindungen",
    "reactions": "Reaktionen",
    "atomic_number": "Ordnungszahl",
    "atomic_mass": "Atommasse",
    "category": "Kategorie",
    "electronegativity": "Elektronegativität",
    "radius": "Atomradius",
    "formula": "Formel",
    "geometry": "Geometrie",
    "reactants": "Edukte",
    "products": "Produkte",
    "H": "Wasserstoff",
    "O": "Sauerstoff",
    "H2O": "Wasser",
}

JA: Dict[str, str] = {
    "solid": "固体",
    "liquid": "液体",
    "gas": "気体",
    "temp": "温度",
    "state": "状態",
    "reaction_progress": "反応進行中",
    "heat_release": "熱を放出",
    "reaction_paused": "反応一時停止",
    "electron_transfer": "電子移動",
    "simulation_on": "シミュレーション中",
    "simulation_paused": "一時停止",
    "reactants": "反応物",
    "products": "生成物",
}

PT: Dict[str, str] = {
    "solid": "Sólido",
    "liquid": "Líquido",
    "gas": "Gás",
    "state": "Estado",
    "reaction_progress": "Reação em andamento",
    "heat_release": "Liberando calor",
    "reaction_paused": "Reação pausada",
    "electron_transfer": "Transferência de elétron",
    "simulation_on": "SIMULAÇÃO ATIVA",
    "simulation_paused": "PAUSADO",
    "reactants": "Reagentes",
    "products": "Produtos",
}

IT: Dict[str, str] = {
    "solid": "Solido",
    "liquid": "Liquido",
    "gas": "Gas",
    "state": "Stato",
    "reaction_progress": "Reazione in corso",
    "heat_release": "Rilascio di calore",
    "reaction_paused": "Reazione in pausa",
    "electron_transfer": "Trasferimento di elettroni",
    "simulation_on": "SIMULAZIONE ATTIVA",
    "simulation_paused": "IN PAUSA",
    "reactants": "Reagenti",
    "products": "Prodotti",
}

ZH: Dict[str, str] = {
    "solid": "固态",
    "liquid": "液态",
    "gas": "气态",
    "temp": "温度",
    "state": "状态",
    "reaction_progress": "反应进行中",
    "heat_release": "释放热量",
    "reaction_paused": "反应已暂停",
    "electron_transfer": "电子转移",
    "simulation_on": "模拟运行中",
    "simulation_paused": "已暂停",
    "reactants": "反应物",
    "products": "生成物",
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "EN": EN,
    "FR": FR,
    "ES": ES,
    "DE": DE,
    "JA": JA,
    "PT": PT,
    "IT": IT,
    "ZH": ZH,
}

LANGUAGES: Dict[str, str] = {
    "EN": "English",
    "FR": "Français",
    "ES": "Español",
    "DE": "Deutsch",
    "JA": "日本語",
    "PT": "Português",
    "IT": "Italiano",
    "ZH": "中文",
}
