"""
Reference vocabulary for 3D-printing SEO in the Belgian market.

Language-indexed term tables: industry terms, trending modifiers,
Belgian locations, a cross-language translation table and the
"product concept" phrases customers actually search for.

All tables are read-only (tuples inside MappingProxyType) and are
shared by every call; nothing in the engine mutates them.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .schema import Language

ES, EN, NL = Language.ES, Language.EN, Language.NL


def _freeze(table: dict) -> Mapping:
    return MappingProxyType({k: tuple(v) for k, v in table.items()})


# =============================================================================
# Industry Terms
# =============================================================================

INDUSTRY_TERMS: Mapping[Language, Tuple[str, ...]] = _freeze({
    ES: [
        "impresión 3d", "filamento", "pla", "abs", "petg", "nylon", "resina",
        "fdm", "sla", "prototipo", "modelo 3d", "personalizado", "calidad",
        "profesional", "rápido", "envío", "bélgica", "europa", "servicio 3d",
        "fabricación aditiva", "diseño 3d", "impresora 3d",
    ],
    EN: [
        "3d printing", "filament", "pla", "abs", "petg", "nylon", "resin",
        "fdm", "sla", "prototype", "3d model", "custom", "quality",
        "professional", "fast", "shipping", "belgium", "europe", "3d service",
        "additive manufacturing", "3d design", "3d printer",
    ],
    NL: [
        "3d-printen", "filament", "pla", "abs", "petg", "nylon", "hars",
        "fdm", "sla", "prototype", "3d-model", "op maat", "kwaliteit",
        "professioneel", "snel", "verzending", "belgie", "europa", "3d-dienst",
        "additieve fabricage", "3d-ontwerp", "3d-printer",
    ],
})


# =============================================================================
# Trending Modifiers (boost search visibility)
# =============================================================================

TRENDING_MODIFIERS: Mapping[Language, Tuple[str, ...]] = _freeze({
    ES: [
        "mejor", "premium", "económico", "rápido", "profesional",
        "alta calidad", "personalizado", "online", "servicio", "barato",
        "exclusivo", "garantizado", "certificado",
    ],
    EN: [
        "best", "premium", "affordable", "fast", "professional",
        "high quality", "custom", "online", "service", "cheap",
        "exclusive", "guaranteed", "certified",
    ],
    NL: [
        "beste", "premium", "betaalbaar", "snel", "professioneel",
        "hoge kwaliteit", "op maat", "online", "dienst", "goedkoop",
        "exclusief", "gegarandeerd", "gecertificeerd",
    ],
})


# =============================================================================
# Belgian Locations
# =============================================================================

LOCATION_TERMS: Mapping[Language, Tuple[str, ...]] = _freeze({
    ES: ["bélgica", "bruselas", "amberes", "gante", "brujas", "lovaina"],
    EN: ["belgium", "brussels", "antwerp", "ghent", "bruges", "leuven"],
    NL: ["belgie", "brussel", "antwerpen", "gent", "brugge", "leuven"],
})


# =============================================================================
# Cross-language Translations (phrase/word -> es/en/nl)
# =============================================================================

def _triple(es: str, en: str, nl: str) -> Mapping[Language, str]:
    return MappingProxyType({ES: es, EN: en, NL: nl})


_TRANSLATION_GROUPS = [
    # Core industry terms
    (("impresión 3d", "3d printing", "3d-printen"), _triple("impresión 3d", "3d printing", "3d-printen")),
    (("prototipo", "prototype"), _triple("prototipo", "prototype", "prototype")),
    (("personalizado", "custom", "op maat"), _triple("personalizado", "custom", "op maat")),
    (("calidad", "quality", "kwaliteit"), _triple("calidad", "quality", "kwaliteit")),
    (("envío", "shipping", "verzending"), _triple("envío", "shipping", "verzending")),
    (("servicio", "service", "dienst"), _triple("servicio", "service", "dienst")),
    (("profesional", "professional", "professioneel"), _triple("profesional", "professional", "professioneel")),
    # Materials
    (("filamento", "filament"), _triple("filamento", "filament", "filament")),
    (("resina", "resin", "hars"), _triple("resina", "resin", "hars")),
    (("material", "materiaal"), _triple("material", "material", "materiaal")),
    # Product types
    (("modelo", "model"), _triple("modelo", "model", "model")),
    (("pieza", "part", "onderdeel"), _triple("pieza", "part", "onderdeel")),
    (("producto", "product"), _triple("producto", "product", "product")),
    # Actions
    (("comprar", "buy", "kopen"), _triple("comprar", "buy", "kopen")),
    (("cotización", "quote", "offerte"), _triple("cotización", "quote", "offerte")),
    (("precio", "price", "prijs"), _triple("precio", "price", "prijs")),
    # Descriptors
    (("rápido", "fast", "snel"), _triple("rápido", "fast", "snel")),
    (("barato", "cheap", "goedkoop"), _triple("barato", "cheap", "goedkoop")),
    (("mejor", "best", "beste"), _triple("mejor", "best", "beste")),
    # Locations
    (("bélgica", "belgium", "belgie"), _triple("bélgica", "belgium", "belgie")),
    (("bruselas", "brussels", "brussel"), _triple("bruselas", "brussels", "brussel")),
    (("europa", "europe"), _triple("europa", "europe", "europa")),
]

# Insertion order matters: it breaks ties between equally long partial matches
KEYWORD_TRANSLATIONS: Mapping[str, Mapping[Language, str]] = MappingProxyType({
    key: translations
    for keys, translations in _TRANSLATION_GROUPS
    for key in keys
})


# =============================================================================
# Product Concepts (phrases searched in every language)
# =============================================================================

PRODUCT_CONCEPTS: Mapping[str, Mapping[Language, Tuple[str, ...]]] = MappingProxyType({
    "printing_service": _freeze({
        ES: ["servicio de impresión 3d", "impresión 3d profesional", "imprimir en 3d"],
        EN: ["3d printing service", "professional 3d printing", "custom 3d prints"],
        NL: ["3d-printservice", "professionele 3d-printing", "op maat 3d-printen"],
    }),
    "prototype": _freeze({
        ES: ["prototipo rápido", "crear prototipo", "prototipado 3d"],
        EN: ["rapid prototype", "create prototype", "3d prototyping"],
        NL: ["snel prototype", "prototype maken", "3d-prototyping"],
    }),
    "custom_parts": _freeze({
        ES: ["piezas personalizadas", "fabricación a medida", "componentes 3d"],
        EN: ["custom parts", "custom manufacturing", "3d components"],
        NL: ["op maat onderdelen", "maatwerk fabricage", "3d-componenten"],
    }),
    "fast_delivery": _freeze({
        ES: ["envío rápido", "entrega rápida bélgica", "envío a domicilio"],
        EN: ["fast shipping", "quick delivery belgium", "home delivery"],
        NL: ["snelle verzending", "snelle levering belgie", "thuislevering"],
    }),
    "quality": _freeze({
        ES: ["alta calidad 3d", "calidad profesional", "acabado perfecto"],
        EN: ["high quality 3d", "professional quality", "perfect finish"],
        NL: ["hoge kwaliteit 3d", "professionele kwaliteit", "perfecte afwerking"],
    }),
    "pricing": _freeze({
        ES: ["precio competitivo", "cotización gratis", "presupuesto impresión 3d"],
        EN: ["competitive pricing", "free quote", "3d printing quote"],
        NL: ["concurrerende prijs", "gratis offerte", "3d-print offerte"],
    }),
})


# =============================================================================
# Semantic Categories (checked in this order, first match wins)
# =============================================================================

SEMANTIC_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("material", ("pla", "abs", "petg", "nylon", "resina", "resin", "hars",
                  "filamento", "filament", "material", "materiaal")),
    ("service", ("impresión", "printing", "printen", "servicio", "service",
                 "dienst", "cotización", "quote", "offerte")),
    ("quality", ("calidad", "quality", "kwaliteit", "profesional",
                 "professional", "professioneel", "premium")),
    ("product", ("producto", "product", "modelo", "model", "pieza", "part",
                 "onderdeel")),
    ("location", ("bélgica", "belgium", "belgie", "europa", "europe", "envío",
                  "shipping", "verzending", "brussel", "bruselas", "brussels",
                  "antwerpen", "amberes", "antwerp")),
)

DEFAULT_CATEGORY = "general"


# =============================================================================
# Meta Description Calls-to-Action
# =============================================================================

CALLS_TO_ACTION: Tuple[str, ...] = (
    "¡Solicita tu cotización ahora!",
    "Descubre más aquí.",
    "¡Cotiza gratis hoy!",
    "Envío rápido a toda Bélgica.",
)
