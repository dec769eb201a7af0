"""
Image SEO metadata for the Belgian market.

Generates multilingual, commercially-phrased image titles and alt texts,
SEO-friendly image filenames, and persuasive word replacements for
general storefront copy.
"""

import random
import re
import time
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .nlp import collapse_whitespace
from .schema import Language
from .text import slugify

ES, EN, NL = Language.ES, Language.EN, Language.NL

# High-commercial intent wording per language
TITLE_PREFIXES = MappingProxyType({
    ES: ("Comprar", "Mejor", "Premium", "Profesional", "Alta Calidad"),
    EN: ("Buy", "Best", "Premium", "Professional", "High Quality"),
    NL: ("Koop", "Beste", "Premium", "Professioneel", "Hoogwaardige"),
})

TITLE_SUFFIXES = MappingProxyType({
    ES: ("- Envío Rápido", "- Precio Garantizado", "en Bélgica", "- Mejor Oferta", "| Entrega Express"),
    EN: ("- Fast Shipping", "- Best Price", "in Belgium", "- Best Deal", "| Express Delivery"),
    NL: ("- Snelle Verzending", "- Beste Prijs", "in België", "- Beste Aanbieding", "| Express Levering"),
})

ALT_MODIFIERS = MappingProxyType({
    ES: ("exclusivo", "auténtico", "garantizado", "original", "certificado"),
    EN: ("exclusive", "authentic", "guaranteed", "original", "certified"),
    NL: ("exclusief", "authentiek", "gegarandeerd", "origineel", "gecertificeerd"),
})

# Product name fragment -> descriptive product type, first match wins
PRODUCT_TYPES = MappingProxyType({
    ES: MappingProxyType({
        "3d": "impresión 3D", "print": "impresión 3D", "modelo": "modelo 3D",
        "figura": "figura decorativa", "prototipo": "prototipo profesional",
        "personalizado": "producto personalizado",
    }),
    EN: MappingProxyType({
        "3d": "3D printing", "print": "3D printing", "model": "3D model",
        "figure": "decorative figure", "prototype": "professional prototype",
        "custom": "custom product",
    }),
    NL: MappingProxyType({
        "3d": "3D-printen", "print": "3D-printen", "model": "3D-model",
        "figuur": "decoratieve figuur", "prototype": "professioneel prototype",
        "aangepast": "aangepast product",
    }),
})

_PRODUCT_TYPE_MARKERS = (
    "3d", "print", "modelo", "model", "figura", "figure", "figuur",
    "prototipo", "prototype", "personalizado", "custom", "aangepast",
)

# Alt text per image position; the last template is reused for later images
ALT_TEMPLATES = MappingProxyType({
    ES: (
        "Imagen de {name} - Vista principal",
        "{name} - Vista detallada",
        "{name} - Otra perspectiva",
        "Producto {name} en detalle",
        "Vista de {name} - {modifier}",
    ),
    EN: (
        "Image of {name} - Main view",
        "{name} - Detailed view",
        "{name} - Another perspective",
        "Product {name} in detail",
        "View of {name} - {modifier}",
    ),
    NL: (
        "Afbeelding van {name} - Hoofdaanzicht",
        "{name} - Gedetailleerde weergave",
        "{name} - Ander perspectief",
        "Product {name} in detail",
        "Aanzicht van {name} - {modifier}",
    ),
})

PERSUASIVE_REPLACEMENTS: Mapping[Language, Mapping[str, str]] = MappingProxyType({
    ES: MappingProxyType({
        "producto": "producto premium", "servicio": "servicio profesional",
        "comprar": "obtener ahora", "precio": "oferta especial",
        "calidad": "calidad garantizada", "entrega": "entrega express",
        "hacer": "descubrir", "ver": "explorar", "obtener": "conseguir hoy",
        "disponible": "disponible ahora", "nuevo": "exclusivo",
    }),
    EN: MappingProxyType({
        "product": "premium product", "service": "professional service",
        "buy": "get now", "price": "special offer",
        "quality": "guaranteed quality", "delivery": "express delivery",
        "make": "discover", "see": "explore", "get": "get today",
        "available": "available now", "new": "exclusive",
    }),
    NL: MappingProxyType({
        "product": "premiumproduct", "dienst": "professionele dienst",
        "kopen": "nu verkrijgen", "prijs": "speciale aanbieding",
        "kwaliteit": "gegarandeerde kwaliteit", "levering": "expreslevering",
        "maken": "ontdekken", "zien": "verkennen", "krijgen": "vandaag krijgen",
        "beschikbaar": "nu beschikbaar", "nieuw": "exclusief",
    }),
})


def _clean(text: str) -> str:
    return collapse_whitespace(text).replace("<", "").replace(">", "")


def detect_product_type(product_name: str) -> Optional[str]:
    """Return the first product type marker found in the product name."""
    name_lower = product_name.lower()
    return next((marker for marker in _PRODUCT_TYPE_MARKERS if marker in name_lower), None)


def generate_seo_title(
    product_name: str,
    language: Language,
    enhanced: bool = False,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Build an image title, adding the product type when it is missing.

    With ``enhanced`` a random commercial prefix and suffix are added.
    """
    language = Language(language)
    title = product_name
    product_type = detect_product_type(product_name)
    enhancement = PRODUCT_TYPES[language].get(product_type) if product_type else None
    if enhancement and enhancement.lower() not in title.lower():
        title = f"{title} - {enhancement}"

    if enhanced:
        rng = rng or random.Random()
        prefix = rng.choice(TITLE_PREFIXES[language])
        suffix = rng.choice(TITLE_SUFFIXES[language])
        title = f"{prefix} {title} {suffix}"

    return _clean(title)


def generate_seo_alt_text(
    product_name: str,
    language: Language,
    image_index: int = 0,
    rng: Optional[random.Random] = None,
) -> str:
    """Alt text for the image at ``image_index`` of a product gallery."""
    language = Language(language)
    rng = rng or random.Random()
    templates = ALT_TEMPLATES[language]
    template = templates[max(0, min(image_index, len(templates) - 1))]
    return _clean(template.format(name=product_name, modifier=rng.choice(ALT_MODIFIERS[language])))


def generate_image_seo_metadata(
    product_name: str,
    image_index: int = 0,
    rng: Optional[random.Random] = None,
) -> Dict[str, Dict[str, str]]:
    """
    Generate multilingual SEO metadata for a product image.

    Args:
        product_name: Product name as shown in the shop
        image_index: Position of the image in the product gallery
        rng: Random source for the commercial wording (seed it in tests)

    Returns:
        Dict keyed by language code with ``title``, ``altText`` and
        ``enhancedTitle``
    """
    rng = rng or random.Random()
    return {
        lang.value: {
            "title": generate_seo_title(product_name, lang),
            "altText": generate_seo_alt_text(product_name, lang, image_index, rng),
            "enhancedTitle": generate_seo_title(product_name, lang, enhanced=True, rng=rng),
        }
        for lang in (ES, EN, NL)
    }


def generate_seo_filename(
    product_name: str,
    image_index: int = 0,
    extension: str = "jpg",
    timestamp: Optional[int] = None,
) -> str:
    """
    Generate an SEO-friendly image filename.

    Example:
        >>> generate_seo_filename("Lámpara Luna", 0, "png", timestamp=1700000000000)
        'lampara-luna-1-1700000000000.png'
    """
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return f"{slugify(product_name)}-{image_index + 1}-{timestamp}.{extension}"


def apply_persuasive_keywords(text: str, language: Language) -> str:
    """Replace generic standalone words with high-commercial intent alternatives."""
    result = text
    for original, replacement in PERSUASIVE_REPLACEMENTS[Language(language)].items():
        result = re.sub(rf"\b{re.escape(original)}\b", replacement, result, flags=re.IGNORECASE)
    return result
