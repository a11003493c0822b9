"""
Canned design-idea templates.
Offline alternative to the AI ideas generator: maps a free-text project type
("Logo Design", "I need branding help", ...) to a ready-made outline.

Keys are checked in the order they appear in IDEA_TEMPLATES; first match wins.
"""

IDEA_TEMPLATES: list[tuple[str, str]] = [

    ("logo design", """Design Concepts for Logo:

1. MINIMALIST MARK
   - Clean, geometric shape representing your initials
   - Single color (prefer navy or violet)
   - Scalable across all mediums

2. ABSTRACT ICON
   - Modern symbol reflecting design philosophy
   - Versatile for web & print
   - Memorable and distinctive

3. WORDMARK
   - Custom typography with your name
   - Integrated with a subtle icon
   - Bold, professional presence

Color Palette: Midnight Navy (#0B0F1A), Royal Violet (#8F00FF), Sky Teal (#00E0C6)
Typography: DM Sans or Poppins for modern feel
Style: Contemporary, premium, minimalist"""),

    ("branding", """Complete Branding Strategy:

1. BRAND IDENTITY
   - Core values and mission statement
   - Visual language and design principles
   - Target audience analysis

2. VISUAL SYSTEM
   - Primary logo and variations
   - Color palette with specifications
   - Typography system (headings, body, accents)

3. APPLICATION GUIDELINES
   - Brand positioning and messaging
   - Marketing collateral design
   - Digital & print touchpoints

Recommended Approach: Premium, modern aesthetic with violet and teal accents. Focus on clean, minimalist design reflecting professionalism."""),

    ("social media", """Social Media Content Strategy:

1. VISUAL STYLE
   - Consistent color palette (violet/teal theme)
   - Square and vertical formats
   - High-quality photography & graphics

2. CONTENT PILLARS
   - Portfolio showcases (60%)
   - Design tips & process (20%)
   - Behind-the-scenes content (20%)

3. POSTING SCHEDULE
   - 3-4 posts per week
   - Stories for engagement
   - Reels for reach and discovery

Platforms: Instagram, Pinterest, LinkedIn
Format: Grid-friendly designs with strong visual hierarchy"""),

    ("packaging", """Packaging Design Concepts:

1. STRUCTURAL DESIGN
   - Custom box/container shape
   - Eco-friendly materials option
   - Unboxing experience focus

2. VISUAL DESIGN
   - Brand logo prominently displayed
   - Consistent color scheme
   - Typography hierarchy

3. FUNCTIONAL ELEMENTS
   - QR codes for product info
   - Sustainability messaging
   - Brand story integration

Materials: Premium cardboard, matte finish with spot UV
Design: Modern, luxury feel with your brand colors"""),

    ("print materials", """Print Design Package:

1. BUSINESS CARDS
   - Double-sided design
   - Premium stock (300gsm minimum)
   - Spot UV or foil accents

2. LETTERHEAD & ENVELOPES
   - Consistent brand identity
   - Professional layout
   - Quality paper stock

3. BROCHURES & FLYERS
   - Compelling layout with hierarchy
   - High-resolution images
   - Clear call-to-action

Specifications: CMYK color mode, 300 DPI minimum, bleed requirements
Printing: Professional offset or digital printing"""),

]

_FALLBACK_TEMPLATE = """Design Ideas for "{category}":

1. CONCEPT EXPLORATION
   - 3-5 unique design directions
   - Modern and professional approach
   - Aligned with current trends

2. CREATIVE EXECUTION
   - Color palette with primary and accent colors
   - Typography recommendations
   - Visual style and mood

3. DELIVERABLES
   - High-resolution files
   - Multiple format exports
   - Brand guidelines documentation

Next Steps: Let's discuss your specific vision and requirements to create something exceptional!"""


def fallback(category: str) -> str:
    return _FALLBACK_TEMPLATE.format(category=category)


def lookup(category: str) -> str:
    """Return the idea template for *category*.

    Matches case-insensitively when the category contains a known key or a key
    contains the category. Unknown (or blank) categories get the generic
    template with the category text inserted as-is.
    """
    lowered = category.lower()
    if not lowered.strip():
        return fallback(category)
    for key, template in IDEA_TEMPLATES:
        if key in lowered or lowered in key:
            return template
    return fallback(category)
