"""
Centralized site configuration.
Edit this file to update the personal details, projects and footer text
displayed on all pages of the site.
"""
import os

SITE_CONFIG = {
    "owner_name":  "Alex Morgan",
    "owner_title": "Graphic & Brand Designer",
    "email":       "hello@alexmorgan.design",
    "phone":       "+1 555 010 2030",
    "location":    "Available for remote work worldwide.",

    # Projects shown in the gallery, in display order
    "projects": [
        {
            "title":    "Nordlicht Coffee",
            "category": "Branding",
            "image":    "https://res.cloudinary.com/demo/image/upload/sample.jpg",
        },
        {
            "title":    "Fieldnotes Packaging",
            "category": "Packaging",
            "image":    "https://ik.imagekit.io/demo/default-image.jpg",
        },
        {
            "title":    "Studio Vela Identity",
            "category": "Logo Design",
            "image":    "https://res.cloudinary.com/demo/image/upload/v1/samples/landscapes/architecture-signs.jpg",
        },
    ],

    # Footer — displayed at the bottom of every page
    "footer_tagline": "Design with intent. Built with Flask and Gemini.",
    "footer_author":  "Alex Morgan",
}

# Third-party service that receives contact-form submissions
FORM_RELAY_URL = os.environ.get("FORM_RELAY_URL") or "https://formspree.io/f/xldopzby"
