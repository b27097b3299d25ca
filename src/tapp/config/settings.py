"""
Configuration settings for the TAPP mock API server
"""

import os
import logging

logger = logging.getLogger(__name__)

# Server configuration
PORT = int(os.getenv("PORT", 8080))
API_PREFIX = os.getenv("API_PREFIX", "/api/v1").rstrip("/")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Seed the in-memory store with sample sessions, positions and instructors
SEED_MOCK_DATA = os.getenv("SEED_MOCK_DATA", "true").lower() in ("1", "true", "yes")

# Offer template files the backend knows about, served by /available_position_templates
AVAILABLE_OFFER_TEMPLATES = [
    name.strip()
    for name in os.getenv(
        "AVAILABLE_OFFER_TEMPLATES",
        "Standard.html,OTO.html,Invigilate.html"
    ).split(",")
    if name.strip()
]

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

if not AVAILABLE_OFFER_TEMPLATES:
    logger.warning("AVAILABLE_OFFER_TEMPLATES is empty - /available_position_templates will return no templates")
