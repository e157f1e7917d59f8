"""Blueprint registration for the HubSpot practicum server."""

# Blueprint instances are created in their respective files
from .crm import crm_bp

# List of all blueprints to be registered in the main app
blueprints = [
    crm_bp,
]
