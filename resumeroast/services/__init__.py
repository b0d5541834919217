"""Services for the Resume Roast API."""
from resumeroast.services.scorer import analyze
from resumeroast.services.roaster import roast
from resumeroast.services.improver import improve

__all__ = ["analyze", "roast", "improve"]
